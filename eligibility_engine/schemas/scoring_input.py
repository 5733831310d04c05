"""
Scoring inputs.

Built per request by the calling workflow from a client's financial
profile. The engine applies no defaults: every field must already be
resolved by the caller (the only optional field is the deposit-side
monthly_income, which only feeds deposit amount sizing).

Ranges (>= 0) describe the domain; they are not enforced here.
Out-of-range values fall into the lowest matching bucket.

JSON names are camelCase; Python attribute names are accepted too.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LoanScoringInput(BaseModel):
    """Signals consumed by the loan scorer."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    credit_score: int = Field(alias="creditScore", description="Bureau score, typically 300-850")
    monthly_income: float = Field(alias="monthlyIncome")
    monthly_debt: float = Field(alias="monthlyDebt", description="Sum of monthly debt obligations")
    account_age_months: int = Field(alias="accountAgeMonths")
    total_transactions: int = Field(alias="totalTransactions")
    average_monthly_transactions: float = Field(alias="averageMonthlyTransactions")
    employment_years: float = Field(alias="employmentYears")
    current_job_months: int = Field(alias="currentJobMonths")


class DepositScoringInput(BaseModel):
    """Signals consumed by the deposit scorer."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Balance history
    current_balance: float = Field(alias="currentBalance")
    average_balance: float = Field(alias="averageBalance")
    max_balance: float = Field(alias="maxBalance")

    account_age_months: int = Field(alias="accountAgeMonths")

    # Transaction behaviour
    total_transactions: int = Field(alias="totalTransactions")
    average_monthly_transactions: float = Field(
        alias="averageMonthlyTransactions",
        description="Carried for audit; does not contribute points",
    )
    monthly_variance: float = Field(
        alias="monthlyVariance",
        description="Dispersion of monthly transaction counts, lower = more consistent",
    )

    # Stability + history
    months_active: int = Field(alias="monthsActive")
    suspicious_activity_count: int = Field(alias="suspiciousActivityCount")
    previous_deposits: int = Field(alias="previousDeposits")
    defaulted_deposits: int = Field(alias="defaultedDeposits")

    monthly_income: float = Field(0.0, alias="monthlyIncome", description="Only used for deposit amount sizing")
