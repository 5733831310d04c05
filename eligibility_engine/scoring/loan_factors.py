"""
Loan Eligibility: 6 Factor Definitions

Each factor:
  1. Takes raw input from the scoring input
  2. Maps it to a bucket (top-down, first match wins)
  3. Returns the points for that bucket, capped at the factor maximum

Factor maxima sum to 100:

  creditScore   20
  income        20
  debtRatio     15
  accountAge    15
  transactions  15
  employment    15

Convention: HIGHER points = BETTER applicant.
"""
from __future__ import annotations

from dataclasses import dataclass

from eligibility_engine.scoring.buckets import (
    cap,
    label_at_least,
    label_at_most,
    points_at_least,
    points_at_most,
)


@dataclass(frozen=True)
class FactorResult:
    factor_name: str
    raw_value: str
    bin_label: str
    points: int
    max_points: int


# ═══════════════════════════════════════════════════════════════
# 1. CREDIT SCORE  (max 20)
#    Bureau score, typical range 300-850
# ═══════════════════════════════════════════════════════════════
CREDIT_SCORE_MAX = 20
CREDIT_SCORE_TABLE = (
    (750, 20),
    (700, 18),
    (650, 15),
    (600, 10),
    (550, 5),
)
CREDIT_SCORE_FALLBACK = 0


def score_credit_score(credit_score: int) -> FactorResult:
    points = points_at_least(credit_score, CREDIT_SCORE_TABLE, CREDIT_SCORE_FALLBACK)
    return FactorResult(
        "creditScore",
        str(credit_score),
        label_at_least(credit_score, CREDIT_SCORE_TABLE),
        cap(points, CREDIT_SCORE_MAX),
        CREDIT_SCORE_MAX,
    )


# ═══════════════════════════════════════════════════════════════
# 2. MONTHLY INCOME  (max 20)
# ═══════════════════════════════════════════════════════════════
INCOME_MAX = 20
INCOME_TABLE = (
    (5000, 20),
    (4000, 18),
    (3000, 16),
    (2000, 13),
    (1000, 8),
)
INCOME_FALLBACK = 2


def score_income(monthly_income: float) -> FactorResult:
    points = points_at_least(monthly_income, INCOME_TABLE, INCOME_FALLBACK)
    return FactorResult(
        "income",
        f"{monthly_income:.2f}",
        label_at_least(monthly_income, INCOME_TABLE),
        cap(points, INCOME_MAX),
        INCOME_MAX,
    )


# ═══════════════════════════════════════════════════════════════
# 3. DEBT-TO-INCOME RATIO  (max 15)
#    DTI = monthly_debt / monthly_income, lower is better
# ═══════════════════════════════════════════════════════════════
DEBT_RATIO_MAX = 15
DEBT_RATIO_TABLE = (
    (0.2, 15),  # Excellent
    (0.3, 12),  # Good
    (0.4, 9),   # Fair
    (0.5, 5),   # Poor
)
DEBT_RATIO_FALLBACK = 0  # Too much debt


def score_debt_ratio(monthly_debt: float, monthly_income: float) -> FactorResult:
    # No income means no ratio to reward
    if monthly_income <= 0:
        return FactorResult("debtRatio", "N/A", "NO_INCOME", 0, DEBT_RATIO_MAX)

    ratio = monthly_debt / monthly_income
    points = points_at_most(ratio, DEBT_RATIO_TABLE, DEBT_RATIO_FALLBACK)
    return FactorResult(
        "debtRatio",
        f"{ratio:.2f}",
        label_at_most(ratio, DEBT_RATIO_TABLE),
        cap(points, DEBT_RATIO_MAX),
        DEBT_RATIO_MAX,
    )


# ═══════════════════════════════════════════════════════════════
# 4. ACCOUNT AGE  (max 15)
# ═══════════════════════════════════════════════════════════════
ACCOUNT_AGE_MAX = 15
ACCOUNT_AGE_TABLE = (
    (60, 15),  # 5+ years
    (36, 12),  # 3+ years
    (24, 10),  # 2+ years
    (12, 7),   # 1+ year
    (6, 4),    # 6+ months
)
ACCOUNT_AGE_FALLBACK = 1  # New account


def score_account_age(account_age_months: int) -> FactorResult:
    points = points_at_least(account_age_months, ACCOUNT_AGE_TABLE, ACCOUNT_AGE_FALLBACK)
    return FactorResult(
        "accountAge",
        f"{account_age_months}m",
        label_at_least(account_age_months, ACCOUNT_AGE_TABLE),
        cap(points, ACCOUNT_AGE_MAX),
        ACCOUNT_AGE_MAX,
    )


# ═══════════════════════════════════════════════════════════════
# 5. TRANSACTION HISTORY  (max 15)
#    Volume + monthly consistency
# ═══════════════════════════════════════════════════════════════
TRANSACTIONS_MAX = 15
TOTAL_TRANSACTIONS_TABLE = (
    (100, 8),
    (50, 5),
    (20, 3),
)
TOTAL_TRANSACTIONS_FALLBACK = 1
MONTHLY_TRANSACTIONS_TABLE = (
    (10, 7),
    (5, 5),
    (2, 3),
)
MONTHLY_TRANSACTIONS_FALLBACK = 1


def score_transaction_history(
    total_transactions: int,
    average_monthly_transactions: float,
) -> FactorResult:
    points = points_at_least(
        total_transactions, TOTAL_TRANSACTIONS_TABLE, TOTAL_TRANSACTIONS_FALLBACK
    ) + points_at_least(
        average_monthly_transactions, MONTHLY_TRANSACTIONS_TABLE, MONTHLY_TRANSACTIONS_FALLBACK
    )
    return FactorResult(
        "transactions",
        f"{total_transactions} total, {average_monthly_transactions:g}/month",
        f"{label_at_least(total_transactions, TOTAL_TRANSACTIONS_TABLE)} total, "
        f"{label_at_least(average_monthly_transactions, MONTHLY_TRANSACTIONS_TABLE)}/month",
        cap(points, TRANSACTIONS_MAX),
        TRANSACTIONS_MAX,
    )


# ═══════════════════════════════════════════════════════════════
# 6. EMPLOYMENT STABILITY  (max 15)
#    Overall experience + tenure in the current job
# ═══════════════════════════════════════════════════════════════
EMPLOYMENT_MAX = 15
EMPLOYMENT_YEARS_TABLE = (
    (10, 7),
    (5, 5),
    (2, 3),
)
EMPLOYMENT_YEARS_FALLBACK = 1
CURRENT_JOB_TABLE = (
    (36, 8),
    (12, 6),
    (6, 4),
)
CURRENT_JOB_FALLBACK = 2


def score_employment(employment_years: float, current_job_months: int) -> FactorResult:
    points = points_at_least(
        employment_years, EMPLOYMENT_YEARS_TABLE, EMPLOYMENT_YEARS_FALLBACK
    ) + points_at_least(current_job_months, CURRENT_JOB_TABLE, CURRENT_JOB_FALLBACK)
    return FactorResult(
        "employment",
        f"{employment_years:g}y, {current_job_months}m current",
        f"{label_at_least(employment_years, EMPLOYMENT_YEARS_TABLE)}y, "
        f"{label_at_least(current_job_months, CURRENT_JOB_TABLE)}m current",
        cap(points, EMPLOYMENT_MAX),
        EMPLOYMENT_MAX,
    )
