"""
Scoring results returned to the calling workflow.

Callers use: totalScore, recommendation.status and the derived terms
to drive the application process (issue / review / stop).
Never persisted by the engine.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LoanStatus(str, Enum):
    APPROVED = "APPROVED"
    CONDITIONAL = "CONDITIONAL"
    REVIEW = "REVIEW"
    DENIED = "DENIED"


class DepositStatus(str, Enum):
    # No DENIED: the lowest deposit band goes to manual review
    APPROVED = "APPROVED"
    REVIEW = "REVIEW"


class ColorHint(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


class _CamelModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class LoanRecommendation(_CamelModel):
    status: LoanStatus
    tier: str
    message: str
    color_hint: ColorHint = Field(alias="colorHint")


class DepositRecommendation(_CamelModel):
    status: DepositStatus
    tier: str
    message: str
    color_hint: ColorHint = Field(alias="colorHint")


class FactorScore(_CamelModel):
    """Individual factor contribution, kept for audit and display."""
    factor_name: str = Field(alias="factorName")
    raw_value: str = Field(alias="rawValue")
    bin_label: str = Field(alias="binLabel")
    points: int
    max_points: int = Field(alias="maxPoints")


class LoanScoreResult(_CamelModel):
    total_score: int = Field(alias="totalScore", ge=0, le=100)
    max_score: int = Field(100, alias="maxScore")
    percentage: int
    probability: float = Field(ge=0, le=1)
    recommendation: LoanRecommendation
    breakdown: dict[str, int] = Field(description="Factor name → points; sums to totalScore")
    factors: list[FactorScore]

    # ── Derived terms ──
    eligible_loan_amount: int = Field(alias="eligibleLoanAmount", description="3x-10x monthly income, saturating at the largest finite float")
    max_interest_rate: float = Field(alias="maxInterestRate", description="18% at score 0 down to 5% at 100")

    model_version: str = Field(alias="modelVersion")


class DepositScoreResult(_CamelModel):
    total_score: int = Field(alias="totalScore", ge=0, le=100)
    max_score: int = Field(100, alias="maxScore")
    percentage: int
    probability: float = Field(ge=0, le=1)
    recommendation: DepositRecommendation
    breakdown: dict[str, int] = Field(description="Factor name → points; sums to totalScore")
    factors: list[FactorScore]

    # ── Derived terms ──
    max_deposit_amount: int = Field(alias="maxDepositAmount", description="Balance + 2x-5x monthly income, saturating at the largest finite float")
    recommended_interest_rate: float = Field(
        alias="recommendedInterestRate", description="2% at score 0 up to 8% at 100"
    )
    deposit_tier: str = Field(alias="depositTier")

    model_version: str = Field(alias="modelVersion")
