"""
Recommendation bands.

Pure step functions of the total score. Bands are evaluated top-down,
the highest qualifying band wins:

  Loan                                 Deposit
  score >= 85 → APPROVED    Excellent  APPROVED  Premium
  score >= 70 → APPROVED    Good       APPROVED  Gold
  score >= 55 → CONDITIONAL Fair       APPROVED  Silver
  score >= 40 → REVIEW      Poor       APPROVED  Bronze
  score <  40 → DENIED      Very Poor  REVIEW    Restricted

Deposits have no hard-deny band.
"""
from __future__ import annotations

from eligibility_engine.schemas.score_result import (
    ColorHint,
    DepositRecommendation,
    DepositStatus,
    LoanRecommendation,
    LoanStatus,
)

LOAN_BANDS: tuple[tuple[int, LoanRecommendation], ...] = (
    (85, LoanRecommendation(
        status=LoanStatus.APPROVED,
        tier="Excellent",
        message="Excellent credit profile - Approved for maximum loan amount",
        color_hint=ColorHint.SUCCESS,
    )),
    (70, LoanRecommendation(
        status=LoanStatus.APPROVED,
        tier="Good",
        message="Good credit profile - Approved with standard terms",
        color_hint=ColorHint.SUCCESS,
    )),
    (55, LoanRecommendation(
        status=LoanStatus.CONDITIONAL,
        tier="Fair",
        message="Fair credit profile - Approved with stricter terms",
        color_hint=ColorHint.WARNING,
    )),
    (40, LoanRecommendation(
        status=LoanStatus.REVIEW,
        tier="Poor",
        message="Poor credit profile - Requires manual review",
        color_hint=ColorHint.WARNING,
    )),
)
LOAN_FLOOR = LoanRecommendation(
    status=LoanStatus.DENIED,
    tier="Very Poor",
    message="Credit profile does not meet minimum requirements",
    color_hint=ColorHint.DANGER,
)

DEPOSIT_BANDS: tuple[tuple[int, DepositRecommendation], ...] = (
    (85, DepositRecommendation(
        status=DepositStatus.APPROVED,
        tier="Premium",
        message="Excellent account - Premium deposit rates available",
        color_hint=ColorHint.SUCCESS,
    )),
    (70, DepositRecommendation(
        status=DepositStatus.APPROVED,
        tier="Gold",
        message="Good account - Standard high interest rate",
        color_hint=ColorHint.SUCCESS,
    )),
    (55, DepositRecommendation(
        status=DepositStatus.APPROVED,
        tier="Silver",
        message="Fair account - Standard interest rate",
        color_hint=ColorHint.INFO,
    )),
    (40, DepositRecommendation(
        status=DepositStatus.APPROVED,
        tier="Bronze",
        message="Basic account - Lower interest rate",
        color_hint=ColorHint.WARNING,
    )),
)
DEPOSIT_FLOOR = DepositRecommendation(
    status=DepositStatus.REVIEW,
    tier="Restricted",
    message="Account requires manual review",
    color_hint=ColorHint.WARNING,
)


def loan_recommendation(total_score: int) -> LoanRecommendation:
    for threshold, band in LOAN_BANDS:
        if total_score >= threshold:
            return band
    return LOAN_FLOOR


def deposit_recommendation(total_score: int) -> DepositRecommendation:
    for threshold, band in DEPOSIT_BANDS:
        if total_score >= threshold:
            return band
    return DEPOSIT_FLOOR


def deposit_tier(total_score: int) -> str:
    """Band name only, always equal to deposit_recommendation(score).tier."""
    return deposit_recommendation(total_score).tier


def is_eligible(status: LoanStatus) -> bool:
    """DENIED is a hard stop; every other loan status may proceed to application."""
    return status != LoanStatus.DENIED
