"""
Derived commercial terms.

Pure functions of (inputs, total_score), independent of the
recommendation, so a caller holding a stored score can recompute them.

  eligible_loan_amount       income × (3x → 10x)
  max_interest_rate          18% → 5%
  max_deposit_amount         balance + income × (2x → 5x)
  recommended_interest_rate  2% → 8%
"""
from __future__ import annotations

from eligibility_engine.scoring.buckets import interpolate, round2, round_half_up

LOAN_INCOME_MULTIPLIER = (3.0, 10.0)
LOAN_RATE_RANGE = (18.0, 5.0)  # (score 0, score 100)

DEPOSIT_INCOME_MULTIPLIER = (2.0, 5.0)
DEPOSIT_RATE_RANGE = (2.0, 8.0)


def eligible_loan_amount(monthly_income: float, total_score: int) -> int:
    multiplier = interpolate(*LOAN_INCOME_MULTIPLIER, total_score)
    return round_half_up(monthly_income * multiplier)


def max_interest_rate(total_score: int) -> float:
    return round2(interpolate(*LOAN_RATE_RANGE, total_score))


def max_deposit_amount(current_balance: float, monthly_income: float, total_score: int) -> int:
    multiplier = interpolate(*DEPOSIT_INCOME_MULTIPLIER, total_score)
    return round_half_up(current_balance + monthly_income * multiplier)


def recommended_interest_rate(total_score: int) -> float:
    return round2(interpolate(*DEPOSIT_RATE_RANGE, total_score))
