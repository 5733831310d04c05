"""
Eligibility Scoring Engine

Two independent, stateless scorers sharing one shape:

  score_loan(LoanScoringInput)       → LoanScoreResult
  score_deposit(DepositScoringInput) → DepositScoreResult

Each one:
  1. Rejects non-finite numeric input (NaN / ±inf)
  2. Computes every factor (each capped at its own maximum)
  3. Sums the factor points, clamped into [0, 100]
  4. Assigns the recommendation band
  5. Derives the commercial terms from (input, total score)

No I/O, no shared state, no caching: safe to call from any thread.
"""
from __future__ import annotations

import math

import structlog
from pydantic import BaseModel

from eligibility_engine.core.errors import InvalidInputError
from eligibility_engine.schemas.score_result import (
    DepositScoreResult,
    FactorScore,
    LoanScoreResult,
)
from eligibility_engine.schemas.scoring_input import DepositScoringInput, LoanScoringInput
from eligibility_engine.scoring import deposit_factors, loan_factors, terms
from eligibility_engine.scoring.buckets import MAX_SCORE
from eligibility_engine.scoring.loan_factors import FactorResult
from eligibility_engine.scoring.recommendation import (
    deposit_recommendation,
    deposit_tier,
    loan_recommendation,
)

logger = structlog.get_logger()

MODEL_VERSION = "1.0"


def score_loan(data: LoanScoringInput, model_version: str = MODEL_VERSION) -> LoanScoreResult:
    """
    Loan eligibility entry point.
    """
    _ensure_finite(data)

    raw_results = [
        loan_factors.score_credit_score(data.credit_score),
        loan_factors.score_income(data.monthly_income),
        loan_factors.score_debt_ratio(data.monthly_debt, data.monthly_income),
        loan_factors.score_account_age(data.account_age_months),
        loan_factors.score_transaction_history(
            data.total_transactions, data.average_monthly_transactions
        ),
        loan_factors.score_employment(data.employment_years, data.current_job_months),
    ]
    total_score = _total(raw_results)
    recommendation = loan_recommendation(total_score)

    result = LoanScoreResult(
        total_score=total_score,
        max_score=MAX_SCORE,
        percentage=round(total_score),
        probability=total_score / MAX_SCORE,
        recommendation=recommendation,
        breakdown=_breakdown(raw_results),
        factors=_factor_scores(raw_results),
        eligible_loan_amount=terms.eligible_loan_amount(data.monthly_income, total_score),
        max_interest_rate=terms.max_interest_rate(total_score),
        model_version=model_version,
    )

    logger.info(
        "loan_scoring_complete",
        score=total_score,
        status=recommendation.status.value,
        tier=recommendation.tier,
    )
    return result


def score_deposit(data: DepositScoringInput, model_version: str = MODEL_VERSION) -> DepositScoreResult:
    """
    Deposit eligibility entry point.
    """
    _ensure_finite(data)

    raw_results = [
        deposit_factors.score_balance_history(
            data.current_balance, data.average_balance, data.max_balance
        ),
        deposit_factors.score_account_age(data.account_age_months),
        deposit_factors.score_consistency(data.total_transactions, data.monthly_variance),
        deposit_factors.score_stability(data.months_active, data.suspicious_activity_count),
        deposit_factors.score_deposit_experience(data.previous_deposits, data.defaulted_deposits),
    ]
    total_score = _total(raw_results)
    recommendation = deposit_recommendation(total_score)

    result = DepositScoreResult(
        total_score=total_score,
        max_score=MAX_SCORE,
        percentage=round(total_score),
        probability=total_score / MAX_SCORE,
        recommendation=recommendation,
        breakdown=_breakdown(raw_results),
        factors=_factor_scores(raw_results),
        max_deposit_amount=terms.max_deposit_amount(
            data.current_balance, data.monthly_income, total_score
        ),
        recommended_interest_rate=terms.recommended_interest_rate(total_score),
        deposit_tier=deposit_tier(total_score),
        model_version=model_version,
    )

    logger.info(
        "deposit_scoring_complete",
        score=total_score,
        status=recommendation.status.value,
        tier=recommendation.tier,
    )
    return result


# ═══════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════

def _ensure_finite(data: BaseModel) -> None:
    for name in type(data).model_fields:
        value = getattr(data, name)
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidInputError(name, value)


def _total(results: list[FactorResult]) -> int:
    # Factor maxima sum to MAX_SCORE
    return max(0, min(sum(r.points for r in results), MAX_SCORE))


def _breakdown(results: list[FactorResult]) -> dict[str, int]:
    return {r.factor_name: r.points for r in results}


def _factor_scores(results: list[FactorResult]) -> list[FactorScore]:
    return [
        FactorScore(
            factor_name=r.factor_name,
            raw_value=r.raw_value,
            bin_label=r.bin_label,
            points=r.points,
            max_points=r.max_points,
        )
        for r in results
    ]
