"""
Scoring endpoints.

POST /v1/scoring/loan     → loan eligibility
POST /v1/scoring/deposit  → deposit eligibility
POST /v1/scoring/profile  → both, plus the compact summary used by
                            the admin client-profile view

Synchronous request → score → response. Nothing is persisted.
Inputs must arrive fully resolved; no defaults are applied here.
"""
from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from eligibility_engine.core import metrics
from eligibility_engine.core.config import Settings, get_settings
from eligibility_engine.core.errors import InvalidInputError
from eligibility_engine.schemas.profile import (
    DepositScoreSummary,
    LoanScoreSummary,
    ProfileScoreResponse,
    ProfileScoringRequest,
)
from eligibility_engine.schemas.score_result import DepositScoreResult, LoanScoreResult
from eligibility_engine.schemas.scoring_input import DepositScoringInput, LoanScoringInput
from eligibility_engine.scoring.engine import score_deposit, score_loan
from eligibility_engine.scoring.recommendation import is_eligible

logger = structlog.get_logger()
router = APIRouter(prefix="/v1/scoring", tags=["scoring"])


# ── Error mapping ──

async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.warning("invalid_scoring_input", path=request.url.path, field=exc.field)
    return JSONResponse(status_code=422, content={"detail": str(exc), "field": exc.field})


# ── Routes ──

@router.post(
    "/loan",
    response_model=LoanScoreResult,
    summary="Calculate loan eligibility",
    description="Scores credit, income, debt ratio, account age, transactions and employment.",
)
def evaluate_loan(
    payload: LoanScoringInput,
    settings: Settings = Depends(get_settings),
) -> LoanScoreResult:
    logger.info("loan_scoring_started")
    return _run_loan(payload, settings)


@router.post(
    "/deposit",
    response_model=DepositScoreResult,
    summary="Calculate deposit eligibility",
    description="Scores balance history, account age, consistency, stability and deposit history.",
)
def evaluate_deposit(
    payload: DepositScoringInput,
    settings: Settings = Depends(get_settings),
) -> DepositScoreResult:
    logger.info("deposit_scoring_started")
    return _run_deposit(payload, settings)


@router.post(
    "/profile",
    response_model=ProfileScoreResponse,
    summary="Score a client profile for both loans and deposits",
)
def evaluate_profile(
    payload: ProfileScoringRequest,
    settings: Settings = Depends(get_settings),
) -> ProfileScoreResponse:
    loan = _run_loan(payload.loan, settings)
    deposit = _run_deposit(payload.deposit, settings)

    return ProfileScoreResponse(
        loan_score=LoanScoreSummary(
            score=loan.total_score,
            percentage=loan.percentage,
            status=loan.recommendation.status.value,
            tier=loan.recommendation.tier,
            eligible=is_eligible(loan.recommendation.status),
        ),
        deposit_score=DepositScoreSummary(
            score=deposit.total_score,
            percentage=deposit.percentage,
            tier=deposit.deposit_tier,
            interest_rate=deposit.recommended_interest_rate,
        ),
        loan=loan,
        deposit=deposit,
    )


@router.get("/health", tags=["health"])
async def health(settings: Settings = Depends(get_settings)):
    return {"status": "ok", "service": settings.app_name, "model_version": settings.scoring_model_version}


def _run_loan(payload: LoanScoringInput, settings: Settings) -> LoanScoreResult:
    try:
        result = score_loan(payload, model_version=settings.scoring_model_version)
    except InvalidInputError as e:
        metrics.record_invalid_input("loan", e.field)
        raise
    metrics.record_evaluation("loan", result.recommendation.status.value, result.total_score)
    return result


def _run_deposit(payload: DepositScoringInput, settings: Settings) -> DepositScoreResult:
    try:
        result = score_deposit(payload, model_version=settings.scoring_model_version)
    except InvalidInputError as e:
        metrics.record_invalid_input("deposit", e.field)
        raise
    metrics.record_evaluation("deposit", result.recommendation.status.value, result.total_score)
    return result
