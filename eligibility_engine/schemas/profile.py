"""
Client-profile scoring: both scorers in one round trip, plus the
compact summary shown on the admin client-profile view.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from eligibility_engine.schemas.score_result import DepositScoreResult, LoanScoreResult
from eligibility_engine.schemas.scoring_input import DepositScoringInput, LoanScoringInput


class ProfileScoringRequest(BaseModel):
    loan: LoanScoringInput
    deposit: DepositScoringInput


class LoanScoreSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score: int
    percentage: int
    status: str
    tier: str
    eligible: bool = Field(description="False only when the loan is DENIED")


class DepositScoreSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score: int
    percentage: int
    tier: str
    interest_rate: float = Field(alias="interestRate")


class ProfileScoreResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    loan_score: LoanScoreSummary = Field(alias="loanScore")
    deposit_score: DepositScoreSummary = Field(alias="depositScore")
    loan: LoanScoreResult
    deposit: DepositScoreResult
