"""
HTTP tests for the scoring endpoints.
"""
import json
import sys

import pytest
from fastapi.testclient import TestClient

from eligibility_engine.main import app

LOAN_PAYLOAD = {
    "creditScore": 720,
    "monthlyIncome": 4_200,
    "monthlyDebt": 900,
    "accountAgeMonths": 26,
    "totalTransactions": 80,
    "averageMonthlyTransactions": 6,
    "employmentYears": 6,
    "currentJobMonths": 14,
}

DEPOSIT_PAYLOAD = {
    "currentBalance": 2_400,
    "averageBalance": 1_100,
    "maxBalance": 5_500,
    "accountAgeMonths": 14,
    "totalTransactions": 55,
    "averageMonthlyTransactions": 4,
    "monthlyVariance": 5,
    "monthsActive": 14,
    "suspiciousActivityCount": 0,
    "previousDeposits": 1,
    "defaultedDeposits": 0,
}


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestLoanEndpoint:
    def test_scores_loan(self, client):
        resp = client.post("/v1/scoring/loan", json=LOAN_PAYLOAD)

        assert resp.status_code == 200
        body = resp.json()
        # 18 + 18 + 12 (ratio ≈ 0.21) + 10 + (5 + 5) + (5 + 6)
        assert body["totalScore"] == 79
        assert body["breakdown"]["debtRatio"] == 12
        assert body["recommendation"] == {
            "status": "APPROVED",
            "tier": "Good",
            "message": "Good credit profile - Approved with standard terms",
            "colorHint": "success",
        }
        assert body["maxInterestRate"] == 7.73
        assert body["eligibleLoanAmount"] == 35_826
        assert body["modelVersion"] == "1.0"

    def test_missing_field_is_rejected(self, client):
        payload = {k: v for k, v in LOAN_PAYLOAD.items() if k != "creditScore"}
        resp = client.post("/v1/scoring/loan", json=payload)
        assert resp.status_code == 422

    def test_non_finite_input(self, client):
        raw = json.dumps(LOAN_PAYLOAD).replace('"monthlyIncome": 4200', '"monthlyIncome": NaN')
        resp = client.post(
            "/v1/scoring/loan",
            content=raw,
            headers={"content-type": "application/json"},
        )
        assert resp.status_code == 422
        assert resp.json()["field"] == "monthly_income"

    def test_huge_income_is_scored(self, client):
        resp = client.post("/v1/scoring/loan", json={**LOAN_PAYLOAD, "monthlyIncome": 1e308})

        assert resp.status_code == 200
        assert resp.json()["eligibleLoanAmount"] == int(sys.float_info.max)


class TestDepositEndpoint:
    def test_scores_deposit(self, client):
        resp = client.post("/v1/scoring/deposit", json=DEPOSIT_PAYLOAD)

        assert resp.status_code == 200
        body = resp.json()
        # (6 + 6 + 3) + 10 + (5 + 5) + 9 + 5
        assert body["totalScore"] == 49
        assert body["depositTier"] == "Bronze"
        assert body["recommendation"]["status"] == "APPROVED"
        assert body["recommendedInterestRate"] == 4.94
        assert body["maxDepositAmount"] == 2_400  # no monthly income supplied


class TestProfileEndpoint:
    def test_scores_both(self, client):
        resp = client.post(
            "/v1/scoring/profile",
            json={"loan": LOAN_PAYLOAD, "deposit": DEPOSIT_PAYLOAD},
        )

        assert resp.status_code == 200
        body = resp.json()
        assert body["loanScore"] == {
            "score": 79, "percentage": 79, "status": "APPROVED", "tier": "Good", "eligible": True,
        }
        assert body["depositScore"] == {"score": 49, "percentage": 49, "tier": "Bronze", "interestRate": 4.94}
        assert body["loan"]["totalScore"] == 79
        assert body["deposit"]["depositTier"] == "Bronze"

    def test_denied_loan_is_not_eligible(self, client):
        thin_file = {
            "creditScore": 300,
            "monthlyIncome": 500,
            "monthlyDebt": 400,
            "accountAgeMonths": 1,
            "totalTransactions": 5,
            "averageMonthlyTransactions": 1,
            "employmentYears": 0,
            "currentJobMonths": 1,
        }
        resp = client.post(
            "/v1/scoring/profile",
            json={"loan": thin_file, "deposit": DEPOSIT_PAYLOAD},
        )

        assert resp.status_code == 200
        summary = resp.json()["loanScore"]
        assert summary["status"] == "DENIED"
        assert summary["eligible"] is False


class TestServiceEndpoints:
    def test_health(self, client):
        resp = client.get("/v1/scoring/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"

    def test_metrics_exposed(self, client):
        client.post("/v1/scoring/loan", json=LOAN_PAYLOAD)
        resp = client.get("/metrics/")
        assert resp.status_code == 200
        assert "eligibility_evaluations_total" in resp.text
