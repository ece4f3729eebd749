"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient
from dhan_advisor.api.main import create_app
from dhan_advisor.domain.exceptions import AdvisorServiceError
from dhan_advisor.domain.prompts import BUSINESS_IDEAS_FALLBACK, LOAN_ADVICE_FALLBACK


class DownAdvisor:
    async def generate(self, prompt: str) -> str:
        raise AdvisorServiceError("advisor down")


@pytest.fixture
def degraded_client() -> TestClient:
    """Client whose text advisor always fails"""
    return TestClient(create_app(text_advisor=DownAdvisor()))


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "dhan_loan_assessment_total" in response.text


def test_request_id_header(client: TestClient):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_request_id_propagated(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


def test_eligibility_endpoint_excellent(client: TestClient):
    """Test POST /v1/loan/eligibility for a top applicant"""
    response = client.post(
        "/v1/loan/eligibility",
        json={
            "income": 1_000_000,
            "age": 30,
            "business_type": "Tailoring",
            "existing_loans": 0,
            "credit_score": 800,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["eligible"] is True
    assert data["tier"] == "Excellent"
    assert data["score"] == 100.0
    assert data["max_loan_amount"] == 5_000_000
    assert data["recommended_loan_amount"] == 3_500_000
    assert data["interest_rate"] == 8.0
    assert data["tenure_months"] == 84
    assert len(data["matched_schemes"]) == 3
    assert data["sub_scores"]["dti"] == 100
    assert data["advice"] == "Stub advice"


def test_eligibility_endpoint_without_advice(client: TestClient, stub_advisor):
    response = client.post(
        "/v1/loan/eligibility",
        json={"income": 250_000, "age": 40, "include_advice": False},
    )

    assert response.status_code == 200
    assert response.json()["advice"] is None
    assert stub_advisor.prompts == []


def test_eligibility_endpoint_advisor_down(degraded_client: TestClient):
    """Narrative failure still returns the full numeric result"""
    response = degraded_client.post(
        "/v1/loan/eligibility",
        json={"income": 600_000, "age": 35, "business_type": "Bakery", "credit_score": 700},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["advice"] == LOAN_ADVICE_FALLBACK
    assert data["tier"] == "Excellent"
    assert data["max_loan_amount"] == 3_000_000


def test_eligibility_endpoint_rejects_negative_income(client: TestClient):
    response = client.post("/v1/loan/eligibility", json={"income": -1, "age": 30})
    assert response.status_code == 422


def test_eligibility_endpoint_income_beyond_float_range(client: TestClient):
    """Arbitrarily large incomes are sized exactly and capped, not a server error"""
    response = client.post(
        "/v1/loan/eligibility",
        json={"income": 10**400, "age": 35, "business_type": "Retail", "credit_score": 800},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["tier"] == "Excellent"
    assert data["max_loan_amount"] == 10_000_000
    assert data["recommended_loan_amount"] == 7_000_000


def test_eligibility_endpoint_debt_beyond_float_range(client: TestClient):
    response = client.post(
        "/v1/loan/eligibility",
        json={"income": 1, "age": 35, "existing_loans": 10**400, "include_advice": False},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["sub_scores"]["dti_ratio"] == 1.0
    assert data["max_loan_amount"] == 0


def test_investment_endpoint(client: TestClient):
    """Test POST /v1/investment/plan"""
    response = client.post(
        "/v1/investment/plan",
        json={"target_amount": 600_000, "timeframe_months": 12, "risk_appetite": "MEDIUM"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["monthly_contribution"] == 50_000
    assert data["expected_annual_return_percent"] == pytest.approx(8.725, abs=1e-3)
    assert 624_000 < data["projected_final_amount"] < 625_000
    assert list(data["asset_allocation"]) == ["FD", "Balanced-Funds", "Gold", "Index-Funds", "Liquid"]
    assert data["recommendations"][0] == "₹12500/month in FD"
    assert data["advice"] == "Stub advice"


def test_investment_endpoint_rejects_zero_timeframe(client: TestClient):
    response = client.post(
        "/v1/investment/plan",
        json={"target_amount": 600_000, "timeframe_months": 0, "risk_appetite": "LOW"},
    )
    assert response.status_code == 422


def test_investment_endpoint_rejects_unknown_risk(client: TestClient):
    response = client.post(
        "/v1/investment/plan",
        json={"target_amount": 600_000, "timeframe_months": 12, "risk_appetite": "YOLO"},
    )
    assert response.status_code == 422


def test_schemes_listing(client: TestClient):
    response = client.get("/v1/schemes")
    assert response.status_code == 200
    assert len(response.json()["schemes"]) == 10


def test_schemes_match(client: TestClient):
    response = client.get("/v1/schemes/match", params={"loan_amount": 2_500_000})

    assert response.status_code == 200
    names = [s["name"] for s in response.json()["schemes"]]
    assert names == ["Stand Up India Scheme", "Mahila Udyam Nidhi Scheme", "Dena Shakti Scheme"]


def test_schemes_suggest(client: TestClient):
    response = client.get("/v1/schemes/suggest", params={"age": 15, "loan_required": 100_000})

    assert response.status_code == 200
    categories = [s["category"] for s in response.json()["schemes"]]
    assert "Savings" in categories
    assert "Large Business" not in categories


def test_scheme_details(client: TestClient):
    response = client.get("/v1/schemes/Annapurna Scheme")
    assert response.status_code == 200
    assert response.json()["loan_amount"] == "Up to ₹50,000"


def test_scheme_details_not_found(client: TestClient):
    response = client.get("/v1/schemes/Imaginary Scheme")
    assert response.status_code == 404


def test_budget_endpoint(client: TestClient):
    response = client.post("/v1/budget/plan", json={"income": 40_000, "expenses": 30_000})

    assert response.status_code == 200
    data = response.json()
    assert data["monthly_savings"] == 10_000
    assert data["savings_rate_percent"] == 25
    assert data["advice"] == "Stub advice"


def test_budget_endpoint_rejects_zero_income(client: TestClient):
    response = client.post("/v1/budget/plan", json={"income": 0, "expenses": 100})
    assert response.status_code == 422


def test_business_ideas_endpoint(client: TestClient, stub_advisor):
    response = client.post("/v1/business/ideas", json={"skills": "Pickle making", "budget": 300_000})

    assert response.status_code == 200
    data = response.json()
    assert data == {"skills": "Pickle making", "budget": 300_000, "ideas": "Stub advice"}
    assert "Available budget: ₹3 lakhs" in stub_advisor.prompts[0]


def test_business_ideas_endpoint_advisor_down(degraded_client: TestClient):
    response = degraded_client.post("/v1/business/ideas", json={"skills": "Pickle making", "budget": 300_000})

    assert response.status_code == 200
    assert response.json()["ideas"] == BUSINESS_IDEAS_FALLBACK


@pytest.mark.parametrize(
    "body",
    [
        {"skills": "Pickle making", "budget": -1},
        {"skills": "", "budget": 10_000},
        {"skills": "   ", "budget": 10_000},
        {"budget": 10_000},
    ],
)
def test_business_ideas_endpoint_rejects_invalid_input(client: TestClient, body):
    response = client.post("/v1/business/ideas", json=body)
    assert response.status_code == 422
