"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from dhan_advisor.domain.models import RiskProfile


class EligibilityRequest(BaseModel):
    """Request body for POST /v1/loan/eligibility"""

    income: int = Field(..., ge=0, description="Annual income in rupees")
    age: int = Field(..., ge=0, le=120, description="Applicant age in years")
    business_type: str = Field("", description="Business the loan is for")
    existing_loans: int = Field(0, ge=0, description="Outstanding loan obligations in rupees")
    credit_score: int = Field(650, ge=300, le=900, description="Bureau credit score")
    include_advice: bool = True


class SchemeSchema(BaseModel):
    """Government support scheme"""

    name: str
    description: str
    eligibility: str
    loan_amount: str
    interest_rate: str
    website: str
    category: str


class SubScoresSchema(BaseModel):
    income: int
    age: int
    credit: int
    dti: int
    dti_ratio: float


class EligibilityResponse(BaseModel):
    """Response for POST /v1/loan/eligibility"""

    eligible: bool
    tier: str
    status: str
    score: float
    max_loan_amount: int
    recommended_loan_amount: int
    interest_rate: float
    tenure_months: int
    matched_schemes: List[SchemeSchema]
    sub_scores: SubScoresSchema
    advice: Optional[str] = None


class InvestmentRequest(BaseModel):
    """Request body for POST /v1/investment/plan"""

    target_amount: int = Field(..., gt=0, description="Savings target in rupees")
    timeframe_months: int = Field(..., gt=0, description="Months to reach the target")
    risk_appetite: RiskProfile
    current_savings: int = Field(0, ge=0, description="Amount already saved")
    include_advice: bool = True


class InvestmentResponse(BaseModel):
    """Response for POST /v1/investment/plan"""

    target_amount: int
    timeframe_months: int
    monthly_contribution: float
    asset_allocation: Dict[str, float]
    expected_annual_return_percent: float
    projected_final_amount: float
    per_asset_monthly_amounts: Dict[str, float]
    recommendations: List[str]
    advice: Optional[str] = None


class SchemeListResponse(BaseModel):
    """Response for the scheme listing endpoints"""

    schemes: List[SchemeSchema]


class BudgetRequest(BaseModel):
    """Request body for POST /v1/budget/plan"""

    income: float = Field(..., gt=0, description="Monthly income in rupees")
    expenses: float = Field(..., ge=0, description="Monthly expenses in rupees")
    savings: float = Field(0, ge=0)
    investments: float = Field(0, ge=0)
    include_advice: bool = True


class BudgetResponse(BaseModel):
    """Response for POST /v1/budget/plan"""

    income: float
    expenses: float
    monthly_savings: float
    savings_rate_percent: int
    needs_target: float
    wants_target: float
    savings_target: float
    advice: Optional[str] = None


class BusinessIdeasRequest(BaseModel):
    """Request body for POST /v1/business/ideas"""

    skills: str = Field(..., min_length=1, description="Skills the applicant already has")
    budget: int = Field(..., ge=0, description="Starting capital in rupees")


class BusinessIdeasResponse(BaseModel):
    """Response for POST /v1/business/ideas"""

    skills: str
    budget: int
    ideas: str
