"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class RiskProfile(str, Enum):
    """Investor risk appetite"""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass(frozen=True)
class GovernmentScheme:
    """Government support program (read-only reference data)"""

    name: str
    description: str
    eligibility: str
    loan_amount: str
    interest_rate: str
    website: str
    category: str


@dataclass(frozen=True)
class ApplicantProfile:
    """Loan applicant's financial profile"""

    income: int  # annual, currency units
    age: int
    business_type: str
    existing_loans: int = 0
    credit_score: int = 650


@dataclass(frozen=True)
class SubScores:
    """Per-metric bucket scores used for aggregation"""

    income: int
    age: int
    credit: int
    dti: int
    dti_ratio: float


@dataclass(frozen=True)
class EligibilityResult:
    """Output of loan eligibility assessment"""

    eligible: bool
    tier: str
    status: str
    score: float
    max_loan_amount: int
    recommended_loan_amount: int
    interest_rate: float
    tenure_months: int
    matched_schemes: Tuple[GovernmentScheme, ...]
    sub_scores: SubScores
    advice: Optional[str] = None


@dataclass(frozen=True)
class SavingsGoal:
    """Savings target the investment plan is solved for"""

    target_amount: int
    timeframe_months: int
    risk_appetite: RiskProfile
    current_savings: int = 0


@dataclass(frozen=True)
class InvestmentPlan:
    """Output of investment planning"""

    target_amount: int
    timeframe_months: int
    monthly_contribution: float
    asset_allocation: Dict[str, float]
    expected_annual_return_percent: float
    projected_final_amount: float
    per_asset_monthly_amounts: Dict[str, float]
    recommendations: Tuple[str, ...] = field(default_factory=tuple)
    advice: Optional[str] = None


@dataclass(frozen=True)
class BudgetProfile:
    """Monthly household figures"""

    income: float
    expenses: float
    savings: float = 0.0
    investments: float = 0.0


@dataclass(frozen=True)
class BudgetPlan:
    """Output of budget planning (50/30/20 split)"""

    income: float
    expenses: float
    monthly_savings: float
    savings_rate_percent: int
    needs_target: float
    wants_target: float
    savings_target: float
    advice: Optional[str] = None
