"""Monthly budget planning using the 50/30/20 rule"""

from dhan_advisor.domain.models import BudgetProfile, BudgetPlan
from dhan_advisor.domain.exceptions import InvalidInputError

NEEDS_SHARE = 0.50
WANTS_SHARE = 0.30
SAVINGS_SHARE = 0.20


def create_budget_plan(profile: BudgetProfile) -> BudgetPlan:
    """
    Split income into needs/wants/savings targets and report the current
    savings rate.

    Savings rate is truncated to a whole percent and can be negative when
    expenses exceed income.
    """
    if profile.income <= 0:
        raise InvalidInputError(f"income must be positive, got {profile.income}")
    if profile.expenses < 0:
        raise InvalidInputError(f"expenses must be non-negative, got {profile.expenses}")

    monthly_savings = profile.income - profile.expenses

    return BudgetPlan(
        income=profile.income,
        expenses=profile.expenses,
        monthly_savings=monthly_savings,
        savings_rate_percent=int(monthly_savings / profile.income * 100),
        needs_target=profile.income * NEEDS_SHARE,
        wants_target=profile.income * WANTS_SHARE,
        savings_target=profile.income * SAVINGS_SHARE,
    )
