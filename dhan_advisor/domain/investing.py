"""Investment planning - allocation, expected return and future value"""

import math
from types import MappingProxyType
from typing import Dict, List, Mapping
from dhan_advisor.domain.models import InvestmentPlan, RiskProfile, SavingsGoal
from dhan_advisor.domain.exceptions import InvalidInputError

# Weight percent per asset class; every row sums to 100
ASSET_ALLOCATIONS: Mapping[RiskProfile, Mapping[str, float]] = MappingProxyType({
    RiskProfile.LOW: MappingProxyType({
        "FD": 40.0,
        "Gov-Securities": 30.0,
        "Gold": 20.0,
        "Liquid": 10.0,
    }),
    RiskProfile.MEDIUM: MappingProxyType({
        "FD": 25.0,
        "Balanced-Funds": 30.0,
        "Gold": 15.0,
        "Index-Funds": 20.0,
        "Liquid": 10.0,
    }),
    RiskProfile.HIGH: MappingProxyType({
        "Equity-Funds": 40.0,
        "Index-Funds": 25.0,
        "FD": 15.0,
        "Gold": 10.0,
        "Stocks": 10.0,
    }),
})

# Expected annual return percent per asset class
ASSET_RETURNS: Mapping[str, float] = MappingProxyType({
    "FD": 6.5,
    "Gov-Securities": 7.0,
    "Gold": 8.0,
    "Balanced-Funds": 10.0,
    "Index-Funds": 12.0,
    "Equity-Funds": 14.0,
    "Stocks": 15.0,
    "Liquid": 5.0,
})
DEFAULT_ASSET_RETURN = 7.0


def validate_goal(goal: SavingsGoal) -> None:
    if goal.timeframe_months <= 0:
        raise InvalidInputError(f"timeframe_months must be positive, got {goal.timeframe_months}")
    if goal.current_savings < 0:
        raise InvalidInputError(f"current_savings must be non-negative, got {goal.current_savings}")


def asset_allocation(risk: RiskProfile) -> Dict[str, float]:
    """Fresh copy of the allocation row for a risk profile."""
    return dict(ASSET_ALLOCATIONS[RiskProfile(risk)])


def expected_annual_return(allocation: Mapping[str, float]) -> float:
    """
    Blended annual return percent: sum of weight/100 * asset return.

    Unknown asset classes are assumed to return DEFAULT_ASSET_RETURN.
    """
    weighted = sum(
        weight * ASSET_RETURNS.get(asset, DEFAULT_ASSET_RETURN)
        for asset, weight in allocation.items()
    )
    return weighted / 100


def required_monthly_contribution(target_amount: float, current_savings: float, timeframe_months: int) -> float:
    if timeframe_months <= 0:
        raise InvalidInputError(f"timeframe_months must be positive, got {timeframe_months}")
    return (target_amount - current_savings) / timeframe_months


def future_value(monthly_contribution: float, months: int, annual_return_percent: float) -> float:
    """
    Future value of an ordinary annuity.

    FV = P * ((1 + r)^n - 1) / r with r the monthly rate. A zero rate
    degenerates to P * n.
    """
    monthly_rate = annual_return_percent / 100 / 12
    if math.isclose(monthly_rate, 0.0, abs_tol=1e-12):
        return monthly_contribution * months
    return monthly_contribution * (((1 + monthly_rate) ** months - 1) / monthly_rate)


def per_asset_amounts(allocation: Mapping[str, float], monthly_contribution: float) -> Dict[str, float]:
    return {asset: weight * monthly_contribution / 100 for asset, weight in allocation.items()}


def recommendation_lines(amounts: Mapping[str, float]) -> List[str]:
    return [f"₹{int(amount)}/month in {asset}" for asset, amount in amounts.items()]


def create_investment_plan(goal: SavingsGoal) -> InvestmentPlan:
    """
    Main entry point: solve the monthly contribution for a savings goal and
    project it forward under the goal's risk allocation.
    """
    validate_goal(goal)

    monthly = required_monthly_contribution(goal.target_amount, goal.current_savings, goal.timeframe_months)
    allocation = asset_allocation(goal.risk_appetite)
    annual_return = expected_annual_return(allocation)
    amounts = per_asset_amounts(allocation, monthly)

    return InvestmentPlan(
        target_amount=goal.target_amount,
        timeframe_months=goal.timeframe_months,
        monthly_contribution=monthly,
        asset_allocation=allocation,
        expected_annual_return_percent=annual_return,
        projected_final_amount=future_value(monthly, goal.timeframe_months, annual_return),
        per_asset_monthly_amounts=amounts,
        recommendations=tuple(recommendation_lines(amounts)),
    )
