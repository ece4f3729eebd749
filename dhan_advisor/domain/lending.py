"""Loan sizing, pricing and tenure rules"""

import math
from fractions import Fraction

MAX_LOAN_CEILING = 10_000_000
RECOMMENDED_SHARE_PERCENT = 70

TIER_MULTIPLIERS = {
    "Excellent": 5.0,
    "Good": 3.5,
    "Fair": 2.0,
}
DEFAULT_MULTIPLIER = 1.0

BASE_INTEREST_RATE = 10.5

# (min_score, min_credit_score, adjustment), first match wins
RATE_ADJUSTMENTS = (
    (80, 750, -2.5),
    (65, 650, -1.5),
    (50, None, 0.0),
)
HIGH_RISK_ADJUSTMENT = 1.5

# (min_loan_amount, months), checked in descending order
TENURE_STEPS = (
    (5_000_000, 84),  # 7 years
    (2_000_000, 60),  # 5 years
    (500_000, 36),  # 3 years
)
DEFAULT_TENURE_MONTHS = 24


def calculate_max_loan(income: int, existing_loans: int, tier: str) -> int:
    """
    Maximum loan amount for an applicant.

    floor(income * tier multiplier * (1 - existing_loans / income)), which is
    floor(multiplier * (income - existing_loans)). Computed exactly, so any
    income size works. Never above MAX_LOAN_CEILING and never below zero.
    """
    if income <= 0 or existing_loans >= income:
        return 0
    multiplier = Fraction(TIER_MULTIPLIERS.get(tier, DEFAULT_MULTIPLIER))
    amount = math.floor(multiplier * (income - existing_loans))
    return min(amount, MAX_LOAN_CEILING)


def calculate_recommended_loan(max_loan_amount: int) -> int:
    """floor(0.7 * max_loan_amount), computed in integers."""
    return max_loan_amount * RECOMMENDED_SHARE_PERCENT // 100


def calculate_interest_rate(score: float, credit_score: int) -> float:
    """Base rate plus the first matching risk adjustment."""
    adjustment = HIGH_RISK_ADJUSTMENT
    for min_score, min_credit, delta in RATE_ADJUSTMENTS:
        if score >= min_score and (min_credit is None or credit_score >= min_credit):
            adjustment = delta
            break
    return BASE_INTEREST_RATE + adjustment


def select_tenure(loan_amount: int) -> int:
    for min_amount, months in TENURE_STEPS:
        if loan_amount >= min_amount:
            return months
    return DEFAULT_TENURE_MONTHS
