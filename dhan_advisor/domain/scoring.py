"""Eligibility scoring engine - rule-table scoring of applicant profiles"""

from typing import Iterable, Tuple
from dhan_advisor.domain.models import ApplicantProfile, EligibilityResult, GovernmentScheme, SubScores
from dhan_advisor.domain.exceptions import InvalidInputError
from dhan_advisor.domain.lending import (
    calculate_interest_rate,
    calculate_max_loan,
    calculate_recommended_loan,
    select_tenure,
)
from dhan_advisor.domain.schemes import match_schemes

# (threshold, score) pairs, checked top-down, first match wins
INCOME_BUCKETS = (
    (1_000_000, 100),  # 10 lakhs+
    (500_000, 85),
    (300_000, 70),
    (180_000, 55),
    (100_000, 40),
)
INCOME_FLOOR_SCORE = 25

# (min_age, max_age, score), inclusive ranges
AGE_BUCKETS = (
    (25, 50, 100),  # Prime working age
    (21, 24, 85),
    (51, 60, 80),
    (18, 20, 70),
)
AGE_DEFAULT_SCORE = 50

EXCELLENT_CREDIT = 750
GOOD_CREDIT = 650
FAIR_CREDIT = 550

CREDIT_BUCKETS = (
    (EXCELLENT_CREDIT, 100),
    (GOOD_CREDIT, 80),
    (FAIR_CREDIT, 60),
)
CREDIT_FLOOR_SCORE = 40

# (max_ratio, score), ratio <= max_ratio
DTI_BUCKETS = (
    (0.2, 100),
    (0.4, 75),
    (0.5, 50),
)
DTI_CEILING_SCORE = 25

# Aggregation weights in percent (sum to 100)
WEIGHTS = {"income": 35, "age": 15, "credit": 30, "dti": 20}

# (min_score, tier, status line), checked top-down
TIERS = (
    (80, "Excellent", "Excellent - Highly Eligible"),
    (65, "Good", "Good - Eligible with favorable terms"),
    (50, "Fair", "Fair - Eligible with conditions"),
)
LOWEST_TIER = ("Needs Improvement", "Needs Improvement - Consider building credit first")

ELIGIBILITY_THRESHOLD = 50


def validate_profile(profile: ApplicantProfile) -> None:
    """Reject profiles that cannot be scored. Runs before any scoring."""
    if profile.income < 0:
        raise InvalidInputError(f"income must be non-negative, got {profile.income}")
    if profile.existing_loans < 0:
        raise InvalidInputError(f"existing_loans must be non-negative, got {profile.existing_loans}")


def score_income(income: int) -> int:
    for threshold, score in INCOME_BUCKETS:
        if income >= threshold:
            return score
    return INCOME_FLOOR_SCORE


def score_age(age: int) -> int:
    for low, high, score in AGE_BUCKETS:
        if low <= age <= high:
            return score
    return AGE_DEFAULT_SCORE


def score_credit(credit_score: int) -> int:
    for threshold, score in CREDIT_BUCKETS:
        if credit_score >= threshold:
            return score
    return CREDIT_FLOOR_SCORE


def debt_to_income_ratio(existing_loans: int, income: int) -> float:
    """
    Existing obligations over annual income.

    1.0 by convention when income is zero, and capped at 1.0 once debt
    reaches income: every ratio past 0.5 scores the same and leaves
    nothing to lend.
    """
    if income <= 0 or existing_loans >= income:
        return 1.0
    return existing_loans / income


def score_dti(ratio: float) -> int:
    for max_ratio, score in DTI_BUCKETS:
        if ratio <= max_ratio:
            return score
    return DTI_CEILING_SCORE


def calculate_sub_scores(profile: ApplicantProfile) -> SubScores:
    ratio = debt_to_income_ratio(profile.existing_loans, profile.income)
    return SubScores(
        income=score_income(profile.income),
        age=score_age(profile.age),
        credit=score_credit(profile.credit_score),
        dti=score_dti(ratio),
        dti_ratio=ratio,
    )


def aggregate_score(sub_scores: SubScores) -> float:
    """
    Weighted sum of sub-scores on a 0-100 scale.

    Weights: 35% income, 15% age, 30% credit, 20% DTI.
    Sub-scores are integers, so the weighted sum is summed exactly in integer
    percent and divided once.
    """
    weighted = (
        WEIGHTS["income"] * sub_scores.income
        + WEIGHTS["age"] * sub_scores.age
        + WEIGHTS["credit"] * sub_scores.credit
        + WEIGHTS["dti"] * sub_scores.dti
    )
    return weighted / 100


def classify_tier(score: float) -> Tuple[str, str]:
    """Map overall score to (tier, status line)."""
    for min_score, tier, status in TIERS:
        if score >= min_score:
            return tier, status
    return LOWEST_TIER


def is_eligible(score: float) -> bool:
    return score >= ELIGIBILITY_THRESHOLD


def assess_loan_eligibility(
    profile: ApplicantProfile,
    schemes: Iterable[GovernmentScheme],
) -> EligibilityResult:
    """
    Main entry point: score the profile, then size, price and match the loan.

    Returns a complete EligibilityResult without narrative advice.
    """
    validate_profile(profile)

    sub_scores = calculate_sub_scores(profile)
    score = aggregate_score(sub_scores)
    tier, status = classify_tier(score)

    max_loan = calculate_max_loan(profile.income, profile.existing_loans, tier)

    return EligibilityResult(
        eligible=is_eligible(score),
        tier=tier,
        status=status,
        score=score,
        max_loan_amount=max_loan,
        recommended_loan_amount=calculate_recommended_loan(max_loan),
        interest_rate=calculate_interest_rate(score, profile.credit_score),
        tenure_months=select_tenure(max_loan),
        matched_schemes=tuple(match_schemes(schemes, max_loan, profile.business_type)),
        sub_scores=sub_scores,
    )
