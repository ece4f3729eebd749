"""Unit tests for loan sizing, pricing and tenure rules"""

import pytest
from dhan_advisor.domain.lending import (
    MAX_LOAN_CEILING,
    calculate_interest_rate,
    calculate_max_loan,
    calculate_recommended_loan,
    select_tenure,
)


@pytest.mark.parametrize(
    "tier, expected",
    [
        ("Excellent", 2_000_000),  # x5.0
        ("Good", 1_400_000),  # x3.5
        ("Fair", 800_000),  # x2.0
        ("Needs Improvement", 400_000),  # x1.0
    ],
)
def test_max_loan_tier_multipliers(tier, expected):
    assert calculate_max_loan(400_000, 0, tier) == expected


def test_max_loan_scaled_by_debt_ratio():
    # 600000 * 3.5 * (1 - 0.25)
    assert calculate_max_loan(600_000, 150_000, "Good") == 1_575_000


def test_max_loan_floors_fractional_amounts():
    # (333333 - 100000) * 3.5 = 816665.5
    assert calculate_max_loan(333_333, 100_000, "Good") == 816_665


def test_max_loan_hard_ceiling():
    """Very high income never exceeds the ceiling"""
    assert calculate_max_loan(10**15, 0, "Excellent") == MAX_LOAN_CEILING
    assert calculate_max_loan(2_000_001, 0, "Excellent") == MAX_LOAN_CEILING


def test_max_loan_never_negative_when_debt_exceeds_income():
    assert calculate_max_loan(100_000, 300_000, "Fair") == 0
    assert calculate_max_loan(100_000, 100_000, "Excellent") == 0


def test_max_loan_zero_income():
    assert calculate_max_loan(0, 0, "Fair") == 0


def test_max_loan_income_beyond_float_range():
    """Incomes too large for a float still hit the ceiling"""
    assert calculate_max_loan(10**400, 0, "Excellent") == MAX_LOAN_CEILING
    assert calculate_max_loan(10**400, 10**400 - 1, "Needs Improvement") == 1
    assert calculate_max_loan(1, 10**400, "Fair") == 0


@pytest.mark.parametrize(
    "max_loan, expected",
    [(5_000_000, 3_500_000), (10_000_000, 7_000_000), (1, 0), (0, 0), (13, 9), (466_666, 326_666)],
)
def test_recommended_loan_is_seventy_percent_floored(max_loan, expected):
    assert calculate_recommended_loan(max_loan) == expected


@pytest.mark.parametrize(
    "score, credit, expected",
    [
        (100, 800, 8.0),  # top band
        (85, 700, 9.0),  # strong score but credit below 750 falls to second rule
        (70, 660, 9.0),
        (70, 600, 10.5),  # credit below 650 falls to third rule
        (79.99, 900, 9.0),
        (50, 900, 10.5),
        (49.99, 900, 12.0),
        (10, 300, 12.0),
    ],
)
def test_interest_rate_first_match_wins(score, credit, expected):
    assert calculate_interest_rate(score, credit) == pytest.approx(expected)


@pytest.mark.parametrize(
    "amount, months",
    [
        (10_000_000, 84),
        (5_000_000, 84),
        (4_999_999, 60),
        (2_000_000, 60),
        (1_999_999, 36),
        (500_000, 36),
        (499_999, 24),
        (0, 24),
    ],
)
def test_select_tenure_thresholds(amount, months):
    assert select_tenure(amount) == months


def test_tenure_non_decreasing_in_loan_amount():
    amounts = range(0, 10_000_001, 50_000)
    tenures = [select_tenure(a) for a in amounts]
    assert tenures == sorted(tenures)
