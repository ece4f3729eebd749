"""Government scheme matching"""

from typing import Iterable, List, Optional
from dhan_advisor.domain.models import GovernmentScheme

MICRO_CREDIT = "Micro-credit"
BUSINESS_STARTUP = "Business Startup"
LARGE_BUSINESS = "Large Business"
WOMEN_SPECIFIC = "Women-specific"
SAVINGS = "Savings"

MICRO_LOAN_LIMIT = 50_000
SMALL_LOAN_LIMIT = 1_000_000
MAX_MATCHED_SCHEMES = 3


def _matches_loan(scheme: GovernmentScheme, loan_amount: int) -> bool:
    if scheme.category == WOMEN_SPECIFIC:
        return True
    if loan_amount <= MICRO_LOAN_LIMIT and scheme.category == MICRO_CREDIT:
        return True
    if loan_amount <= SMALL_LOAN_LIMIT and scheme.category in (MICRO_CREDIT, BUSINESS_STARTUP):
        return True
    if loan_amount > SMALL_LOAN_LIMIT and scheme.category == LARGE_BUSINESS:
        return True
    return False


def match_schemes(
    schemes: Iterable[GovernmentScheme],
    loan_amount: int,
    category: Optional[str] = None,
) -> List[GovernmentScheme]:
    """
    Schemes applicable to a loan of the given size.

    Women-specific schemes always match; the rest are picked by loan size.
    The result is the first MAX_MATCHED_SCHEMES matches in catalog order.
    This is a stable truncation, not a relevance ranking. `category` is the
    applicant's business context and does not change the filter.
    """
    matched = [scheme for scheme in schemes if _matches_loan(scheme, loan_amount)]
    return matched[:MAX_MATCHED_SCHEMES]


def suggest_schemes(
    schemes: Iterable[GovernmentScheme],
    age: int,
    loan_required: int,
) -> List[GovernmentScheme]:
    """
    Every scheme an applicant could look into, in catalog order.

    Unlike match_schemes this is not truncated, and savings schemes are
    suggested for minors.
    """
    suggested = []
    for scheme in schemes:
        if scheme.category == WOMEN_SPECIFIC:
            suggested.append(scheme)
        elif loan_required <= SMALL_LOAN_LIMIT and scheme.category in (MICRO_CREDIT, BUSINESS_STARTUP):
            suggested.append(scheme)
        elif loan_required > SMALL_LOAN_LIMIT and scheme.category == LARGE_BUSINESS:
            suggested.append(scheme)
        elif age < 18 and scheme.category == SAVINGS:
            suggested.append(scheme)
    return suggested
