"""Advisory service - numeric pipelines plus best-effort narrative advice"""

import asyncio
import dataclasses
import logging
from typing import List, Optional, Tuple

from dhan_advisor.domain import budgeting, investing, scoring, schemes as scheme_rules
from dhan_advisor.domain.exceptions import InvalidInputError, SchemeNotFoundError
from dhan_advisor.domain.models import (
    ApplicantProfile,
    BudgetPlan,
    BudgetProfile,
    EligibilityResult,
    GovernmentScheme,
    InvestmentPlan,
    SavingsGoal,
)
from dhan_advisor.domain.prompts import (
    BUDGET_ADVICE_FALLBACK,
    BUSINESS_IDEAS_FALLBACK,
    INVESTMENT_ADVICE_FALLBACK,
    LOAN_ADVICE_FALLBACK,
    budget_advice_prompt,
    business_ideas_prompt,
    investment_advice_prompt,
    loan_advice_prompt,
)
from dhan_advisor.infrastructure.clients.advisor import TextAdvisor
from dhan_advisor.infrastructure.observability.metrics import narrative_fallback_counter
from dhan_advisor.infrastructure.reference.schemes import SchemeRepository

logger = logging.getLogger(__name__)


class AdvisoryService:
    """
    Entry point for loan, investment and budget decisions.

    The numeric methods are synchronous and pure. The `advise_*` coroutines
    run the same pipeline, then ask the text advisor for a narrative bounded
    by `narrative_timeout`. A failed narrative is replaced by a fixed
    fallback and never affects the numbers.
    """

    def __init__(
        self,
        scheme_repository: SchemeRepository,
        text_advisor: Optional[TextAdvisor] = None,
        narrative_timeout: float = 8.0,
    ):
        self.scheme_repository = scheme_repository
        self.text_advisor = text_advisor
        self.narrative_timeout = narrative_timeout

    # Loans

    def assess_loan_eligibility(self, profile: ApplicantProfile) -> EligibilityResult:
        return scoring.assess_loan_eligibility(profile, self.scheme_repository.all())

    async def advise_loan(self, profile: ApplicantProfile) -> EligibilityResult:
        result = self.assess_loan_eligibility(profile)
        advice = await self._narrate(loan_advice_prompt(profile, result), LOAN_ADVICE_FALLBACK, "loan")
        return dataclasses.replace(result, advice=advice)

    # Schemes

    def match_schemes(self, loan_amount: int, category: Optional[str] = None) -> List[GovernmentScheme]:
        return scheme_rules.match_schemes(self.scheme_repository.all(), loan_amount, category)

    def suggest_schemes(self, age: int, loan_required: int) -> List[GovernmentScheme]:
        return scheme_rules.suggest_schemes(self.scheme_repository.all(), age, loan_required)

    def all_schemes(self) -> Tuple[GovernmentScheme, ...]:
        return self.scheme_repository.all()

    def scheme_details(self, name: str) -> GovernmentScheme:
        scheme = self.scheme_repository.find(name)
        if scheme is None:
            raise SchemeNotFoundError(f"No scheme named {name!r}")
        return scheme

    # Investments

    def create_investment_plan(self, goal: SavingsGoal) -> InvestmentPlan:
        return investing.create_investment_plan(goal)

    async def advise_investment(self, goal: SavingsGoal) -> InvestmentPlan:
        plan = self.create_investment_plan(goal)
        advice = await self._narrate(
            investment_advice_prompt(goal, plan.monthly_contribution),
            INVESTMENT_ADVICE_FALLBACK,
            "investment",
        )
        return dataclasses.replace(plan, advice=advice)

    # Budgets

    def create_budget_plan(self, profile: BudgetProfile) -> BudgetPlan:
        return budgeting.create_budget_plan(profile)

    async def advise_budget(self, profile: BudgetProfile) -> BudgetPlan:
        plan = self.create_budget_plan(profile)
        advice = await self._narrate(budget_advice_prompt(profile, plan), BUDGET_ADVICE_FALLBACK, "budget")
        return dataclasses.replace(plan, advice=advice)

    # Business ideas

    async def advise_business_ideas(self, skills: str, budget: int) -> str:
        """Narrative business ideas for a skill set and starting budget. Text only, no numeric result."""
        if not skills.strip():
            raise InvalidInputError("skills must not be empty")
        if budget < 0:
            raise InvalidInputError(f"budget must be non-negative, got {budget}")
        return await self._narrate(business_ideas_prompt(skills, budget), BUSINESS_IDEAS_FALLBACK, "business_ideas")

    async def _narrate(self, prompt: str, fallback: str, call_site: str) -> str:
        """Advice text for a prompt, or `fallback` if the advisor is absent, slow or failing."""
        if self.text_advisor is None:
            narrative_fallback_counter.labels(call_site=call_site).inc()
            return fallback

        try:
            return await asyncio.wait_for(self.text_advisor.generate(prompt), timeout=self.narrative_timeout)
        except asyncio.TimeoutError:
            logger.warning(
                f"Narrative advice timed out after {self.narrative_timeout}s",
                extra={"call_site": call_site},
            )
        except Exception as e:
            logger.warning(f"Narrative advice failed: {e}", extra={"call_site": call_site})

        narrative_fallback_counter.labels(call_site=call_site).inc()
        return fallback
