"""POST /v1/budget/plan - monthly budget planning endpoint"""

import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request

from dhan_advisor.api.v1.schemas import BudgetRequest, BudgetResponse
from dhan_advisor.api.dependencies import get_advisory_service, get_request_id
from dhan_advisor.services.advisory import AdvisoryService
from dhan_advisor.domain.models import BudgetProfile
from dhan_advisor.domain.exceptions import InvalidInputError

router = APIRouter()


@router.post("/budget/plan", response_model=BudgetResponse)
async def create_budget(
    request_body: BudgetRequest,
    request: Request,
    service: AdvisoryService = Depends(get_advisory_service),
):
    """Split monthly income with the 50/30/20 rule and report the savings rate"""
    profile = BudgetProfile(
        income=request_body.income,
        expenses=request_body.expenses,
        savings=request_body.savings,
        investments=request_body.investments,
    )

    try:
        if request_body.include_advice:
            plan = await service.advise_budget(profile)
        else:
            plan = service.create_budget_plan(profile)

    except InvalidInputError as e:
        logging.warning(f"Invalid budget: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    return BudgetResponse(**asdict(plan))
