"""POST /v1/investment/plan - savings goal investment planning endpoint"""

import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request

from dhan_advisor.api.v1.schemas import InvestmentRequest, InvestmentResponse
from dhan_advisor.api.dependencies import get_advisory_service, get_request_id
from dhan_advisor.services.advisory import AdvisoryService
from dhan_advisor.domain.models import SavingsGoal
from dhan_advisor.domain.exceptions import InvalidInputError
from dhan_advisor.infrastructure.observability.metrics import record_investment_plan
from dhan_advisor.infrastructure.observability.logging import log_plan

router = APIRouter()


@router.post("/investment/plan", response_model=InvestmentResponse)
async def create_plan(
    request_body: InvestmentRequest,
    request: Request,
    service: AdvisoryService = Depends(get_advisory_service),
):
    """
    Build an investment plan for a savings goal.

    Returns the monthly contribution, risk allocation, blended return and
    projected amount at the end of the timeframe.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    goal = SavingsGoal(
        target_amount=request_body.target_amount,
        timeframe_months=request_body.timeframe_months,
        risk_appetite=request_body.risk_appetite,
        current_savings=request_body.current_savings,
    )

    try:
        if request_body.include_advice:
            plan = await service.advise_investment(goal)
        else:
            plan = service.create_investment_plan(goal)

    except InvalidInputError as e:
        logging.warning(f"Invalid savings goal: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_investment_plan(goal.risk_appetite.value)
    log_plan(request_id, goal.risk_appetite.value, plan.monthly_contribution, duration_ms)

    return InvestmentResponse(**asdict(plan))
