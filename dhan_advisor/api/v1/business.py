"""POST /v1/business/ideas - business idea suggestions endpoint"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from dhan_advisor.api.v1.schemas import BusinessIdeasRequest, BusinessIdeasResponse
from dhan_advisor.api.dependencies import get_advisory_service, get_request_id
from dhan_advisor.services.advisory import AdvisoryService
from dhan_advisor.domain.exceptions import InvalidInputError

router = APIRouter()


@router.post("/business/ideas", response_model=BusinessIdeasResponse)
async def suggest_business_ideas(
    request_body: BusinessIdeasRequest,
    request: Request,
    service: AdvisoryService = Depends(get_advisory_service),
):
    """Narrative business ideas for a skill set and budget, or a fixed suggestion when the advisor is down"""
    try:
        ideas = await service.advise_business_ideas(request_body.skills, request_body.budget)
    except InvalidInputError as e:
        logging.warning(f"Invalid business ideas request: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    return BusinessIdeasResponse(skills=request_body.skills, budget=request_body.budget, ideas=ideas)
