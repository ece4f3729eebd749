"""POST /v1/loan/eligibility - loan eligibility assessment endpoint"""

import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request

from dhan_advisor.api.v1.schemas import EligibilityRequest, EligibilityResponse
from dhan_advisor.api.dependencies import get_advisory_service, get_request_id
from dhan_advisor.services.advisory import AdvisoryService
from dhan_advisor.domain.models import ApplicantProfile
from dhan_advisor.domain.exceptions import InvalidInputError
from dhan_advisor.infrastructure.observability.metrics import record_assessment
from dhan_advisor.infrastructure.observability.logging import log_assessment

router = APIRouter()


@router.post("/loan/eligibility", response_model=EligibilityResponse)
async def assess_eligibility(
    request_body: EligibilityRequest,
    request: Request,
    service: AdvisoryService = Depends(get_advisory_service),
):
    """
    Assess loan eligibility for an applicant.

    Flow:
    1. Score income, age, credit and debt-to-income
    2. Aggregate into a tier, size and price the loan, pick a tenure
    3. Match government schemes for the loan size
    4. Attach narrative advice (best effort, fallback on failure)
    """
    start_time = time.time()
    request_id = get_request_id(request)

    profile = ApplicantProfile(
        income=request_body.income,
        age=request_body.age,
        business_type=request_body.business_type,
        existing_loans=request_body.existing_loans,
        credit_score=request_body.credit_score,
    )

    try:
        if request_body.include_advice:
            result = await service.advise_loan(profile)
        else:
            result = service.assess_loan_eligibility(profile)

    except InvalidInputError as e:
        logging.warning(f"Invalid applicant profile: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_assessment(result.tier, result.max_loan_amount)
    log_assessment(request_id, result.tier, result.eligible, result.max_loan_amount, duration_ms)

    return EligibilityResponse(**asdict(result))
