"""GET /v1/schemes - government scheme catalog, matching and lookup"""

from dataclasses import asdict
from typing import Iterable, Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from dhan_advisor.api.v1.schemas import SchemeListResponse, SchemeSchema
from dhan_advisor.api.dependencies import get_advisory_service
from dhan_advisor.services.advisory import AdvisoryService
from dhan_advisor.domain.models import GovernmentScheme
from dhan_advisor.domain.exceptions import SchemeNotFoundError

router = APIRouter()


def _to_response(schemes: Iterable[GovernmentScheme]) -> SchemeListResponse:
    return SchemeListResponse(schemes=[SchemeSchema(**asdict(s)) for s in schemes])


@router.get("/schemes", response_model=SchemeListResponse)
def list_schemes(service: AdvisoryService = Depends(get_advisory_service)):
    """Full scheme catalog in table order"""
    return _to_response(service.all_schemes())


@router.get("/schemes/match", response_model=SchemeListResponse)
def match_schemes(
    loan_amount: int = Query(..., ge=0, description="Loan amount in rupees"),
    category: Optional[str] = Query(None, description="Applicant business context"),
    service: AdvisoryService = Depends(get_advisory_service),
):
    """
    Up to three schemes for a loan amount.

    Returns the first matches in catalog order, not ranked by relevance.
    """
    return _to_response(service.match_schemes(loan_amount, category))


@router.get("/schemes/suggest", response_model=SchemeListResponse)
def suggest_schemes(
    age: int = Query(..., ge=0, le=120),
    loan_required: int = Query(..., ge=0),
    service: AdvisoryService = Depends(get_advisory_service),
):
    """Every applicable scheme for an applicant, untruncated"""
    return _to_response(service.suggest_schemes(age, loan_required))


@router.get("/schemes/{name}", response_model=SchemeSchema)
def get_scheme(name: str, service: AdvisoryService = Depends(get_advisory_service)):
    try:
        scheme = service.scheme_details(name)
    except SchemeNotFoundError:
        raise HTTPException(status_code=404, detail="Scheme not found")
    return SchemeSchema(**asdict(scheme))
