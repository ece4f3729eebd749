"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from dhan_advisor.services.advisory import AdvisoryService


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_advisory_service(request: Request) -> AdvisoryService:
    """Provide the advisory service composed for this app"""
    return request.app.state.advisory_service
