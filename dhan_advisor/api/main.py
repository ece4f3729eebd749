"""FastAPI application factory"""

from typing import Optional
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from dhan_advisor.api.middleware import RequestIDMiddleware, MetricsMiddleware
from dhan_advisor.api.v1 import budget, business, investments, loans, schemes
from dhan_advisor.infrastructure.clients.advisor import HttpTextAdvisor, TextAdvisor
from dhan_advisor.infrastructure.observability.logging import setup_logging
from dhan_advisor.infrastructure.reference.schemes import SchemeRepository, StaticSchemeRepository
from dhan_advisor.services.advisory import AdvisoryService
from dhan_advisor.config import Settings, settings as default_settings

# Setup structured logging
setup_logging(default_settings.log_level)


def create_app(
    settings: Optional[Settings] = None,
    text_advisor: Optional[TextAdvisor] = None,
    scheme_repository: Optional[SchemeRepository] = None,
) -> FastAPI:
    """Create and configure FastAPI application"""
    settings = settings or default_settings

    app = FastAPI(
        title="Dhan Advisor",
        description="Loan eligibility, government scheme and investment planning service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Reference data and collaborators are built once per app
    app.state.advisory_service = AdvisoryService(
        scheme_repository=scheme_repository or StaticSchemeRepository(),
        text_advisor=text_advisor or HttpTextAdvisor(
            base_url=settings.advisor_api_base,
            timeout=settings.advisor_timeout_seconds,
            max_retries=settings.advisor_max_retries,
            backoff_base=settings.advisor_backoff_base,
        ),
        narrative_timeout=settings.narrative_timeout_seconds,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(loans.router, prefix="/v1", tags=["loans"])
    app.include_router(investments.router, prefix="/v1", tags=["investments"])
    app.include_router(schemes.router, prefix="/v1", tags=["schemes"])
    app.include_router(budget.router, prefix="/v1", tags=["budget"])
    app.include_router(business.router, prefix="/v1", tags=["business"])

    return app


app = create_app()
