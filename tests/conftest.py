"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from dhan_advisor.api.main import create_app
from dhan_advisor.domain.models import ApplicantProfile
from dhan_advisor.infrastructure.reference.schemes import StaticSchemeRepository
from dhan_advisor.services.advisory import AdvisoryService


class StubAdvisor:
    """Text advisor that echoes a canned answer and records prompts"""

    def __init__(self, text: str = "Stub advice"):
        self.text = text
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.text


@pytest.fixture
def stub_advisor() -> StubAdvisor:
    return StubAdvisor()


@pytest.fixture
def scheme_repository() -> StaticSchemeRepository:
    return StaticSchemeRepository()


@pytest.fixture
def service(scheme_repository: StaticSchemeRepository, stub_advisor: StubAdvisor) -> AdvisoryService:
    return AdvisoryService(scheme_repository=scheme_repository, text_advisor=stub_advisor, narrative_timeout=1.0)


@pytest.fixture
def client(stub_advisor: StubAdvisor) -> TestClient:
    """Create FastAPI test client with a stub text advisor"""
    app = create_app(text_advisor=stub_advisor)
    return TestClient(app)


@pytest.fixture
def strong_applicant() -> ApplicantProfile:
    """Top bucket on every metric"""
    return ApplicantProfile(
        income=1_000_000,
        age=30,
        business_type="Tailoring",
        existing_loans=0,
        credit_score=800,
    )
