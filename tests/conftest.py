"""
conftest.py

Shared pytest fixtures for scriptorium tests.
"""

import pytest
from fastapi.testclient import TestClient

from scriptorium.application.dto.schemas import PoemRequest
from scriptorium.web.deps import get_text_provider
from scriptorium.web.main import create_app
from tests.fakes import FailingProvider, FakeProvider


@pytest.fixture
def poem_request() -> PoemRequest:
    return PoemRequest(
        character="hero",
        location="castle",
        event="battle",
        emotion="sorrow",
        language="english",
    )


@pytest.fixture
def poem_payload(poem_request: PoemRequest) -> dict:
    return poem_request.model_dump()


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def failing_provider() -> FailingProvider:
    return FailingProvider()


def make_client(provider) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_text_provider] = lambda: provider
    return TestClient(app)


@pytest.fixture
def client(fake_provider: FakeProvider) -> TestClient:
    """HTTP client wired to the recording fake provider."""
    return make_client(fake_provider)
