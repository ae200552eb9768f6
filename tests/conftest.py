"""Shared test fixtures for the api-envelope test suite."""

from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient

from api_envelope.config.settings import EnvelopeSettings
from api_envelope.main import create_app
from api_envelope.services.user_repository import InMemoryUserRepository

SERVICE_KEY = "test-key"


# ---------------------------------------------------------------------------
# Ensure required env vars are set for EnvelopeSettings in tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _set_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set minimal env vars so EnvelopeSettings can be instantiated in tests."""
    if "ENVELOPE_SERVICE_KEY" not in os.environ:
        monkeypatch.setenv("ENVELOPE_SERVICE_KEY", SERVICE_KEY)


# ---------------------------------------------------------------------------
# Settings and app fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> EnvelopeSettings:
    """Test settings with a generous rate limit and no seeded users."""
    return EnvelopeSettings(
        service_key=SERVICE_KEY,
        rate_limit_tokens=1000,
        rate_limit_interval_seconds=1,
        seed_users=False,
    )


@pytest.fixture
def repository() -> InMemoryUserRepository:
    repo = InMemoryUserRepository()
    repo.add("administrator", "admin@example.com", protected=True)
    return repo


@pytest.fixture
def client(settings: EnvelopeSettings, repository: InMemoryUserRepository) -> TestClient:
    app = create_app(settings, repository=repository)
    return TestClient(app, raise_server_exceptions=False)
