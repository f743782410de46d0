"""Pytest configuration and fixtures for HTTP-level tests."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_http_session, get_order_relay_service, get_settings
from api.main import app


@pytest.fixture
def test_client(relay_service) -> TestClient:
    """FastAPI test client whose relay service runs on in-memory fakes."""
    app.dependency_overrides[get_order_relay_service] = lambda: relay_service

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()


@pytest.fixture
def wired_client(app_settings, fake_session) -> TestClient:
    """
    Test client using the real token provider, SP-API client and service,
    with only the aiohttp session and settings replaced.
    """
    async def override_http_session():
        yield fake_session

    app.dependency_overrides[get_settings] = lambda: app_settings
    app.dependency_overrides[get_http_session] = override_http_session

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
