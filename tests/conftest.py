"""Shared fixtures: settings built in-process and fake upstream collaborators."""

import pytest

from core.application.services import OrderRelayService
from core.settings import AmazonSettings, AppSettings, ServerSettings
from tests.mocks.fake_http import FakeClientSession
from tests.mocks.fake_spapi import FakeSpApiClient, FakeTokenProvider
from tests.mocks.samples import make_amazon_settings


@pytest.fixture
def amazon_settings() -> AmazonSettings:
    return make_amazon_settings()


@pytest.fixture
def app_settings(amazon_settings) -> AppSettings:
    return AppSettings(amazon=amazon_settings, server=ServerSettings(_env_file=None))


@pytest.fixture
def fake_session() -> FakeClientSession:
    return FakeClientSession()


@pytest.fixture
def token_provider() -> FakeTokenProvider:
    return FakeTokenProvider()


@pytest.fixture
def spapi_client() -> FakeSpApiClient:
    return FakeSpApiClient()


@pytest.fixture
def relay_service(amazon_settings, token_provider, spapi_client) -> OrderRelayService:
    return OrderRelayService(
        settings=amazon_settings,
        token_provider=token_provider,
        client=spapi_client,
    )
