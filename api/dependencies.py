"""
FastAPI Dependencies.

Provides dependency injection for the relay service and its collaborators.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import AsyncGenerator

import aiohttp
from dotenv import load_dotenv
from fastapi import Depends

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.application.interfaces import ISellingPartnerClient, ITokenProvider
from core.application.services import OrderRelayService
from core.infrastructure.marketplace.amazon import LwaTokenProvider, SpApiClient
from core.settings import AppSettings, get_app_settings

logger = logging.getLogger(__name__)


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_settings() -> AppSettings:
    return get_app_settings()


async def get_http_session(
    settings: AppSettings = Depends(get_settings),
) -> AsyncGenerator[aiohttp.ClientSession, None]:
    """
    One aiohttp session per inbound request, closed when the request ends.

    No deadline unless SPAPI_HTTP_TIMEOUT_SECONDS is set.
    """
    timeout = aiohttp.ClientTimeout(total=settings.amazon.http_timeout_seconds)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        yield session


def get_token_provider(
    settings: AppSettings = Depends(get_settings),
    session: aiohttp.ClientSession = Depends(get_http_session),
) -> ITokenProvider:
    return LwaTokenProvider(settings.amazon, session)


def get_spapi_client(
    settings: AppSettings = Depends(get_settings),
    session: aiohttp.ClientSession = Depends(get_http_session),
) -> ISellingPartnerClient:
    return SpApiClient(settings.amazon, session)


def get_order_relay_service(
    settings: AppSettings = Depends(get_settings),
    token_provider: ITokenProvider = Depends(get_token_provider),
    client: ISellingPartnerClient = Depends(get_spapi_client),
) -> OrderRelayService:
    return OrderRelayService(
        settings=settings.amazon,
        token_provider=token_provider,
        client=client,
    )
