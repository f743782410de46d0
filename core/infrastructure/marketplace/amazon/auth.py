"""Login with Amazon (LWA) token exchange."""

import json
import logging

import aiohttp

from core.application.interfaces import ITokenProvider
from core.domain.errors import UpstreamAuthError
from core.settings.sections.amazon import AmazonSettings


logger = logging.getLogger(__name__)


class LwaTokenProvider(ITokenProvider):
    """
    Exchanges the configured refresh token for an SP-API access token.

    Each call performs a full exchange; tokens are never cached.
    """

    def __init__(self, settings: AmazonSettings, session: aiohttp.ClientSession):
        """
        Args:
            settings: Amazon settings holding the LWA credentials
            session: Open aiohttp session used for the POST
        """
        self._settings = settings
        self._session = session

    async def get_access_token(self) -> str:
        form = {
            "grant_type": "refresh_token",
            "refresh_token": self._settings.refresh_token,
            "client_id": self._settings.lwa_client_id,
            "client_secret": self._settings.lwa_client_secret,
        }

        async with self._session.post(
            self._settings.lwa_token_url,
            data=form,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        ) as response:
            status = response.status
            text = await response.text()

        if not 200 <= status < 300:
            logger.error(f"❌ LWA token error: {status} {text}")
            raise UpstreamAuthError(status, text)

        try:
            access_token = json.loads(text).get("access_token") if text else None
        except (ValueError, AttributeError):
            access_token = None

        if not access_token:
            logger.error(f"❌ LWA token response carried no access_token: {text}")
            raise UpstreamAuthError(status, text)

        return access_token
