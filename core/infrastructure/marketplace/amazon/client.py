"""Amazon SP-API Orders client."""

import asyncio
import json
import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence, Tuple
from urllib.parse import quote

import aiohttp

from core.application.dtos import ShipmentConfirmationRequest
from core.application.interfaces import ISellingPartnerClient
from core.domain.errors import ItemLookupError, UpstreamApiError
from core.infrastructure.marketplace.amazon.dates import to_iso8601, utcnow
from core.settings.sections.amazon import AmazonSettings


logger = logging.getLogger(__name__)

ORDERS_PATH = "/orders/v0/orders"
DEFAULT_ORDER_STATUSES: Tuple[str, ...] = ("Unshipped", "PartiallyShipped")
DEFAULT_LOOKBACK = timedelta(hours=24)


def parse_body(text: str) -> Any:
    """Parse a response body as JSON; an empty body parses to {}."""
    return json.loads(text) if text else {}


def unwrap(document: Any, key: str) -> List[Dict[str, Any]]:
    """
    Pull a list out of an SP-API document.

    Both the payload-wrapped shape ({"payload": {key: [...]}}) and the
    bare shape ({key: [...]}) are accepted. Entries that are not objects
    are dropped.
    """
    if not isinstance(document, dict):
        return []
    payload = document.get("payload")
    if isinstance(payload, dict) and payload.get(key):
        entries = payload[key]
    else:
        entries = document.get(key) or []
    if not isinstance(entries, list):
        return []
    return [entry for entry in entries if isinstance(entry, dict)]


class SpApiClient(ISellingPartnerClient):
    """Client for the SP-API Orders v0 operations used by the relay.

    Requests go to the regional endpoint chosen in settings and carry
    the access token in the x-amz-access-token header.
    """

    def __init__(self, settings: AmazonSettings, session: aiohttp.ClientSession) -> None:
        """Initialize the client.

        Args:
            settings: Amazon settings (region, marketplace)
            session: Open aiohttp session shared with the token provider
        """
        self._settings = settings
        self._session = session
        self._endpoint = settings.endpoint

    def _order_url(self, order_id: str, suffix: str = "") -> str:
        return f"{self._endpoint}{ORDERS_PATH}/{quote(str(order_id), safe='')}{suffix}"

    @staticmethod
    def _headers(access_token: str) -> Dict[str, str]:
        return {
            "x-amz-access-token": access_token,
            "accept": "application/json",
        }

    async def _request(
        self,
        method: str,
        url: str,
        access_token: str,
        **kwargs: Any,
    ) -> Tuple[int, str]:
        async with self._session.request(
            method, url, headers=self._headers(access_token), **kwargs
        ) as response:
            return response.status, await response.text()

    @staticmethod
    def _ok(status: int) -> bool:
        return 200 <= status < 300

    async def get_order(self, access_token: str, order_id: str) -> Dict[str, Any]:
        status, text = await self._request("GET", self._order_url(order_id), access_token)
        if not self._ok(status):
            logger.error(f"❌ GetOrder error: {status} {text}")
            raise UpstreamApiError("GetOrder error", status, text)
        return parse_body(text)

    async def fetch_order_items(
        self, access_token: str, order_id: str
    ) -> List[Dict[str, Any]]:
        try:
            status, text = await self._request(
                "GET", self._order_url(order_id, "/orderItems"), access_token
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"❌ getOrderItems transport error: {order_id} {e!r}")
            raise ItemLookupError(
                order_id, 502, str(e), message=f"getOrderItems transport error: {e!r}"
            ) from e
        if not self._ok(status):
            logger.error(f"❌ getOrderItems error: {order_id} {status} {text}")
            raise ItemLookupError(order_id, status, text)

        try:
            document = parse_body(text)
        except ValueError as e:
            logger.error(f"❌ getOrderItems invalid JSON: {order_id} {text}")
            raise ItemLookupError(
                order_id, 502, text, message=f"getOrderItems returned invalid JSON: {e}"
            ) from e
        return unwrap(document, "OrderItems")

    async def get_order_items(
        self, access_token: str, order_id: str
    ) -> List[Dict[str, Any]]:
        try:
            return await self.fetch_order_items(access_token, order_id)
        except ItemLookupError as e:
            logger.warning(
                f"Item lookup failed for {order_id} (status {e.status}); using no items"
            )
            return []

    async def list_orders(
        self,
        access_token: str,
        created_after: Optional[datetime] = None,
        marketplace_id: Optional[str] = None,
        statuses: Optional[Sequence[str]] = None,
    ) -> List[Dict[str, Any]]:
        since = created_after or (utcnow() - DEFAULT_LOOKBACK)
        params = {
            "MarketplaceIds": marketplace_id or self._settings.marketplace_id,
            "CreatedAfter": to_iso8601(since),
            "OrderStatuses": ",".join(statuses or DEFAULT_ORDER_STATUSES),
        }

        status, text = await self._request(
            "GET", f"{self._endpoint}{ORDERS_PATH}", access_token, params=params
        )
        if not self._ok(status):
            logger.error(f"❌ Orders API error: {status} {text}")
            raise UpstreamApiError("Orders API error", status, text)

        orders = unwrap(parse_body(text), "Orders")
        logger.info(f"✅ listOrders returned {len(orders)} orders since {params['CreatedAfter']}")
        return orders

    async def confirm_shipment(
        self,
        access_token: str,
        order_id: str,
        request: ShipmentConfirmationRequest,
    ) -> str:
        status, text = await self._request(
            "POST",
            self._order_url(order_id, "/shipmentConfirmation"),
            access_token,
            json=request.to_payload(),
        )
        if not self._ok(status):
            logger.error(f"❌ confirmShipment error: {status} {text}")
            raise UpstreamApiError("confirmShipment error", status, text)

        logger.info(f"✅ confirmShipment success: {order_id} {text}")
        return text
