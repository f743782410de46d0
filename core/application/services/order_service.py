"""Application service for relayed SP-API order operations."""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Union

from core.application.dtos import FlatOrderDTO
from core.application.interfaces import ISellingPartnerClient, ITokenProvider
from core.domain.errors import NoOrderItemsError, ValidationError
from core.infrastructure.marketplace.amazon.dates import parse_iso8601
from core.infrastructure.marketplace.amazon.mapper import AmazonOrderMapper
from core.settings.sections.amazon import AmazonSettings


logger = logging.getLogger(__name__)


class OrderRelayService:
    """
    Application service behind the relay's HTTP routes.

    Responsibilities:
    - Acquire one access token per operation
    - Call SP-API through the client
    - Flatten orders for the spreadsheet importer
    - Validate shipment confirmation input before any outbound call
    """

    def __init__(
        self,
        settings: AmazonSettings,
        token_provider: ITokenProvider,
        client: ISellingPartnerClient,
    ) -> None:
        """Initialize the relay service.

        Args:
            settings: Amazon settings (marketplace, carrier, enrichment mode)
            token_provider: LWA token provider
            client: SP-API client
        """
        self._settings = settings
        self._token_provider = token_provider
        self._client = client

    async def get_order(self, order_id: str) -> Dict[str, Any]:
        """Return the upstream order document unchanged."""
        access_token = await self._token_provider.get_access_token()
        return await self._client.get_order(access_token, order_id)

    async def list_orders(self, created_after: Optional[str] = None) -> List[FlatOrderDTO]:
        """List recent unshipped orders, each enriched with its line items.

        Args:
            created_after: Optional ISO-8601 lower bound; defaults to the last 24h

        Returns:
            Flattened orders in upstream order

        Raises:
            ValidationError: If created_after is not ISO-8601
            UpstreamAuthError: If the token exchange fails
            UpstreamApiError: If the order list call fails
        """
        since = None
        if created_after:
            try:
                since = parse_iso8601(created_after)
            except ValueError as e:
                raise ValidationError(
                    f"createdAfter is not a valid ISO-8601 timestamp: {created_after}",
                    field="createdAfter",
                ) from e

        access_token = await self._token_provider.get_access_token()
        raw_orders = await self._client.list_orders(
            access_token,
            created_after=since,
            marketplace_id=self._settings.marketplace_id,
        )
        logger.info(f"✅ /orders rawOrders count: {len(raw_orders)}")

        if self._settings.concurrent_item_lookups:
            items_per_order = await self._fetch_items_concurrently(access_token, raw_orders)
        else:
            items_per_order = await self._fetch_items_sequentially(access_token, raw_orders)

        return [
            AmazonOrderMapper.to_flat_order(order, items)
            for order, items in zip(raw_orders, items_per_order)
        ]

    async def _fetch_items_sequentially(
        self, access_token: str, raw_orders: List[Dict[str, Any]]
    ) -> List[List[Dict[str, Any]]]:
        items_per_order = []
        for order in raw_orders:
            items = await self._client.get_order_items(
                access_token, order.get("AmazonOrderId", "")
            )
            items_per_order.append(items)
        return items_per_order

    async def _fetch_items_concurrently(
        self, access_token: str, raw_orders: List[Dict[str, Any]]
    ) -> List[List[Dict[str, Any]]]:
        tasks = [
            asyncio.ensure_future(
                self._client.get_order_items(access_token, order.get("AmazonOrderId", ""))
            )
            for order in raw_orders
        ]
        try:
            # gather returns results in argument order, not completion order
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

    async def confirm_shipment(
        self,
        order_id: Optional[Union[str, int]],
        tracking_number: Optional[Union[str, int]],
    ) -> str:
        """Mark every item of an order as shipped with the given tracking number.

        Args:
            order_id: Amazon order id
            tracking_number: Carrier tracking number

        Returns:
            Raw upstream confirmation body

        Raises:
            ValidationError: If either argument is missing
            NoOrderItemsError: If the order has no line items
            UpstreamApiError: If the item lookup or confirmation call fails
        """
        order_id = str(order_id).strip() if order_id is not None else ""
        tracking_number = str(tracking_number).strip() if tracking_number is not None else ""
        if not order_id or not tracking_number:
            raise ValidationError("orderId and trackingNumber are required")

        access_token = await self._token_provider.get_access_token()

        items = await self._client.fetch_order_items(access_token, order_id)
        if not items:
            raise NoOrderItemsError(order_id)

        request = AmazonOrderMapper.to_shipment_confirmation(
            marketplace_id=self._settings.marketplace_id,
            carrier_code=self._settings.carrier_code,
            tracking_number=tracking_number,
            items_data=items,
        )
        return await self._client.confirm_shipment(access_token, order_id, request)
