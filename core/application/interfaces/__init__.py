"""Application layer interfaces."""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from core.application.dtos import ShipmentConfirmationRequest


class ITokenProvider(ABC):
    """
    Interface for access-token acquisition.

    Implementations exchange long-lived credentials for a short-lived
    bearer token. Nothing is cached between calls.
    """

    @abstractmethod
    async def get_access_token(self) -> str:
        """
        Obtain a fresh access token.

        Returns:
            Non-empty access token string

        Raises:
            UpstreamAuthError: If the identity provider rejects the exchange
        """
        pass


class ISellingPartnerClient(ABC):
    """
    Interface for the SP-API order operations the relay uses.

    Every method takes the bearer token explicitly so that one token
    can be shared by all calls made while serving a single request.
    """

    @abstractmethod
    async def get_order(self, access_token: str, order_id: str) -> Dict[str, Any]:
        """
        Fetch one order in SP-API shape.

        Raises:
            UpstreamApiError: On a non-success upstream status
        """
        pass

    @abstractmethod
    async def fetch_order_items(
        self, access_token: str, order_id: str
    ) -> List[Dict[str, Any]]:
        """
        Fetch the raw line items of an order.

        Raises:
            ItemLookupError: On a non-success upstream status
        """
        pass

    @abstractmethod
    async def get_order_items(
        self, access_token: str, order_id: str
    ) -> List[Dict[str, Any]]:
        """Like fetch_order_items, but a failed lookup yields an empty list."""
        pass

    @abstractmethod
    async def list_orders(
        self,
        access_token: str,
        created_after: Optional[datetime] = None,
        marketplace_id: Optional[str] = None,
        statuses: Optional[Sequence[str]] = None,
    ) -> List[Dict[str, Any]]:
        """
        List orders created after a point in time.

        Raises:
            UpstreamApiError: On a non-success upstream status
        """
        pass

    @abstractmethod
    async def confirm_shipment(
        self,
        access_token: str,
        order_id: str,
        request: ShipmentConfirmationRequest,
    ) -> str:
        """
        Submit a shipment confirmation.

        Returns:
            Raw upstream response body (often empty)

        Raises:
            UpstreamApiError: On a non-success upstream status
        """
        pass
