"""
Relay error taxonomy.

Every failure the relay surfaces to a client is one of these. The API layer
maps them to JSON responses in api/main.py.
"""
from typing import Any, Dict, Optional


class RelayError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class UpstreamError(RelayError):
    """An upstream call answered with a non-success status."""

    def __init__(self, message: str, status: int, body: str):
        super().__init__(message)
        self.status = status
        self.body = body

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "status": self.status, "body": self.body}


class UpstreamAuthError(UpstreamError):
    """
    LWA token exchange failed.

    Aborts the request. Surfaces as a 500 regardless of what the
    identity provider answered.
    """

    def __init__(self, status: int, body: str):
        super().__init__(f"LWA token error: {status}", status, body)


class UpstreamApiError(UpstreamError):
    """An SP-API call failed; the client sees the upstream status and body.

    A non-error upstream status (a 2xx with an unusable body) is answered
    as 502.
    """

    @property
    def status_code(self) -> int:  # type: ignore[override]
        return self.status if self.status >= 400 else 502


class ItemLookupError(UpstreamApiError):
    """Fetching the line items of one order failed."""

    def __init__(
        self,
        order_id: str,
        status: int,
        body: str,
        message: str = "getOrderItems error",
    ):
        super().__init__(message, status, body)
        self.order_id = order_id


class ValidationError(RelayError):
    """A required request field is missing or malformed."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NoOrderItemsError(RelayError):
    """Shipment confirmation attempted on an order without retrievable items."""

    status_code = 400

    def __init__(self, order_id: str):
        super().__init__(f"No order items could be retrieved for order {order_id}")
        self.order_id = order_id
