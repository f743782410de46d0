"""Application services."""
from .order_service import OrderRelayService

__all__ = ["OrderRelayService"]
