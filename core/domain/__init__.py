"""Domain layer - error taxonomy shared by every other layer."""

from .errors import (
    ItemLookupError,
    NoOrderItemsError,
    RelayError,
    UpstreamApiError,
    UpstreamAuthError,
    UpstreamError,
    ValidationError,
)

__all__ = [
    "ItemLookupError",
    "NoOrderItemsError",
    "RelayError",
    "UpstreamApiError",
    "UpstreamAuthError",
    "UpstreamError",
    "ValidationError",
]
