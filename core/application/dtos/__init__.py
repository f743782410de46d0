"""Application DTOs."""

from .order_dto import FlatOrderDTO, FlatOrderItemDTO
from .shipment_dto import (
    ConfirmShipmentRequest,
    ConfirmShipmentResponse,
    PackageDetail,
    ShipmentConfirmationRequest,
    ShipmentOrderItem,
)

__all__ = [
    "FlatOrderDTO",
    "FlatOrderItemDTO",
    "ConfirmShipmentRequest",
    "ConfirmShipmentResponse",
    "PackageDetail",
    "ShipmentConfirmationRequest",
    "ShipmentOrderItem",
]
