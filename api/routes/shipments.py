"""
Shipment confirmation endpoint.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, status

from api.dependencies import get_order_relay_service
from core.application.dtos import ConfirmShipmentRequest, ConfirmShipmentResponse
from core.application.services import OrderRelayService


logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/confirm-shipment",
    response_model=ConfirmShipmentResponse,
    status_code=status.HTTP_200_OK,
    summary="Confirm shipment of an order",
    description="""
    Marks every ordered unit of `orderId` as shipped with `trackingNumber`.

    **Errors:**
    - 400 when `orderId` or `trackingNumber` is missing, or the order has no items
    - upstream status with `{error, status, body}` when SP-API rejects a call
    """,
)
async def confirm_shipment(
    request: Optional[ConfirmShipmentRequest] = None,
    service: OrderRelayService = Depends(get_order_relay_service),
) -> ConfirmShipmentResponse:
    request = request or ConfirmShipmentRequest()
    logger.info(f"API: confirm shipment request: {request.order_id}")
    await service.confirm_shipment(request.order_id, request.tracking_number)
    return ConfirmShipmentResponse(ok=True)
