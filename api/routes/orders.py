"""
Order endpoints.

Single-order passthrough and the flattened list used by the spreadsheet importer.
"""
from typing import Any, Dict, List, Optional
import logging

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_order_relay_service
from core.application.dtos import FlatOrderDTO
from core.application.services import OrderRelayService


logger = logging.getLogger(__name__)
router = APIRouter()


# =============================================================================
# SINGLE ORDER
# =============================================================================

@router.get(
    "/order/{order_id}",
    status_code=status.HTTP_200_OK,
    summary="Get one order",
    description="Return the SP-API order document unchanged.",
)
async def get_order(
    order_id: str,
    service: OrderRelayService = Depends(get_order_relay_service),
) -> Dict[str, Any]:
    return await service.get_order(order_id)


# =============================================================================
# FLATTENED ORDER LIST
# =============================================================================

@router.get(
    "/orders",
    response_model=List[FlatOrderDTO],
    status_code=status.HTTP_200_OK,
    summary="List recent unshipped orders",
    description="""
    Orders created after `createdAfter` (default: last 24 hours) with status
    Unshipped or PartiallyShipped, flattened and enriched with line items.

    An order whose items cannot be fetched is still returned, with `Items: []`.
    """,
)
async def list_orders(
    created_after: Optional[str] = Query(
        default=None,
        alias="createdAfter",
        description="ISO-8601 lower bound on order creation time",
    ),
    service: OrderRelayService = Depends(get_order_relay_service),
) -> List[FlatOrderDTO]:
    """
    **Returns:**
    - List of flattened orders; `[]` when upstream has none
    """
    return await service.list_orders(created_after=created_after)
