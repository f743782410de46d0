"""SP-API order JSON to flattened DTO mapper."""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from core.application.dtos import (
    FlatOrderDTO,
    FlatOrderItemDTO,
    PackageDetail,
    ShipmentConfirmationRequest,
    ShipmentOrderItem,
)
from core.infrastructure.marketplace.amazon.dates import to_iso8601, utcnow


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return str(value) if value else ""


def _quantity(value: Any) -> int:
    if value is None:
        return 1
    try:
        return int(value)
    except (TypeError, ValueError):
        return 1


def _amount(value: Any) -> Optional[float]:
    if not value:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class AmazonOrderMapper:
    """Mapper for converting SP-API order JSON into the importer's flat shape.

    Lookups never raise on missing data: absent nested objects become
    blank strings, and an absent order total becomes null.
    """

    @staticmethod
    def to_flat_item(item_data: Dict[str, Any]) -> FlatOrderItemDTO:
        return FlatOrderItemDTO(
            seller_sku=_text(item_data, "SellerSKU"),
            title=_text(item_data, "Title"),
            quantity_ordered=_quantity(item_data.get("QuantityOrdered")),
        )

    @staticmethod
    def to_flat_items(items_data: Iterable[Dict[str, Any]]) -> List[FlatOrderItemDTO]:
        return [AmazonOrderMapper.to_flat_item(item) for item in items_data]

    @staticmethod
    def to_flat_order(
        amazon_data: Dict[str, Any],
        items_data: Iterable[Dict[str, Any]] = (),
    ) -> FlatOrderDTO:
        """Convert one SP-API order plus its raw line items.

        Args:
            amazon_data: Order object as returned by getOrders/getOrder
            items_data: Raw OrderItems of that order (may be empty)

        Returns:
            FlatOrderDTO with every field populated
        """
        buyer = _section(amazon_data, "BuyerInfo")
        address = _section(amazon_data, "ShippingAddress")
        total = _section(amazon_data, "OrderTotal")

        return FlatOrderDTO(
            amazon_order_id=_text(amazon_data, "AmazonOrderId"),
            purchase_date=_text(amazon_data, "PurchaseDate"),
            order_status=_text(amazon_data, "OrderStatus"),
            buyer_name=_text(buyer, "BuyerName"),
            buyer_email=_text(buyer, "BuyerEmail"),
            postal_code=_text(address, "PostalCode"),
            state_or_region=_text(address, "StateOrRegion"),
            city=_text(address, "City"),
            address_line1=_text(address, "AddressLine1"),
            address_line2=_text(address, "AddressLine2"),
            phone=_text(address, "Phone"),
            order_total=_amount(total.get("Amount")),
            currency=total.get("CurrencyCode") or None,
            items=AmazonOrderMapper.to_flat_items(items_data),
        )

    @staticmethod
    def to_shipment_confirmation(
        marketplace_id: str,
        carrier_code: str,
        tracking_number: str,
        items_data: Iterable[Dict[str, Any]],
        ship_date: Optional[datetime] = None,
    ) -> ShipmentConfirmationRequest:
        """Build a confirmation that marks every ordered unit as shipped.

        Raises:
            pydantic.ValidationError: If items_data is empty
        """
        order_items = [
            ShipmentOrderItem(
                order_item_id=_text(item, "OrderItemId"),
                quantity=_quantity(item.get("QuantityOrdered")),
            )
            for item in items_data
        ]

        return ShipmentConfirmationRequest(
            marketplace_id=marketplace_id,
            package_detail=PackageDetail(
                package_reference_id="1",
                carrier_code=carrier_code,
                tracking_number=tracking_number,
                ship_date=to_iso8601(ship_date or utcnow()),
                order_items=order_items,
            ),
        )
