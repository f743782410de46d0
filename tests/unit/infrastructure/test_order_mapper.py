"""
Unit tests for flattening SP-API orders.
"""
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from core.infrastructure.marketplace.amazon import AmazonOrderMapper
from tests.mocks.samples import sample_item, sample_order

FLAT_KEYS = {
    "AmazonOrderId", "PurchaseDate", "OrderStatus",
    "BuyerName", "BuyerEmail",
    "PostalCode", "StateOrRegion", "City", "AddressLine1", "AddressLine2", "Phone",
    "OrderTotal", "Currency", "Items",
}
ADDRESS_KEYS = ["PostalCode", "StateOrRegion", "City", "AddressLine1", "AddressLine2", "Phone"]


def _dump(order) -> dict:
    return order.model_dump(by_alias=True)


def test_full_order_is_flattened():
    flat = _dump(AmazonOrderMapper.to_flat_order(sample_order(), [sample_item("SKU1", 2)]))

    assert flat == {
        "AmazonOrderId": "123-1234567",
        "PurchaseDate": "2025-01-01T03:04:05Z",
        "OrderStatus": "Unshipped",
        "BuyerName": "Taro Yamada",
        "BuyerEmail": "taro@marketplace.amazon.co.jp",
        "PostalCode": "150-0001",
        "StateOrRegion": "Tokyo",
        "City": "Shibuya-ku",
        "AddressLine1": "1-2-3 Jingumae",
        "AddressLine2": "Room 401",
        "Phone": "03-0000-0000",
        "OrderTotal": 2980.0,
        "Currency": "JPY",
        "Items": [{"SellerSKU": "SKU1", "Title": "Product SKU1", "QuantityOrdered": 2}],
    }


def test_missing_shipping_address_yields_blank_address_fields():
    raw = sample_order()
    del raw["ShippingAddress"]

    flat = _dump(AmazonOrderMapper.to_flat_order(raw))

    assert set(flat) == FLAT_KEYS
    for key in ADDRESS_KEYS:
        assert flat[key] == ""


def test_bare_order_keeps_every_key():
    flat = _dump(AmazonOrderMapper.to_flat_order({}))

    assert set(flat) == FLAT_KEYS
    assert flat["AmazonOrderId"] == ""
    assert flat["BuyerName"] == ""
    assert flat["OrderTotal"] is None
    assert flat["Currency"] is None
    assert flat["Items"] == []


def test_null_nested_objects_do_not_raise():
    raw = sample_order(BuyerInfo=None, ShippingAddress=None, OrderTotal=None)

    flat = _dump(AmazonOrderMapper.to_flat_order(raw))

    assert flat["BuyerEmail"] == ""
    assert flat["City"] == ""
    assert flat["OrderTotal"] is None


@pytest.mark.parametrize(
    "total, expected",
    [
        ({"Amount": "1234.50", "CurrencyCode": "JPY"}, 1234.5),
        ({"Amount": "0.00", "CurrencyCode": "JPY"}, 0.0),
        ({"Amount": "", "CurrencyCode": "JPY"}, None),
        ({"Amount": "n/a", "CurrencyCode": "JPY"}, None),
        ({"CurrencyCode": "JPY"}, None),
    ],
)
def test_order_total_parsing(total, expected):
    flat = AmazonOrderMapper.to_flat_order(sample_order(OrderTotal=total))

    assert flat.order_total == expected
    assert flat.currency == "JPY"


def test_item_defaults():
    item = AmazonOrderMapper.to_flat_item({"OrderItemId": "9"})

    assert item.model_dump(by_alias=True) == {"SellerSKU": "", "Title": "", "QuantityOrdered": 1}


def test_item_quantity_zero_is_kept():
    assert AmazonOrderMapper.to_flat_item(sample_item(quantity=0)).quantity_ordered == 0


def test_items_keep_input_order():
    items = AmazonOrderMapper.to_flat_items([sample_item("B"), sample_item("A"), sample_item("C")])

    assert [i.seller_sku for i in items] == ["B", "A", "C"]


def test_shipment_confirmation_ships_full_quantity():
    request = AmazonOrderMapper.to_shipment_confirmation(
        marketplace_id="A1VC38T7YXB528",
        carrier_code="SAGAWA",
        tracking_number="TRK1",
        items_data=[
            sample_item(order_item_id="1", quantity=2),
            sample_item("SKU2", order_item_id="2", quantity=5),
        ],
        ship_date=datetime(2025, 3, 4, 5, 6, 7, 890000, tzinfo=timezone.utc),
    )

    payload = request.to_payload()
    detail = payload["packageDetail"]
    assert payload["marketplaceId"] == "A1VC38T7YXB528"
    assert detail["packageReferenceId"] == "1"
    assert detail["carrierCode"] == "SAGAWA"
    assert detail["trackingNumber"] == "TRK1"
    assert detail["shipDate"] == "2025-03-04T05:06:07.890Z"
    assert detail["orderItems"] == [
        {"orderItemId": "1", "quantity": 2},
        {"orderItemId": "2", "quantity": 5},
    ]


def test_shipment_confirmation_defaults_ship_date_to_now():
    before = datetime.now(timezone.utc).replace(microsecond=0)

    request = AmazonOrderMapper.to_shipment_confirmation(
        "A1VC38T7YXB528", "SAGAWA", "TRK1", [sample_item()]
    )

    ship_date = request.package_detail.ship_date
    assert ship_date.endswith("Z")
    parsed = datetime.fromisoformat(ship_date.replace("Z", "+00:00"))
    assert parsed >= before


def test_shipment_confirmation_requires_items():
    with pytest.raises(PydanticValidationError):
        AmazonOrderMapper.to_shipment_confirmation("A1VC38T7YXB528", "SAGAWA", "TRK1", [])
