"""DTOs for the shipment confirmation flow."""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ConfirmShipmentRequest(BaseModel):
    """
    Inbound body of POST /confirm-shipment.

    Both fields are optional at the schema level so that a missing value
    is reported as a 400 by the service rather than a schema error.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    order_id: Optional[Union[str, int]] = Field(default=None, alias="orderId")
    tracking_number: Optional[Union[str, int]] = Field(
        default=None, alias="trackingNumber"
    )


class ConfirmShipmentResponse(BaseModel):
    ok: bool = True


class ShipmentOrderItem(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    order_item_id: str = Field(..., alias="orderItemId")
    quantity: int = Field(..., ge=0)


class PackageDetail(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    package_reference_id: str = Field(default="1", alias="packageReferenceId")
    carrier_code: str = Field(default="SAGAWA", alias="carrierCode")
    tracking_number: str = Field(..., alias="trackingNumber")
    ship_date: str = Field(..., alias="shipDate", description="ISO-8601 UTC timestamp")
    order_items: List[ShipmentOrderItem] = Field(..., min_length=1, alias="orderItems")


class ShipmentConfirmationRequest(BaseModel):
    """Outbound body of the SP-API shipmentConfirmation call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    marketplace_id: str = Field(..., alias="marketplaceId")
    package_detail: PackageDetail = Field(..., alias="packageDetail")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)
