"""Flattened order DTOs emitted to the spreadsheet importer."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FlatOrderItemDTO(BaseModel):
    """One line item of a flattened order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    seller_sku: str = Field(default="", alias="SellerSKU", description="Seller SKU")
    title: str = Field(default="", alias="Title", description="Product title")
    quantity_ordered: int = Field(
        default=1, alias="QuantityOrdered", description="Quantity ordered"
    )


class FlatOrderDTO(BaseModel):
    """
    Denormalized order record.

    Every key is always present in the serialized form; missing upstream
    values become "" (strings) or null (total and currency).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    amazon_order_id: str = Field(default="", alias="AmazonOrderId")
    purchase_date: str = Field(default="", alias="PurchaseDate")
    order_status: str = Field(default="", alias="OrderStatus")

    buyer_name: str = Field(default="", alias="BuyerName")
    buyer_email: str = Field(default="", alias="BuyerEmail")

    postal_code: str = Field(default="", alias="PostalCode")
    state_or_region: str = Field(default="", alias="StateOrRegion")
    city: str = Field(default="", alias="City")
    address_line1: str = Field(default="", alias="AddressLine1")
    address_line2: str = Field(default="", alias="AddressLine2")
    phone: str = Field(default="", alias="Phone")

    order_total: Optional[float] = Field(default=None, alias="OrderTotal")
    currency: Optional[str] = Field(default=None, alias="Currency")

    items: List[FlatOrderItemDTO] = Field(default_factory=list, alias="Items")
