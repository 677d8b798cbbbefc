"""Data models for catalog items, packages and the calculation wire format."""

from decimal import Decimal
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field

ItemId = Union[int, str]


class Item(BaseModel):
    """Represents an orderable catalog item."""

    model_config = ConfigDict(frozen=True)

    id: ItemId = Field(description="Opaque, stable item identifier")
    name: str = Field(description="Item name")
    price: Decimal = Field(ge=0, description="Item price")
    weight: int = Field(ge=0, description="Item weight in grams")


class Package(BaseModel):
    """One shipment package as computed by the calculation service."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    items: list[str] = Field(default_factory=list, description="Names of the packed items")
    total_weight: Decimal = Field(alias="totalWeight", description="Package weight in grams")
    total_price: Decimal = Field(alias="totalPrice", description="Sum of item prices")
    courier_price: Decimal = Field(alias="courierPrice", description="Courier charge, as returned")


class ProductsResponse(BaseModel):
    """Envelope returned by ``GET /products``."""

    success: bool = False
    data: list[Item] = Field(default_factory=list)
    error: Optional[str] = None


class CalculateRequest(BaseModel):
    """Body of ``POST /orders/calculate``."""

    model_config = ConfigDict(populate_by_name=True)

    item_ids: list[ItemId] = Field(alias="itemIds")


class CalculateData(BaseModel):
    """Payload of a successful calculation."""

    packages: list[Package] = Field(default_factory=list)


class CalculateResponse(BaseModel):
    """Envelope returned by ``POST /orders/calculate``."""

    success: bool = False
    data: Optional[CalculateData] = None
    error: Optional[str] = None


class PackageView(BaseModel):
    """Display strings for one package."""

    number: int = Field(description="1-based position in the order")
    items: list[str] = Field(default_factory=list)
    items_display: str
    weight_display: str
    price_display: str
    courier_display: str


class OrderSummary(BaseModel):
    """Aggregate view of a completed order result."""

    package_count: int = 0
    headline: str
    total_courier_price: Decimal = Decimal("0")
    total_courier_display: str
    packages: list[PackageView] = Field(default_factory=list)
