"""Inventory domain entities.

Products and stock movements as served by the inventory and stock-history
endpoints. Wire payloads use camelCase keys and a Mongo-style ``_id``;
both the wire aliases and the field names are accepted on input.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class MovementType(str, Enum):
    """Types of stock movements."""

    IN = "in"
    OUT = "out"
    ADJUSTMENT = "adjustment"
    RETURN = "return"

    @property
    def label(self) -> str:
        """Human readable label used in movement listings."""
        return _MOVEMENT_LABELS[self]

    @property
    def direction(self) -> int:
        """+1 if the movement adds stock, -1 if it removes stock."""
        return 1 if self in (MovementType.IN, MovementType.RETURN) else -1


_MOVEMENT_LABELS = {
    MovementType.IN: "Stock In",
    MovementType.OUT: "Stock Out",
    MovementType.ADJUSTMENT: "Adjustment",
    MovementType.RETURN: "Return",
}


class Product(BaseModel):
    """Current inventory snapshot for one product.

    ``current_quantity`` is the on-hand quantity right now; it is not
    scoped to any reporting window.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")
    barcode: str = ""
    name: str
    category: str = ""
    cost_price: float = 0.0
    selling_price: float = 0.0
    current_quantity: float = Field(default=0.0, alias="quantity")

    @field_validator("barcode", "category", mode="before")
    @classmethod
    def null_to_empty(cls, v: str | None) -> str:
        return "" if v is None else v

    @field_validator("cost_price", "selling_price", "current_quantity", mode="before")
    @classmethod
    def null_to_zero(cls, v: float | None) -> float:
        return 0.0 if v is None else v


class ProductCategory(BaseModel):
    """A product category with the number of products filed under it."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(default=None, alias="_id")
    name: str
    count: int = 0


class StockMovement(BaseModel):
    """Records a single historical stock movement. Never mutated."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str | None = Field(default=None, alias="_id")
    product_id: str
    product_name: str | None = None
    type: MovementType
    quantity: float  # magnitude; direction comes from type
    timestamp: datetime | None = Field(default=None, alias="createdAt")
    batch_number: str | None = None
    reason: str | None = None
    performed_by: str | None = None

    @property
    def signed_quantity(self) -> float:
        """Quantity with the movement's direction applied."""
        return abs(self.quantity) * self.type.direction
