"""Request DTOs for stock reporting use cases.

Pydantic v2 models for request validation.
"""

from datetime import date

from pydantic import BaseModel, Field, model_validator

from src.core.exceptions import ValidationError


def _first_of_month() -> date:
    return date.today().replace(day=1)


class StockReportRequest(BaseModel):
    """Request for a stock report over an inclusive date range."""

    date_from: date = Field(
        default_factory=_first_of_month,
        description="First day of the reporting window (inclusive)",
    )
    date_to: date = Field(
        default_factory=date.today,
        description="Last day of the reporting window (inclusive)",
    )
    search: str | None = Field(
        default=None,
        description="Filter lines by product name or barcode",
        examples=["paracetamol", "6001234"],
    )
    category: str | None = Field(
        default=None,
        description="Filter lines by exact category",
        examples=["Analgesics"],
    )

    @model_validator(mode="after")
    def check_range(self) -> "StockReportRequest":
        if self.date_from > self.date_to:
            raise ValidationError(
                "date_from",
                f"must not be after date_to ({self.date_to.isoformat()})",
                self.date_from.isoformat(),
            )
        return self

    @property
    def has_filters(self) -> bool:
        return bool(self.search or self.category)


class ProductMovementsRequest(BaseModel):
    """Request for one product's movement history within a date range."""

    product_id: str = Field(..., min_length=1, description="Product ID")
    date_from: date = Field(default_factory=_first_of_month)
    date_to: date = Field(default_factory=date.today)

    @model_validator(mode="after")
    def check_range(self) -> "ProductMovementsRequest":
        if self.date_from > self.date_to:
            raise ValidationError(
                "date_from",
                f"must not be after date_to ({self.date_to.isoformat()})",
                self.date_from.isoformat(),
            )
        return self
