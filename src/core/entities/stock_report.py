"""Stock report entities.

Report lines and summary are computed, never persisted. Their wire shape
matches the reporting service's ``{report, summary}`` payload.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ReportSource(str, Enum):
    """Where a stock report came from."""

    SERVER = "server"
    RECONCILED = "reconciled"
    EMPTY = "empty"


class StockQuantity(BaseModel):
    """A (quantity, monetary amount) pair."""

    qty: float = 0.0
    amount: float = 0.0

    def __add__(self, other: "StockQuantity") -> "StockQuantity":
        return StockQuantity(qty=self.qty + other.qty, amount=self.amount + other.amount)


class StockReportLine(BaseModel):
    """Stock ledger for one product over a reporting window."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: str = Field(alias="_id")
    barcode: str = ""
    name: str
    category: str = ""
    cost_price: float = 0.0
    selling_price: float = 0.0

    opening_stock: StockQuantity = Field(default_factory=StockQuantity)
    purchases: StockQuantity = Field(default_factory=StockQuantity)
    balance: StockQuantity = Field(default_factory=StockQuantity)
    consumption: StockQuantity = Field(default_factory=StockQuantity)
    closing_stock: StockQuantity = Field(default_factory=StockQuantity)

    @field_validator("barcode", "category", mode="before")
    @classmethod
    def null_to_empty(cls, v: str | None) -> str:
        return "" if v is None else v

    @field_validator("cost_price", "selling_price", mode="before")
    @classmethod
    def null_to_zero(cls, v: float | None) -> float:
        return 0.0 if v is None else v

    @field_validator(
        "opening_stock", "purchases", "balance", "consumption", "closing_stock",
        mode="before",
    )
    @classmethod
    def null_to_zero_pair(cls, v: object) -> object:
        return StockQuantity() if v is None else v


class StockReportSummary(BaseModel):
    """Field-wise totals of all report lines."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_opening_qty: float = 0.0
    total_opening_value: float = 0.0
    total_purchases_qty: float = 0.0
    total_purchases_value: float = 0.0
    total_balance_qty: float = 0.0
    total_balance_value: float = 0.0
    total_consumption_qty: float = 0.0
    total_consumption_value: float = 0.0
    total_closing_qty: float = 0.0
    total_closing_value: float = 0.0

    @classmethod
    def empty(cls) -> "StockReportSummary":
        return cls()


class StockReport(BaseModel):
    """A stock report for an inclusive date range."""

    date_from: date
    date_to: date
    lines: list[StockReportLine] = Field(default_factory=list)
    summary: StockReportSummary = Field(default_factory=StockReportSummary)
    source: ReportSource = ReportSource.EMPTY

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def to_payload(self) -> dict:
        """Serialize to the reporting service's ``{report, summary}`` shape."""
        return {
            "report": [line.model_dump(by_alias=True) for line in self.lines],
            "summary": self.summary.model_dump(by_alias=True),
        }
