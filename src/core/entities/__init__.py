"""Core domain entities."""

from src.core.entities.inventory import (
    MovementType,
    Product,
    ProductCategory,
    StockMovement,
)
from src.core.entities.stock_report import (
    ReportSource,
    StockQuantity,
    StockReport,
    StockReportLine,
    StockReportSummary,
)

__all__ = [
    # Inventory entities
    "Product",
    "ProductCategory",
    "StockMovement",
    "MovementType",
    # Stock report entities
    "StockQuantity",
    "StockReportLine",
    "StockReportSummary",
    "StockReport",
    "ReportSource",
]
