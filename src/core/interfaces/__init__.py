"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.stock_report_gateway import IStockReportGateway

__all__ = [
    "IStockReportGateway",
]
