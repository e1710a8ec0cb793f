"""Application use cases."""

from src.application.use_cases.build_stock_report import BuildStockReportUseCase
from src.application.use_cases.get_product_movements import GetProductMovementsUseCase

__all__ = [
    "BuildStockReportUseCase",
    "GetProductMovementsUseCase",
]
