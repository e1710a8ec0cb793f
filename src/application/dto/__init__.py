"""Data Transfer Objects for the application layer.

Request DTOs validate and parse use case inputs.
"""

from src.application.dto.requests import ProductMovementsRequest, StockReportRequest

__all__ = [
    "StockReportRequest",
    "ProductMovementsRequest",
]
