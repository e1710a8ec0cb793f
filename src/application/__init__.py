"""
Application layer - Use cases and DTOs.

This layer orchestrates business logic by:
1. Defining request DTOs for use case inputs
2. Implementing use cases that coordinate core services and gateways

Gateways are injected into use cases; nothing here holds a global client.
"""

from src.application.dto.requests import ProductMovementsRequest, StockReportRequest
from src.application.use_cases import (
    BuildStockReportUseCase,
    GetProductMovementsUseCase,
)

__all__ = [
    # Request DTOs
    "StockReportRequest",
    "ProductMovementsRequest",
    # Use Cases
    "BuildStockReportUseCase",
    "GetProductMovementsUseCase",
]
