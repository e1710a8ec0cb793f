"""
Abstract interface for the stock reporting collaborators.

Covers the reporting service (pre-computed report), the inventory service
(current product snapshot) and the stock-history service (movements).
"""

from abc import ABC, abstractmethod
from datetime import date

from src.core.entities.inventory import Product, ProductCategory, StockMovement
from src.core.entities.stock_report import StockReport


class IStockReportGateway(ABC):
    """Interface for fetching stock report inputs from the back-office API."""

    @abstractmethod
    async def get_stock_report(self, date_from: date, date_to: date) -> StockReport:
        """
        Fetch the server-computed stock report for an inclusive date range.

        Raises:
            UpstreamError: If the endpoint fails or the payload is invalid.
        """

    @abstractmethod
    async def list_products(self) -> list[Product]:
        """Fetch the current inventory snapshot."""

    @abstractmethod
    async def list_categories(self) -> list[ProductCategory]:
        """Fetch the category list with per-category product counts."""

    @abstractmethod
    async def list_movements(self, date_from: date, date_to: date) -> list[StockMovement]:
        """Fetch all stock movements within an inclusive date range."""

    @abstractmethod
    async def list_product_movements(
        self, product_id: str, date_from: date, date_to: date
    ) -> list[StockMovement]:
        """Fetch one product's stock movements within an inclusive date range."""
