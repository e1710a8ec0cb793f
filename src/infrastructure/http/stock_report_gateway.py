"""HTTP implementation of the stock report gateway."""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.config import get_logger
from src.core.entities.inventory import Product, ProductCategory, StockMovement
from src.core.entities.stock_report import (
    ReportSource,
    StockReport,
    StockReportLine,
    StockReportSummary,
)
from src.core.exceptions import UpstreamPayloadError
from src.core.interfaces.stock_report_gateway import IStockReportGateway
from src.infrastructure.http.api_client import BackOfficeApiClient

logger = get_logger(__name__)

STOCK_REPORT_PATH = "/inventory/stock-report"
INVENTORY_PATH = "/inventory"
CATEGORIES_PATH = "/inventory/categories"
STOCK_HISTORY_PATH = "/inventory/stock-history"

_PRODUCTS = TypeAdapter(list[Product])
_MOVEMENTS = TypeAdapter(list[StockMovement])
_CATEGORIES = TypeAdapter(list[ProductCategory])


class _StockReportPayload(BaseModel):
    """Wire shape of the reporting endpoint."""

    report: list[StockReportLine] = Field(default_factory=list)
    summary: StockReportSummary = Field(default_factory=StockReportSummary)


def _range_params(date_from: date, date_to: date) -> dict[str, str]:
    return {"from": date_from.isoformat(), "to": date_to.isoformat()}


class HttpStockReportGateway(IStockReportGateway):
    """Fetches stock report inputs from the back-office REST API.

    Payloads are validated here; a malformed body raises
    ``UpstreamPayloadError``.
    """

    def __init__(self, client: BackOfficeApiClient):
        self._client = client

    async def get_stock_report(self, date_from: date, date_to: date) -> StockReport:
        data = await self._client.get_json(
            STOCK_REPORT_PATH, params=_range_params(date_from, date_to)
        )
        payload = self._validate(STOCK_REPORT_PATH, _StockReportPayload.model_validate, data)
        logger.info("stock_report_fetched", lines=len(payload.report))
        return StockReport(
            date_from=date_from,
            date_to=date_to,
            lines=payload.report,
            summary=payload.summary,
            source=ReportSource.SERVER,
        )

    async def list_products(self) -> list[Product]:
        data = await self._client.get_json(INVENTORY_PATH)
        return self._validate(INVENTORY_PATH, _PRODUCTS.validate_python, data)

    async def list_categories(self) -> list[ProductCategory]:
        data = await self._client.get_json(CATEGORIES_PATH)
        return self._validate(CATEGORIES_PATH, _CATEGORIES.validate_python, data)

    async def list_movements(self, date_from: date, date_to: date) -> list[StockMovement]:
        data = await self._client.get_json(
            STOCK_HISTORY_PATH, params=_range_params(date_from, date_to)
        )
        return self._validate(STOCK_HISTORY_PATH, _MOVEMENTS.validate_python, data)

    async def list_product_movements(
        self, product_id: str, date_from: date, date_to: date
    ) -> list[StockMovement]:
        path = f"{STOCK_HISTORY_PATH}/{product_id}"
        data = await self._client.get_json(path, params=_range_params(date_from, date_to))
        return self._validate(path, _MOVEMENTS.validate_python, data)

    @staticmethod
    def _validate(path: str, validator: Any, data: Any) -> Any:
        try:
            return validator(data)
        except PydanticValidationError as exc:
            logger.warning("upstream_payload_invalid", path=path, errors=exc.error_count())
            raise UpstreamPayloadError(path, str(exc)) from exc
