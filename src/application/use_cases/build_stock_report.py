"""Build Stock Report Use Case: server report with local reconciliation fallback."""

import asyncio

import structlog

from src.application.dto.requests import StockReportRequest
from src.config import get_logger, get_settings
from src.core.entities.stock_report import ReportSource, StockReport
from src.core.interfaces.stock_report_gateway import IStockReportGateway
from src.core.services.report_filter import filter_report_lines
from src.core.services.stock_reconciliation import StockReconciliationEngine

logger = get_logger(__name__)


class BuildStockReportUseCase:
    """
    Fetch the stock report, reconciling it locally when the server can't.

    1. Ask the reporting endpoint for the pre-computed report.
    2. On failure, fetch products and movements concurrently and reconcile.
    3. If that fails too, return an empty report. Nothing is retried.
    """

    def __init__(
        self,
        gateway: IStockReportGateway,
        engine: StockReconciliationEngine | None = None,
        fallback_enabled: bool | None = None,
    ):
        self._gateway = gateway
        self._engine = engine or StockReconciliationEngine()
        self._fallback_enabled = (
            get_settings().report.fallback_enabled
            if fallback_enabled is None
            else fallback_enabled
        )

    async def execute(self, request: StockReportRequest) -> StockReport:
        """Execute build stock report use case."""
        with structlog.contextvars.bound_contextvars(
            date_from=request.date_from.isoformat(),
            date_to=request.date_to.isoformat(),
        ):
            logger.info("stock_report_started")

            report = await self._fetch_server_report(request)
            if report is None and self._fallback_enabled:
                report = await self._reconcile_locally(request)
            if report is None:
                report = StockReport(date_from=request.date_from, date_to=request.date_to)

            logger.info(
                "stock_report_complete",
                source=report.source.value,
                lines=len(report.lines),
            )

        if request.has_filters:
            # Summary stays that of the unfiltered report
            report = report.model_copy(
                update={
                    "lines": filter_report_lines(
                        report.lines, search=request.search, category=request.category
                    )
                }
            )
        return report

    async def _fetch_server_report(self, request: StockReportRequest) -> StockReport | None:
        try:
            return await self._gateway.get_stock_report(request.date_from, request.date_to)
        except Exception:
            logger.warning("stock_report_server_failed", exc_info=True)
            return None

    async def _reconcile_locally(self, request: StockReportRequest) -> StockReport | None:
        logger.info("stock_report_fallback")
        try:
            # First failure cancels the sibling fetch
            async with asyncio.TaskGroup() as tg:
                products_task = tg.create_task(self._gateway.list_products())
                movements_task = tg.create_task(
                    self._gateway.list_movements(request.date_from, request.date_to)
                )
        except Exception:
            logger.error("stock_report_fallback_failed", exc_info=True)
            return None

        lines = self._engine.reconcile(products_task.result(), movements_task.result())
        return StockReport(
            date_from=request.date_from,
            date_to=request.date_to,
            lines=lines,
            summary=self._engine.summarize(lines),
            source=ReportSource.RECONCILED,
        )
