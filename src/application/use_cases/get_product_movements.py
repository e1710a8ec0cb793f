"""Get Product Movements Use Case: one product's history for a report window."""

from src.application.dto.requests import ProductMovementsRequest
from src.config import get_logger
from src.core.entities.inventory import StockMovement
from src.core.interfaces.stock_report_gateway import IStockReportGateway

logger = get_logger(__name__)


class GetProductMovementsUseCase:
    """List a product's stock movements; an upstream failure yields no rows."""

    def __init__(self, gateway: IStockReportGateway):
        self._gateway = gateway

    async def execute(self, request: ProductMovementsRequest) -> list[StockMovement]:
        try:
            movements = await self._gateway.list_product_movements(
                request.product_id, request.date_from, request.date_to
            )
        except Exception:
            logger.warning(
                "product_movements_failed",
                product_id=request.product_id,
                exc_info=True,
            )
            return []

        logger.info(
            "product_movements_fetched",
            product_id=request.product_id,
            count=len(movements),
        )
        return movements
