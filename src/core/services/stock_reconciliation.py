"""
Stock Reconciliation Engine.

Rebuilds a per-product stock ledger for a reporting window from the
current on-hand quantities and the window's movements. Used when the
server-computed stock report is unavailable.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from src.config import get_logger
from src.core.entities.inventory import MovementType, Product, StockMovement
from src.core.entities.stock_report import (
    StockQuantity,
    StockReportLine,
    StockReportSummary,
)

logger = get_logger(__name__)

_CONSUMPTION_TYPES = frozenset({MovementType.OUT, MovementType.ADJUSTMENT})


class StockReconciliationEngine:
    """
    Pure, stateless reconciliation of stock levels.

    Closing stock is the product's current quantity, opening stock is
    back-solved from ``opening + purchases - consumption = closing``.
    Movements are expected to be pre-filtered to the reporting window.
    """

    def reconcile(
        self,
        products: Sequence[Product],
        movements: Iterable[StockMovement],
    ) -> list[StockReportLine]:
        """
        Build one report line per product, in input order.

        Args:
            products: Current inventory snapshot.
            movements: Movements within the reporting window.

        Returns:
            Report lines aligned with ``products``.
        """
        by_product: dict[str, list[StockMovement]] = defaultdict(list)
        movement_count = 0
        for movement in movements:
            by_product[movement.product_id].append(movement)
            movement_count += 1

        lines = [
            self._reconcile_product(product, by_product.get(product.id, []))
            for product in products
        ]

        logger.debug(
            "stock_reconciled",
            products=len(products),
            movements=movement_count,
        )
        return lines

    def summarize(self, lines: Iterable[StockReportLine]) -> StockReportSummary:
        """Sum every quantity and amount across report lines."""
        opening = purchases = balance = consumption = closing = StockQuantity()
        for line in lines:
            opening += line.opening_stock
            purchases += line.purchases
            balance += line.balance
            consumption += line.consumption
            closing += line.closing_stock

        return StockReportSummary(
            total_opening_qty=opening.qty,
            total_opening_value=opening.amount,
            total_purchases_qty=purchases.qty,
            total_purchases_value=purchases.amount,
            total_balance_qty=balance.qty,
            total_balance_value=balance.amount,
            total_consumption_qty=consumption.qty,
            total_consumption_value=consumption.amount,
            total_closing_qty=closing.qty,
            total_closing_value=closing.amount,
        )

    def _reconcile_product(
        self, product: Product, movements: list[StockMovement]
    ) -> StockReportLine:
        purchases_qty = sum(
            (m.quantity for m in movements if m.type == MovementType.IN), 0.0
        )
        # Adjustments count as consumption and are valued at selling price
        consumption_qty = sum(
            (abs(m.quantity) for m in movements if m.type in _CONSUMPTION_TYPES), 0.0
        )
        closing_qty = product.current_quantity
        opening_qty = max(0.0, closing_qty - purchases_qty + consumption_qty)
        balance_qty = max(0.0, opening_qty + purchases_qty)

        cost = product.cost_price
        return StockReportLine(
            product_id=product.id,
            barcode=product.barcode,
            name=product.name,
            category=product.category,
            cost_price=cost,
            selling_price=product.selling_price,
            opening_stock=StockQuantity(qty=opening_qty, amount=opening_qty * cost),
            purchases=StockQuantity(qty=purchases_qty, amount=purchases_qty * cost),
            balance=StockQuantity(qty=balance_qty, amount=balance_qty * cost),
            consumption=StockQuantity(
                qty=consumption_qty,
                amount=consumption_qty * product.selling_price,
            ),
            closing_stock=StockQuantity(qty=closing_qty, amount=closing_qty * cost),
        )
