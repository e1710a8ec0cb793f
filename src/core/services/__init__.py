"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/interfaces/*
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.report_filter import filter_report_lines, list_categories
from src.core.services.stock_reconciliation import StockReconciliationEngine

__all__ = [
    # Stock reconciliation
    "StockReconciliationEngine",
    # Report filtering
    "filter_report_lines",
    "list_categories",
]
