"""Filtering helpers for stock report lines."""

from collections.abc import Iterable

from src.core.entities.stock_report import StockReportLine


def filter_report_lines(
    lines: Iterable[StockReportLine],
    search: str | None = None,
    category: str | None = None,
) -> list[StockReportLine]:
    """
    Filter report lines by free-text search and category.

    ``search`` matches case-insensitively against name or barcode,
    ``category`` must match exactly. Either may be omitted. Order is kept.
    """
    needle = search.lower() if search else None
    result: list[StockReportLine] = []
    for line in lines:
        if needle and needle not in line.name.lower() and needle not in line.barcode.lower():
            continue
        if category and line.category != category:
            continue
        result.append(line)
    return result


def list_categories(lines: Iterable[StockReportLine]) -> list[str]:
    """Distinct non-empty categories, sorted."""
    return sorted({line.category for line in lines if line.category})
