"""Tests for stock report filtering helpers."""

from src.core.entities.stock_report import StockReportLine
from src.core.services.report_filter import filter_report_lines, list_categories


def _line(product_id: str, name: str, barcode: str = "", category: str = "") -> StockReportLine:
    return StockReportLine(product_id=product_id, name=name, barcode=barcode, category=category)


LINES = [
    _line("P1", "Paracetamol 500mg", "6001001", "Analgesics"),
    _line("P2", "Amoxicillin 250mg", "6001002", "Antibiotics"),
    _line("P3", "Ibuprofen 200mg", "7002001", "Analgesics"),
    _line("P4", "Cotton Wool", "8000001"),
]


class TestFilterReportLines:
    def test_no_filters_returns_all(self):
        assert filter_report_lines(LINES) == LINES

    def test_search_by_name_case_insensitive(self):
        result = filter_report_lines(LINES, search="PARA")
        assert [line.product_id for line in result] == ["P1"]

    def test_search_by_barcode(self):
        result = filter_report_lines(LINES, search="6001")
        assert [line.product_id for line in result] == ["P1", "P2"]

    def test_category_exact(self):
        result = filter_report_lines(LINES, category="Analgesics")
        assert [line.product_id for line in result] == ["P1", "P3"]

    def test_combined(self):
        result = filter_report_lines(LINES, search="ibu", category="Analgesics")
        assert [line.product_id for line in result] == ["P3"]

    def test_no_match(self):
        assert filter_report_lines(LINES, search="insulin") == []


class TestListCategories:
    def test_distinct_sorted_non_empty(self):
        assert list_categories(LINES) == ["Analgesics", "Antibiotics"]

    def test_empty(self):
        assert list_categories([]) == []
