"""Tests for stock report entities."""

from datetime import date

from src.core.entities.stock_report import (
    ReportSource,
    StockQuantity,
    StockReport,
    StockReportLine,
    StockReportSummary,
)


class TestStockQuantity:
    def test_defaults(self):
        pair = StockQuantity()
        assert pair.qty == 0.0
        assert pair.amount == 0.0

    def test_addition(self):
        total = StockQuantity(qty=2, amount=20) + StockQuantity(qty=3, amount=45)
        assert total == StockQuantity(qty=5, amount=65)


class TestStockReportLine:
    def test_from_server_payload(self):
        line = StockReportLine.model_validate(
            {
                "_id": "P1",
                "barcode": "6001001",
                "name": "Paracetamol 500mg",
                "category": "Analgesics",
                "costPrice": 10,
                "sellingPrice": 15,
                "openingStock": {"qty": 40, "amount": 400},
                "purchases": {"qty": 30, "amount": 300},
                "balance": {"qty": 70, "amount": 700},
                "consumption": {"qty": 20, "amount": 300},
                "closingStock": {"qty": 50, "amount": 500},
            }
        )
        assert line.product_id == "P1"
        assert line.opening_stock.qty == 40
        assert line.closing_stock.amount == 500

    def test_missing_pairs_default_to_zero(self):
        line = StockReportLine(product_id="P1", name="X")
        assert line.purchases == StockQuantity()
        assert line.closing_stock == StockQuantity()


class TestStockReportSummary:
    def test_empty_is_all_zero(self):
        summary = StockReportSummary.empty()
        assert all(value == 0.0 for value in summary.model_dump().values())

    def test_wire_aliases(self):
        summary = StockReportSummary.model_validate(
            {"totalOpeningQty": 40, "totalClosingValue": 500}
        )
        assert summary.total_opening_qty == 40
        assert summary.total_closing_value == 500
        assert "totalConsumptionValue" in summary.model_dump(by_alias=True)


class TestStockReport:
    def test_defaults(self):
        report = StockReport(date_from=date(2024, 6, 1), date_to=date(2024, 6, 30))
        assert report.is_empty
        assert report.source == ReportSource.EMPTY
        assert report.summary == StockReportSummary.empty()

    def test_to_payload(self):
        report = StockReport(
            date_from=date(2024, 6, 1),
            date_to=date(2024, 6, 30),
            lines=[StockReportLine(product_id="P1", name="X")],
            source=ReportSource.SERVER,
        )
        payload = report.to_payload()
        assert payload["report"][0]["_id"] == "P1"
        assert payload["report"][0]["openingStock"] == {"qty": 0.0, "amount": 0.0}
        assert payload["summary"]["totalOpeningQty"] == 0.0


class TestStockReportLineNullFields:
    def test_null_fields_fall_back_to_defaults(self):
        line = StockReportLine.model_validate(
            {
                "_id": "P2",
                "name": "Amoxicillin",
                "barcode": None,
                "category": None,
                "costPrice": None,
                "purchases": None,
            }
        )
        assert line.barcode == ""
        assert line.category == ""
        assert line.cost_price == 0.0
        assert line.purchases == StockQuantity()
