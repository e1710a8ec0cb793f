#!/usr/bin/env python3
"""
Back-office management CLI.

Usage:
    python manage.py stock-report --from 2026-10-01 --to 2026-10-18
    python manage.py stock-report --search para --category Analgesics
    python manage.py movements PRODUCT_ID --from 2026-10-01 --to 2026-10-18
    python manage.py categories

The bearer token is read from --token or BACKOFFICE_API_TOKEN.
Output is the report JSON in the reporting service's shape.
"""

import argparse
import asyncio
import json
import sys
from datetime import date

from src.application.dto.requests import ProductMovementsRequest, StockReportRequest
from src.application.use_cases import BuildStockReportUseCase, GetProductMovementsUseCase
from src.config import configure_logging, get_settings
from src.core.exceptions import ValidationError
from src.infrastructure.http import AuthSession, BackOfficeApiClient, HttpStockReportGateway


def _build_session(args: argparse.Namespace) -> AuthSession:
    return AuthSession(token=args.token or get_settings().api.token)


def _range_kwargs(args: argparse.Namespace) -> dict[str, date]:
    kwargs: dict[str, date] = {}
    if args.date_from:
        kwargs["date_from"] = args.date_from
    if args.date_to:
        kwargs["date_to"] = args.date_to
    return kwargs


async def _stock_report(args: argparse.Namespace) -> dict:
    request = StockReportRequest(
        search=args.search,
        category=args.category,
        **_range_kwargs(args),
    )
    async with BackOfficeApiClient(_build_session(args), base_url=args.base_url) as client:
        report = await BuildStockReportUseCase(HttpStockReportGateway(client)).execute(request)

    payload = report.to_payload()
    payload["source"] = report.source.value
    payload["from"] = report.date_from.isoformat()
    payload["to"] = report.date_to.isoformat()
    return payload


async def _movements(args: argparse.Namespace) -> list[dict]:
    request = ProductMovementsRequest(product_id=args.product_id, **_range_kwargs(args))
    async with BackOfficeApiClient(_build_session(args), base_url=args.base_url) as client:
        movements = await GetProductMovementsUseCase(HttpStockReportGateway(client)).execute(
            request
        )
    return [
        {
            **m.model_dump(mode="json", by_alias=True),
            "label": m.type.label,
            "signedQuantity": m.signed_quantity,
        }
        for m in movements
    ]


async def _categories(args: argparse.Namespace) -> list[dict]:
    async with BackOfficeApiClient(_build_session(args), base_url=args.base_url) as client:
        categories = await HttpStockReportGateway(client).list_categories()
    return [c.model_dump(by_alias=True) for c in categories]


def cmd_stock_report(args: argparse.Namespace) -> None:
    print(json.dumps(asyncio.run(_stock_report(args)), indent=2, ensure_ascii=False))


def cmd_movements(args: argparse.Namespace) -> None:
    print(json.dumps(asyncio.run(_movements(args)), indent=2, ensure_ascii=False))


def cmd_categories(args: argparse.Namespace) -> None:
    print(json.dumps(asyncio.run(_categories(args)), indent=2, ensure_ascii=False))


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--from", dest="date_from", type=date.fromisoformat, help="Start date (YYYY-MM-DD)")
    parser.add_argument("--to", dest="date_to", type=date.fromisoformat, help="End date (YYYY-MM-DD)")
    parser.add_argument("--token", default=None, help="Bearer token (default: BACKOFFICE_API_TOKEN)")
    parser.add_argument("--base-url", default=None, help="API root (default: BACKOFFICE_API_BASE_URL)")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Back-office management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # stock-report
    p_report = sub.add_parser("stock-report", help="Print the stock report for a date range")
    _add_common(p_report)
    p_report.add_argument("--search", default=None, help="Filter by product name or barcode")
    p_report.add_argument("--category", default=None, help="Filter by category")
    p_report.set_defaults(func=cmd_stock_report)

    # movements
    p_moves = sub.add_parser("movements", help="Print one product's stock movements")
    p_moves.add_argument("product_id", help="Product ID")
    _add_common(p_moves)
    p_moves.set_defaults(func=cmd_movements)

    # categories
    p_cats = sub.add_parser("categories", help="Print product categories with counts")
    p_cats.add_argument("--token", default=None, help="Bearer token (default: BACKOFFICE_API_TOKEN)")
    p_cats.add_argument("--base-url", default=None, help="API root (default: BACKOFFICE_API_BASE_URL)")
    p_cats.set_defaults(func=cmd_categories)

    args = parser.parse_args()
    configure_logging()
    try:
        args.func(args)
    except ValidationError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
