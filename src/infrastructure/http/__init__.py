"""HTTP adapters for the back-office REST API."""

from src.infrastructure.http.api_client import BackOfficeApiClient
from src.infrastructure.http.auth_session import AuthSession, SessionUser
from src.infrastructure.http.stock_report_gateway import HttpStockReportGateway

__all__ = [
    "AuthSession",
    "SessionUser",
    "BackOfficeApiClient",
    "HttpStockReportGateway",
]
