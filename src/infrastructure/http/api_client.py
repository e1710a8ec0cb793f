"""
Back-office REST API client.

Thin wrapper over ``httpx.AsyncClient`` that attaches the session's bearer
token and classifies failures into upstream errors
(network / HTTP status / unauthorized / payload).
"""

from types import TracebackType
from typing import Any

import httpx

from src.config import get_logger, get_settings
from src.core.exceptions import (
    UnauthorizedError,
    UpstreamFetchError,
    UpstreamPayloadError,
)
from src.infrastructure.http.auth_session import AuthSession

logger = get_logger(__name__)


class BackOfficeApiClient:
    """Authenticated JSON client for the back-office REST API.

    Args:
        session: Auth session supplying the bearer token.
        base_url: API root, defaults to settings.
        timeout: Request timeout in seconds, defaults to settings.
        client: Pre-built ``httpx.AsyncClient`` (its base URL is used as-is).
    """

    def __init__(
        self,
        session: AuthSession,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        api_settings = get_settings().api
        self._session = session
        self._login_path = api_settings.login_path
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or api_settings.base_url,
            timeout=timeout if timeout is not None else api_settings.timeout,
            headers={"Accept": "application/json"},
        )

    @property
    def session(self) -> AuthSession:
        return self._session

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        GET ``path`` and return the decoded JSON body.

        Raises:
            UnauthorizedError: On HTTP 401 outside the login path.
            UpstreamFetchError: On network errors, timeouts and non-2xx responses.
            UpstreamPayloadError: If the body is not valid JSON.
        """
        try:
            response = await self._client.get(
                path,
                params=params,
                headers=self._session.authorization_header(),
            )
        except httpx.TimeoutException as exc:
            logger.warning("upstream_timeout", path=path)
            raise UpstreamFetchError(path, "Request timed out") from exc
        except httpx.RequestError as exc:
            logger.warning("upstream_network_error", path=path, error=str(exc))
            raise UpstreamFetchError(path, str(exc)) from exc

        status = response.status_code
        if status == 401 and not path.startswith(self._login_path):
            logger.warning("upstream_unauthorized", path=path)
            self._session.clear()
            raise UnauthorizedError(path)
        if not response.is_success:
            logger.warning("upstream_http_error", path=path, status_code=status)
            raise UpstreamFetchError(path, f"HTTP {status}", status_code=status)

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamPayloadError(path, str(exc)) from exc

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "BackOfficeApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
