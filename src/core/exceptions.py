"""
Domain exceptions for the back-office application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class BackOfficeError(Exception):
    """Base exception for all back-office errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Upstream (REST collaborator) Exceptions
class UpstreamError(BackOfficeError):
    """Base exception for calls to the back-office REST API.

    Every subclass is an upstream-fetch-failure: the endpoint did not
    produce a usable response.
    """

    pass


class UpstreamFetchError(UpstreamError):
    """Endpoint did not respond successfully (HTTP error, timeout, network)."""

    def __init__(
        self,
        path: str,
        reason: str,
        status_code: int | None = None,
    ):
        super().__init__(
            f"Failed to fetch '{path}': {reason}",
            code="UPSTREAM_FETCH_FAILED",
            details={"path": path, "reason": reason, "status_code": status_code},
        )
        self.path = path
        self.status_code = status_code


class UpstreamPayloadError(UpstreamError):
    """Endpoint responded but the payload is not of the expected shape."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Invalid payload from '{path}': {reason}",
            code="UPSTREAM_PAYLOAD_INVALID",
            details={"path": path, "reason": reason[:200]},
        )
        self.path = path


class UnauthorizedError(UpstreamError):
    """Server rejected the session token (HTTP 401)."""

    def __init__(self, path: str):
        super().__init__(
            f"Unauthorized request to '{path}'",
            code="UNAUTHORIZED",
            details={"path": path},
        )
        self.path = path


# Validation Exceptions
class ValidationError(BackOfficeError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )


class ConfigurationError(BackOfficeError):
    """Configuration error."""

    pass
