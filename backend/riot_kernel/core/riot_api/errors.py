"""Error classes raised by the Riot API retrieval pipeline.

Each class carries the HTTP status it stands for, so the gateway can surface
it without reinterpreting it.
"""

from typing import Any, Dict, Optional


class RiotAPIError(Exception):
    """Base exception for Riot API errors with status code tracking."""

    default_status: Optional[int] = None

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
        retry_after: Optional[float] = None,
        app_rate_limit: Optional[str] = None,
        method_rate_limit: Optional[str] = None,
    ) -> None:
        """
        Initialize RiotAPIError.

        Args:
            message: Error message
            status_code: HTTP status code; defaults to the class status
            response_data: Raw error body returned by Riot
            retry_after: Seconds to wait before retry (for 429 errors)
            app_rate_limit: X-App-Rate-Limit header (for 429 errors)
            method_rate_limit: X-Method-Rate-Limit header (for 429 errors)
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code if status_code is not None else self.default_status
        self.response_data: Dict[str, Any] = response_data or {}
        self.retry_after = retry_after
        self.app_rate_limit = app_rate_limit
        self.method_rate_limit = method_rate_limit

    def __str__(self) -> str:
        if self.status_code == 429 and self.retry_after:
            return f"Rate Limit Error {self.status_code}: {self.message} (Retry after: {self.retry_after}s)"
        if self.status_code:
            return f"Riot API Error {self.status_code}: {self.message}"
        return f"Riot API Error: {self.message}"


class BadRequestError(RiotAPIError):
    """Riot rejected the request parameters (400)."""

    default_status = 400


class AuthenticationError(RiotAPIError):
    """Missing, invalid or expired API key (401)."""

    default_status = 401


class ForbiddenError(RiotAPIError):
    """Key not allowed to call this endpoint (403)."""

    default_status = 403


class NotFoundError(RiotAPIError):
    """No data for the requested id (404)."""

    default_status = 404


class RateLimitError(RiotAPIError):
    """Rate limit still exceeded after retries (429)."""

    default_status = 429


class DecodeError(RiotAPIError):
    """Response payload does not match the requested result type (502)."""

    default_status = 502


class ServiceUnavailableError(RiotAPIError):
    """Riot servers unavailable after retries (503)."""

    default_status = 503
