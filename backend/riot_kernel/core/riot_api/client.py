"""Riot API HTTP client with rate limiting, retries and error classification."""

import asyncio
from typing import Any, Dict, Optional, Sequence, Tuple

import httpx
import structlog

from .errors import (
    AuthenticationError,
    BadRequestError,
    DecodeError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    RiotAPIError,
    ServiceUnavailableError,
)
from .rate_limiter import RateLimiter

logger = structlog.get_logger(__name__)

# Seconds to wait on a 429 without a usable Retry-After header
DEFAULT_RETRY_AFTER = 1.0

CLIENT_ERRORS = {
    400: (BadRequestError, "Invalid request parameters"),
    401: (AuthenticationError, "Invalid API key"),
    403: (ForbiddenError, "Access forbidden"),
    404: (NotFoundError, "Resource not found"),
}


class RiotAPIClient:
    """Async HTTP transport for the Riot API."""

    def __init__(
        self,
        api_key: str,
        timeout: float = 25.0,
        max_retries: int = 3,
        backoff_base: float = 1.0,
        rate_limiter: Optional[RateLimiter] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Riot API client.

        Args:
            api_key: Riot API key sent as X-Riot-Token
            timeout: Read timeout in seconds
            max_retries: Retries for rate-limited, server and transport errors
            backoff_base: Base seconds for exponential backoff
            rate_limiter: Shared header-based rate limiter
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.api_key = api_key
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_base = backoff_base
        self.rate_limiter = rate_limiter or RateLimiter()
        self.transport = transport

        self.session: Optional[httpx.AsyncClient] = None
        self._session_lock = asyncio.Lock()

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def start_session(self) -> None:
        """Start the httpx session."""
        if self.session is None or self.session.is_closed:
            async with self._session_lock:
                if self.session is None or self.session.is_closed:
                    headers = {
                        "X-Riot-Token": self.api_key,
                        "Accept": "application/json",
                        "User-Agent": "riot-kernel/0.1",
                    }
                    timeout = httpx.Timeout(
                        connect=5.0, read=self.timeout, write=10.0, pool=30.0
                    )
                    self.session = httpx.AsyncClient(
                        headers=headers, timeout=timeout, transport=self.transport
                    )
                    logger.info(
                        "Riot API client session started",
                        api_key_prefix="[REDACTED]" if self.api_key else "None",
                    )

    async def close(self) -> None:
        """Close the httpx session."""
        if self.session and not self.session.is_closed:
            await self.session.aclose()
            logger.info("Riot API client session closed")

    def _retry_delay(self, response: httpx.Response, attempt: int) -> float:
        """
        Seconds to wait before retrying a failed response.

        Raises:
            RiotAPIError: For non-retryable statuses
        """
        status = response.status_code
        if status in CLIENT_ERRORS:
            error_class, message = CLIENT_ERRORS[status]
            raise error_class(message, status_code=status, response_data=_body(response))

        can_retry = attempt < self.max_retries

        if status == 429:
            retry_after = _retry_after(response)
            if can_retry:
                return retry_after
            raise RateLimitError(
                "Rate limit exceeded",
                status_code=status,
                retry_after=retry_after,
                app_rate_limit=response.headers.get("X-App-Rate-Limit"),
                method_rate_limit=response.headers.get("X-Method-Rate-Limit"),
            )

        if status >= 500:
            if can_retry:
                return self.backoff_base * 2**attempt
            if status == 503:
                raise ServiceUnavailableError("Service unavailable", status_code=status)
            raise RiotAPIError(f"Server error {status}", status_code=status)

        raise RiotAPIError(f"Unexpected status {status}", status_code=status)

    async def get(
        self, url: str, params: Optional[Sequence[Tuple[str, Any]]] = None
    ) -> Any:
        """
        Make a GET request with rate limiting and retry logic.

        Args:
            url: Request URL
            params: Query parameters; repeated names are sent repeatedly

        Returns:
            Decoded JSON payload

        Raises:
            RiotAPIError: For API and transport errors
        """
        await self.start_session()
        if self.session is None:
            raise RiotAPIError("Session not initialized")

        last_error: Optional[Exception] = None
        for attempt in range(self.max_retries + 1):
            await self.rate_limiter.wait_if_needed(url)
            try:
                response = await self.session.get(url, params=params)
            except httpx.RequestError as e:
                last_error = e
                logger.warning(
                    "Riot API request failed", url=url, attempt=attempt, error=str(e)
                )
                if attempt < self.max_retries:
                    await asyncio.sleep(self.backoff_base * 2**attempt)
                continue

            self.rate_limiter.update_limits(response.headers, url)
            if response.status_code == 200:
                try:
                    return response.json()
                except ValueError as e:
                    raise DecodeError(f"Invalid JSON from {url}: {e}") from e

            delay = self._retry_delay(response, attempt)
            logger.info(
                "Retrying Riot API request",
                url=url,
                status=response.status_code,
                attempt=attempt,
                delay=delay,
            )
            await asyncio.sleep(delay)

        raise RiotAPIError(f"Request failed: {last_error}")


def _retry_after(response: httpx.Response) -> float:
    """Seconds from the Retry-After header, or the default when unusable."""
    try:
        retry_after = float(response.headers.get("Retry-After", DEFAULT_RETRY_AFTER))
    except ValueError:
        return DEFAULT_RETRY_AFTER
    return retry_after if 0 <= retry_after < float("inf") else DEFAULT_RETRY_AFTER


def _body(response: httpx.Response) -> Dict[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}
