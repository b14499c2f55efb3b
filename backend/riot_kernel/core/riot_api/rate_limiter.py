"""Header-based rate limiting for Riot API requests.

Riot enforces app and method limits per platform, so every bucket is keyed by
the request host.
"""

import asyncio
import time
from typing import Dict, Mapping, Optional, Tuple
from urllib.parse import urlsplit

import structlog

from .endpoints import parse_rate_limit_header

logger = structlog.get_logger(__name__)


class RateLimiter:
    """Header-based rate limiter that trusts Riot API response headers."""

    def __init__(self, request_spacing: float = 0.05):
        """
        Initialize rate limiter.

        Args:
            request_spacing: Minimum seconds between two requests
        """
        self.remaining: Dict[str, int] = {}
        self.reset_time: Dict[str, float] = {}

        self.last_request_time: Dict[str, float] = {}
        self.request_spacing = request_spacing

        self.lock = asyncio.Lock()

    @staticmethod
    def app_key(url: str) -> str:
        return f"app:{urlsplit(url).netloc}"

    @staticmethod
    def method_key(url: str, method: str = "GET") -> str:
        """Bucket for a method: host plus the first path segments, ids excluded."""
        parts = urlsplit(url)
        segments = [segment for segment in parts.path.split("/") if segment]
        return f"{method}:{parts.netloc}:{'-'.join(segments[:4])}"

    async def wait_if_needed(self, url: str, method: str = "GET") -> None:
        """
        Wait if the app or method bucket for this request is exhausted.

        The delay is reserved under the lock and slept outside it, so a
        platform waiting for its reset never holds up other platforms.

        Args:
            url: Request URL
            method: HTTP method being used
        """
        async with self.lock:
            now = time.time()
            delay = max(
                self._bucket_delay(self.app_key(url), now),
                self._bucket_delay(self.method_key(url, method), now),
            )

            # Request spacing per host to avoid bursts
            host = urlsplit(url).netloc
            earliest = self.last_request_time.get(host, 0.0) + self.request_spacing
            delay = max(delay, earliest - now)
            self.last_request_time[host] = now + delay

        if delay > 0:
            await asyncio.sleep(delay)

    def _bucket_delay(self, key: str, now: float) -> float:
        """Seconds until an exhausted bucket resets. Clears it once reset."""
        remaining = self.remaining.get(key)
        if remaining is None or remaining > 0:
            return 0.0

        reset_time: Optional[float] = self.reset_time.get(key)
        if reset_time and reset_time > now:
            wait_time = reset_time - now
            logger.info(
                "Rate limit reached, waiting",
                bucket=key,
                wait_time=wait_time,
            )
            return wait_time

        self.remaining.pop(key, None)
        self.reset_time.pop(key, None)
        return 0.0

    def _update_bucket(self, key: str, limit_header: str, count_header: str) -> None:
        limits = parse_rate_limit_header(limit_header)
        counts = parse_rate_limit_header(count_header)

        # Fresh headers replace the bucket; the tightest window wins.
        tightest: Optional[Tuple[int, int]] = None
        for limit, count in zip(limits, counts):
            remaining = limit["requests"] - count["requests"]
            if tightest is None or remaining < tightest[0]:
                tightest = (remaining, limit["window"])

            logger.debug(
                "Updated rate limit",
                bucket=key,
                limit=limit["requests"],
                used=count["requests"],
                remaining=remaining,
                window=limit["window"],
            )

        if tightest is not None:
            self.remaining[key], window = tightest
            self.reset_time[key] = time.time() + window

    def update_limits(
        self, headers: Mapping[str, str], url: str, method: str = "GET"
    ) -> None:
        """
        Update rate limits from Riot API response headers.

        Args:
            headers: Response headers containing rate limit info
            url: URL that was called
            method: HTTP method used
        """
        self._update_bucket(
            self.app_key(url),
            headers.get("X-App-Rate-Limit", ""),
            headers.get("X-App-Rate-Limit-Count", ""),
        )
        self._update_bucket(
            self.method_key(url, method),
            headers.get("X-Method-Rate-Limit", ""),
            headers.get("X-Method-Rate-Limit-Count", ""),
        )
