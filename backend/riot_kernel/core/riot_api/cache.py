"""
TTL-based in-memory cache for pipeline results, keyed by result type and
query descriptor.
"""

import threading
import time
from typing import Any, Dict, Hashable, Optional, Tuple

import structlog

logger = structlog.get_logger(__name__)


class TTLCache:
    """Simple TTL cache with thread-safe operations."""

    def __init__(self, maxsize: int = 1000, ttl: int = 300):
        """
        Initialize TTL cache.

        Args:
            maxsize: Maximum number of entries
            ttl: Time to live in seconds; 0 disables caching
        """
        self.maxsize = maxsize
        self.ttl = ttl
        self.cache: Dict[Hashable, Tuple[Any, float]] = {}
        self.lock = threading.RLock()
        self._hits = 0
        self._misses = 0

    def get(self, key: Hashable) -> Optional[Any]:
        """
        Get value from cache if not expired.

        Returns:
            Cached value if exists and not expired, None otherwise
        """
        with self.lock:
            entry = self.cache.get(key)
            if entry is None:
                self._misses += 1
                return None

            value, expiry = entry
            if time.time() >= expiry:
                del self.cache[key]
                self._misses += 1
                logger.debug("Cache expired", key=repr(key))
                return None

            self._hits += 1
            return value

    def set(self, key: Hashable, value: Any) -> None:
        """Set value in cache with TTL, evicting the oldest entry when full."""
        if self.ttl <= 0:
            return
        with self.lock:
            if len(self.cache) >= self.maxsize and key not in self.cache:
                oldest_key = next(iter(self.cache))
                del self.cache[oldest_key]
                logger.debug("Cache eviction", key=repr(oldest_key), reason="full")

            self.cache[key] = (value, time.time() + self.ttl)

    def clear(self) -> None:
        """Clear all entries from cache."""
        with self.lock:
            self.cache.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> Dict[str, int]:
        with self.lock:
            return {"size": len(self.cache), "hits": self._hits, "misses": self._misses}
