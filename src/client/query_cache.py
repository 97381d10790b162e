"""Query cache for the data-fetching client.

Results are stored under tuple keys such as ``("users",)`` or
``("violations", "student-1")``. Invalidating a key also drops every key it
prefixes, so ``invalidate(("violations",))`` clears all filtered listings.
"""

import logging
import threading
import time
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

logger = logging.getLogger(__name__)

CacheKey = Tuple[Hashable, ...]

_MISSING = object()


class QueryCache:
    """In-memory cache of query results.

    Thread-safe cache implementation using a dictionary and a lock. Entries
    expire after ``ttl`` seconds when a TTL is set, and the oldest entry is
    evicted once ``max_size`` is reached.
    """

    def __init__(
        self,
        max_size: int = 100,
        ttl: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize QueryCache.

        Args:
            max_size: Maximum number of cached entries. Defaults to 100.
            ttl: Seconds an entry stays fresh. None keeps entries until
                they are invalidated.
            clock: Time source, replaceable in tests.
        """
        self._cache: Dict[CacheKey, Tuple[float, Any]] = {}
        self._lock = threading.Lock()
        self._max_size = max_size
        self._ttl = ttl
        self._clock = clock
        self._hits = 0
        self._misses = 0

    def _evict_oldest(self) -> None:
        """Evict oldest entry when cache is full.

        Uses simple FIFO strategy by removing first entry.
        """
        if self._cache:
            oldest_key = next(iter(self._cache))
            del self._cache[oldest_key]
            logger.debug("Evicted cache entry: %s", oldest_key)

    def _is_fresh(self, stored_at: float) -> bool:
        return self._ttl is None or self._clock() - stored_at < self._ttl

    def get(self, key: CacheKey, default: Any = None) -> Any:
        """Get a cached value.

        Args:
            key: Cache key.
            default: Returned when the key is absent or expired.

        Returns:
            The cached value, or ``default``.
        """
        with self._lock:
            entry = self._cache.get(key)
            if entry is not None and self._is_fresh(entry[0]):
                self._hits += 1
                return entry[1]
            if entry is not None:
                del self._cache[key]
            self._misses += 1
            return default

    def set(self, key: CacheKey, value: Any) -> None:
        with self._lock:
            if key not in self._cache and len(self._cache) >= self._max_size:
                self._evict_oldest()
            self._cache[key] = (self._clock(), value)
            logger.debug("Cached query: %s", key)

    def fetch(self, key: CacheKey, loader: Callable[[], Any]) -> Any:
        """Return the cached value for ``key``, loading it on a miss.

        The loader runs outside the lock; a failing loader caches nothing.
        """
        value = self.get(key, _MISSING)
        if value is not _MISSING:
            return value
        value = loader()
        self.set(key, value)
        return value

    def invalidate(self, key: CacheKey) -> int:
        """Drop ``key`` and every key that starts with it.

        Returns:
            Number of entries removed.
        """
        size = len(key)
        with self._lock:
            stale = [cached for cached in self._cache if cached[:size] == key]
            for cached in stale:
                del self._cache[cached]
        if stale:
            logger.debug("Invalidated %d cache entries for %s", len(stale), key)
        return len(stale)

    def clear(self) -> None:
        """Clear all cached entries."""
        with self._lock:
            count = len(self._cache)
            self._cache.clear()
            logger.info("Cache cleared (%d entries removed)", count)

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with cache statistics.
        """
        with self._lock:
            return {
                "size": len(self._cache),
                "max_size": self._max_size,
                "ttl": self._ttl,
                "hits": self._hits,
                "misses": self._misses,
                "keys": list(self._cache.keys())[:10],  # First 10 keys for debugging
            }
