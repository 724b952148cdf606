"""
In-memory review cache.

Stores generated review text by request fingerprint with a fixed TTL.

Sandi Metz Principles:
- Single Responsibility: Cache generated reviews
- Small class: Focused caching logic
- Dependency Injection: Clock injected for testability
"""

import asyncio
import time
from collections import OrderedDict
from typing import Callable, Dict, Optional

from reviewgen.models.cache_entry import CacheEntry
from reviewgen.models.request import GenerationRequest
from reviewgen.utils.hasher import generate_fingerprint
from reviewgen.utils.logger import get_logger, log_cache_hit, log_cache_miss

logger = get_logger(__name__)


class RequestCache:
    """
    Fingerprint to text store with TTL and insertion-order eviction.

    Expired entries are treated as absent by lookup and physically
    removed by sweep. When full, the oldest inserted entry is evicted
    regardless of how recently it was read.
    """

    def __init__(
        self,
        ttl_seconds: float = 3600,
        max_size: int = 100,
        enabled: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize request cache.

        Args:
            ttl_seconds: Time-to-live for stored entries
            max_size: Maximum number of entries
            enabled: When False, lookups always miss and stores are ignored
            clock: Monotonic time source in seconds
        """
        if max_size < 1:
            raise ValueError("Max size must be at least 1")

        self._ttl = ttl_seconds
        self._max_size = max_size
        self._enabled = enabled
        self._clock = clock
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = asyncio.Lock()
        self._hits = 0
        self._misses = 0

    async def lookup(self, request: GenerationRequest) -> Optional[str]:
        """
        Get cached text for request.

        Args:
            request: Generation request

        Returns:
            Cached text if present and not expired, None otherwise
        """
        if not self._enabled:
            return None

        fingerprint = generate_fingerprint(request)

        async with self._lock:
            entry = self._entries.get(fingerprint)
            if entry is None or entry.is_expired(self._clock()):
                self._misses += 1
                log_cache_miss(fingerprint)
                return None

            self._hits += 1

        log_cache_hit(fingerprint)
        return entry.text

    async def store(self, request: GenerationRequest, text: str) -> None:
        """
        Store text for request, evicting the oldest entry when full.

        Args:
            request: Generation request
            text: Generated text
        """
        if not self._enabled:
            return

        fingerprint = generate_fingerprint(request)

        async with self._lock:
            entry = CacheEntry(text=text, expires_at=self._clock() + self._ttl)

            if fingerprint in self._entries:
                self._entries[fingerprint] = entry
                return

            while len(self._entries) >= self._max_size:
                self._evict_oldest()

            self._entries[fingerprint] = entry

        logger.debug("Cached review", cache_size=len(self._entries))

    async def sweep(self) -> int:
        """
        Purge expired entries.

        Returns:
            Number of entries removed
        """
        async with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if e.is_expired(now)]
            for key in expired:
                del self._entries[key]

        if expired:
            logger.info("Swept expired reviews", removed=len(expired))
        return len(expired)

    async def clear(self) -> None:
        """Clear all cached reviews."""
        async with self._lock:
            self._entries.clear()
        logger.info("Cleared review cache")

    async def stats(self) -> Dict[str, int]:
        """
        Get cache statistics.

        Returns:
            Dictionary with cache statistics
        """
        async with self._lock:
            now = self._clock()
            valid = sum(1 for e in self._entries.values() if not e.is_expired(now))
            total = len(self._entries)

        return {
            "total": total,
            "valid": valid,
            "expired": total - valid,
            "max_size": self._max_size,
            "hits": self._hits,
            "misses": self._misses,
        }

    def _evict_oldest(self) -> None:
        """Evict the oldest inserted entry. Caller holds the lock."""
        key, _ = self._entries.popitem(last=False)
        logger.debug("Evicted oldest review", fingerprint=key)

    @property
    def size(self) -> int:
        """Get current number of stored entries, expired included."""
        return len(self._entries)

    @property
    def max_size(self) -> int:
        """Get maximum cache size."""
        return self._max_size

    @property
    def enabled(self) -> bool:
        """Check if cache is enabled."""
        return self._enabled
