"""
Dictionary-based cache implementation for weatherlib.cache

In-memory cache with per-entry insertion timestamps, TTL checks against an
injectable clock and an optional size limit.
"""

import logging
import threading
import time
from typing import Any, Dict, Generic, Optional

from .entry import CacheEntry
from .interface import CacheInterface
from .types import Clock, K, KeyGenerator, V

logger = logging.getLogger(__name__)


class DictCache(CacheInterface[K, V], Generic[K, V]):
    """
    Thread-safe dictionary-based cache.

    Entries are never evicted proactively: an expired entry is dropped when
    it is read, and a fresh ``set()`` simply supersedes the old one. When
    ``maxSize`` is reached the oldest entry is dropped to make room.

    Example:
        >>> cache = DictCache[str, WeatherSnapshot](
        ...     keyGenerator=StringKeyGenerator(),
        ...     defaultTtl=300,
        ... )
        >>> await cache.set("Tokyo", snapshot)
        >>> await cache.get("Tokyo")  # within 5 minutes
    """

    def __init__(
        self,
        keyGenerator: KeyGenerator[Any],
        defaultTtl: Optional[float] = None,
        maxSize: Optional[int] = None,
        clock: Clock = time.time,
    ):
        """
        Initialize cache

        Args:
            keyGenerator: Converts keys to their string form
            defaultTtl: Default TTL in seconds, None means entries never expire
            maxSize: Maximum number of entries, None means unlimited
            clock: Source of the current time in epoch seconds
        """
        if maxSize is not None and maxSize <= 0:
            raise ValueError("maxSize must be positive")

        self.keyGenerator = keyGenerator
        self.defaultTtl = defaultTtl
        self.maxSize = maxSize
        self.clock = clock
        self._storage: Dict[str, CacheEntry[V]] = {}
        self._lock = threading.RLock()

    def _effectiveTtl(self, ttl: Optional[float]) -> Optional[float]:
        return ttl if ttl is not None else self.defaultTtl

    async def get(self, key: K, ttl: Optional[float] = None) -> Optional[V]:
        """
        Get cached value by key

        Args:
            key: Cache key
            ttl: TTL override in seconds (uses defaultTtl if None)

        Returns:
            Cached value if found and not expired, None otherwise
        """
        try:
            strKey = self.keyGenerator.generateKey(key)
        except Exception as e:
            logger.error(f"Failed to generate cache key for {key!r}: {e}")
            return None

        with self._lock:
            entry = self._storage.get(strKey)
            if entry is None:
                logger.debug(f"Cache miss for key: {strKey}")
                return None

            now = self.clock()
            if entry.isExpired(now, self._effectiveTtl(ttl)):
                del self._storage[strKey]
                logger.debug(f"Removed expired entry: {strKey} (age: {entry.age(now):.1f}s)")
                return None

            logger.debug(f"Cache hit for key: {strKey} (age: {entry.age(now):.1f}s)")
            return entry.value

    async def set(self, key: K, value: V) -> bool:
        """
        Store value in cache

        Args:
            key: Cache key
            value: Value to store

        Returns:
            True if successful, False otherwise
        """
        try:
            strKey = self.keyGenerator.generateKey(key)
        except Exception as e:
            logger.error(f"Failed to generate cache key for {key!r}: {e}")
            return False

        with self._lock:
            if self.maxSize is not None and strKey not in self._storage:
                while len(self._storage) >= self.maxSize:
                    oldestKey = min(self._storage, key=lambda k: self._storage[k].insertedAt)
                    del self._storage[oldestKey]
                    logger.debug(f"Evicted oldest entry: {oldestKey}")

            self._storage[strKey] = CacheEntry(value=value, insertedAt=self.clock())
            logger.debug(f"Stored entry for key: {strKey}")
        return True

    def clear(self) -> None:
        """Clear all cached data"""
        with self._lock:
            self._storage.clear()
        logger.debug("Cleared all cache data")

    def getStats(self) -> Dict[str, Any]:
        """Get cache statistics"""
        with self._lock:
            return {
                "entries": len(self._storage),
                "maxSize": self.maxSize,
                "defaultTtl": self.defaultTtl,
                "threadSafe": True,
            }
