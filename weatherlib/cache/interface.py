"""
Abstract cache interface for weatherlib.cache

Every cache implementation follows this contract, so clients can take any
backend (in-memory, no-op, ...) through dependency injection.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional

from .types import K, V


class CacheInterface(ABC, Generic[K, V]):
    """
    Generic cache interface for any key-value storage.

    Type Parameters:
        K: The key type
        V: The value type

    Example:
        >>> cache = DictCache[str, dict](keyGenerator=StringKeyGenerator(), defaultTtl=300)
        >>> await cache.set("Tokyo", {"temp": 21.5})
        >>> data = await cache.get("Tokyo")
    """

    @abstractmethod
    async def get(self, key: K, ttl: Optional[float] = None) -> Optional[V]:
        """
        Get cached value by key.

        Args:
            key: The cache key to retrieve
            ttl: Optional TTL override for this operation in seconds.
                 If None, the cache's default TTL is used.

        Returns:
            Optional[V]: The cached value if found and not expired, None otherwise
        """
        pass

    @abstractmethod
    async def set(self, key: K, value: V) -> bool:
        """
        Store value in cache.

        A fresh write always supersedes the previous entry for the same key.

        Args:
            key: The cache key to store the value under
            value: The value to cache

        Returns:
            bool: True if the value was successfully stored, False otherwise
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all entries from the cache."""
        pass

    @abstractmethod
    def getStats(self) -> Dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dict[str, Any]: Implementation-specific statistics
        """
        pass
