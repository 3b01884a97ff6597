"""
Null cache implementation for weatherlib.cache

Implements CacheInterface without storing anything. Useful for disabling
caching or for tests that must always hit the network layer.
"""

from typing import Any, Dict, Optional

from .interface import CacheInterface
from .types import K, V


class NullCache(CacheInterface[K, V]):
    """No-op cache that never stores anything."""

    async def get(self, key: K, ttl: Optional[float] = None) -> Optional[V]:
        """Always return None (cache miss)."""
        return None

    async def set(self, key: K, value: V) -> bool:
        """Do nothing, but pretend to succeed."""
        return True

    def clear(self) -> None:
        pass

    def getStats(self) -> Dict[str, Any]:
        """Return statistics indicating the cache is disabled."""
        return {"enabled": False}
