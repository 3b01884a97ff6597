"""
Cache entry wrapper with insertion timestamp and expiration check.
"""

from dataclasses import dataclass
from typing import Generic, Optional

from .types import V


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    """
    Cached value together with the moment it was stored.

    Attributes:
        value: The cached value
        insertedAt: Insertion time in epoch seconds
    """

    value: V
    insertedAt: float

    def age(self, now: float) -> float:
        """Age of the entry in seconds at the given moment."""
        return now - self.insertedAt

    def isExpired(self, now: float, ttl: Optional[float]) -> bool:
        """
        Check whether the entry is expired.

        Args:
            now: Current time in epoch seconds
            ttl: Time-to-live in seconds. None or negative values mean
                 the entry never expires, 0 means it is always expired.

        Returns:
            bool: True if the entry is not valid anymore
        """
        if ttl is None or ttl < 0:
            return False
        return self.age(now) >= ttl
