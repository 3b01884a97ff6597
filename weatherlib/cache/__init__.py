"""
weatherlib.cache - Generic cache library

Core Components:
- CacheInterface: Abstract base class for all cache implementations
- CacheEntry: Value plus insertion timestamp with an ``isExpired(now, ttl)`` check
- DictCache: Thread-safe dictionary-based cache with an injectable clock
- NullCache: No-op cache for tests and for disabling caching
- StringKeyGenerator: Pass-through key generator for string keys

Example Usage:
    >>> from weatherlib.cache import DictCache, StringKeyGenerator
    >>>
    >>> cache = DictCache[str, dict](keyGenerator=StringKeyGenerator(), defaultTtl=300)
    >>> await cache.set("Tokyo", {"temp": 21.5})
    >>> data = await cache.get("Tokyo")
"""

from .dict_cache import DictCache
from .entry import CacheEntry
from .interface import CacheInterface
from .key_generator import StringKeyGenerator
from .null_cache import NullCache
from .types import Clock, K, KeyGenerator, T, V

__all__ = [
    # Core types
    "Clock",
    "KeyGenerator",
    "K",
    "V",
    "T",
    # Interfaces
    "CacheInterface",
    "CacheEntry",
    # Implementations
    "DictCache",
    "NullCache",
    # Key generators
    "StringKeyGenerator",
]
