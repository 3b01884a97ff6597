"""
Core type definitions and protocols for weatherlib.cache

This module contains the type variables and protocols shared by all
cache implementations.
"""

from typing import Callable, Protocol, TypeAlias, TypeVar

K = TypeVar("K")  # Key type
V = TypeVar("V")  # Value type
T = TypeVar("T", contravariant=True)  # Object type accepted by key generators

# Source of "now" in epoch seconds, injectable for tests
Clock: TypeAlias = Callable[[], float]


class KeyGenerator(Protocol[T]):
    """
    Protocol for generating cache keys from objects.

    Example:
        >>> class UpperKeyGenerator(KeyGenerator[str]):
        ...     def generateKey(self, obj: str) -> str:
        ...         return obj.upper()
    """

    def generateKey(self, obj: T) -> str:
        """
        Generate string cache key from object.

        Args:
            obj: The object to convert to a cache key

        Returns:
            str: A string representation suitable for use as a cache key
        """
        ...
