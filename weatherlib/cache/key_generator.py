"""
Key generator implementations for weatherlib.cache
"""

from .types import KeyGenerator


class StringKeyGenerator(KeyGenerator[str]):
    """
    Pass-through key generator for string keys.

    Example:
        >>> generator = StringKeyGenerator()
        >>> generator.generateKey("Tokyo")
        'Tokyo'

    Note:
        The input is validated to be a string, anything else raises TypeError.
        Keys are used verbatim, so "Paris" and "paris " are different keys.
    """

    def generateKey(self, obj: str) -> str:
        """
        Generate cache key from string input.

        Args:
            obj: String to use as cache key

        Returns:
            str: The same string passed as input

        Raises:
            TypeError: If obj is not a string
        """
        if not isinstance(obj, str):
            raise TypeError(f"StringKeyGenerator expects string input, got {type(obj).__name__}")

        return obj
