"""
Weather retrieval exceptions

This module defines the exception hierarchy shared by the weather and
geocoding clients. All errors inherit from the WeatherError base class and
carry a short message suitable for showing to the user.
"""

from typing import Optional


class WeatherError(Exception):
    """
    Base exception for all weather retrieval errors.

    Catch this to handle any client error generically. ``userMessage`` holds
    a short human-readable description.
    """

    userMessage: str = "Unknown weather error."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.userMessage)


class InvalidURLError(WeatherError):
    """
    Raised when a request URL cannot be constructed.

    This is a programmer or configuration error, e.g. a malformed base URL.
    """

    userMessage = "Invalid URL. Please try again."


class NoDataError(WeatherError):
    """Raised when the provider returned an empty body."""

    userMessage = "No weather data available."


class DecodingError(WeatherError):
    """Raised when the response body cannot be parsed into the model."""

    userMessage = "Error processing weather data."


class InvalidCoordinatesError(WeatherError):
    """
    Raised when a city is not present in the static coordinates table.

    Args:
        city: The city name that could not be resolved
    """

    userMessage = "Invalid city coordinates."

    def __init__(self, city: str):
        super().__init__(f"Unknown city: {city!r}")
        self.city = city


class NetworkError(WeatherError):
    """
    Catch-all for transport failures, timeouts and undecodable responses.

    Args:
        originalError: The exception that caused this error
    """

    def __init__(self, originalError: Exception):
        # httpx timeouts often carry an empty message, name the type instead
        self.cause = str(originalError) or type(originalError).__name__
        super().__init__(f"Network error: {self.cause}")
        self.originalError = originalError

    @property
    def userMessage(self) -> str:  # type: ignore[override]
        return f"Network error: {self.cause}"


class ServerError(WeatherError):
    """
    Raised when the provider answers with a non-2xx HTTP status.

    Args:
        statusCode: HTTP status code of the response
    """

    def __init__(self, statusCode: int):
        super().__init__(f"HTTP {statusCode}")
        self.statusCode = statusCode

    @property
    def userMessage(self) -> str:  # type: ignore[override]
        return f"Server error (Code: {self.statusCode})"
