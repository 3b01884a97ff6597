"""
Shared JSON-over-HTTP helper for the API clients

Both the weather and the geocoding clients issue single GET requests that
return JSON. This base class builds the URL, performs the request with an
explicit timeout and maps every failure onto the WeatherError hierarchy.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from .exceptions import DecodingError, InvalidURLError, NetworkError, NoDataError, ServerError

logger = logging.getLogger(__name__)


class HttpJsonClient:
    """
    Base class for clients talking to a JSON HTTP API.

    Creates a new HTTP session for each request to support proper concurrent
    requests. No retries are made: every call is a single attempt.
    """

    def __init__(
        self,
        baseUrl: str,
        requestTimeout: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize client

        Args:
            baseUrl: API base URL, e.g. "https://api.open-meteo.com/v1"
            requestTimeout: HTTP request timeout (seconds)
            transport: Optional httpx transport (used by tests to stub the network)
        """
        self.baseUrl = baseUrl
        self.requestTimeout = requestTimeout
        self.transport = transport

    def _buildUrl(self, path: str, params: Dict[str, Any]) -> httpx.URL:
        """
        Build absolute request URL with percent-encoded query parameters

        Raises:
            InvalidURLError: If the base URL is malformed or not http(s)
        """
        try:
            url = httpx.URL(self.baseUrl.rstrip("/") + path, params=params)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise InvalidURLError(f"Cannot build URL from {self.baseUrl!r}: {e}") from e

        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidURLError(f"Cannot build URL from {self.baseUrl!r}: absolute http(s) URL expected")
        return url

    async def _getJson(self, path: str, params: Dict[str, Any]) -> Any:
        """
        Make GET request and decode JSON body

        Args:
            path: Endpoint path relative to the base URL (e.g. "/forecast")
            params: Query parameters

        Returns:
            Decoded JSON document

        Raises:
            InvalidURLError: URL could not be built
            ServerError: Non-2xx HTTP status
            NetworkError: Transport failure, timeout, empty or malformed body
        """
        url = self._buildUrl(path, params)
        logger.debug(f"Making request to {url}")

        try:
            async with httpx.AsyncClient(timeout=self.requestTimeout, transport=self.transport) as session:
                response = await session.get(url)
        except httpx.TimeoutException as e:
            logger.error(f"Request timeout: {url}")
            raise NetworkError(e) from e
        except httpx.HTTPError as e:
            logger.error(f"Network error: {e}")
            raise NetworkError(e) from e

        if not response.is_success:
            logger.error(f"API request failed: {response.status_code}")
            raise ServerError(response.status_code)

        if not response.content:
            logger.error(f"Empty response body from {url}")
            raise NetworkError(NoDataError())

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Failed to parse JSON response: {e}")
            raise NetworkError(DecodingError(f"Invalid JSON: {e}")) from e

        logger.debug(f"API request successful: {response.status_code}")
        return data

    @staticmethod
    def _decodingFailure(message: str) -> NetworkError:
        """Wrap a payload shape problem the same way as a JSON syntax error"""
        logger.error(f"Failed to decode response: {message}")
        return NetworkError(DecodingError(message))
