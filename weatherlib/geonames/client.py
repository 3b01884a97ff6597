"""
GeoNames API Async Client

This module provides the GeoNamesClient class: free-text city search through
the GeoNames `/searchJSON` endpoint with a per-instance result cache.
"""

import logging
from typing import Any, List, Mapping, Optional

import httpx

from ..cache import CacheInterface, DictCache, StringKeyGenerator
from ..http_client import HttpJsonClient
from .models import City

logger = logging.getLogger(__name__)

GEONAMES_BASE_URL = "https://secure.geonames.org"
# Public demo account, heavily rate limited
GEONAMES_DEMO_USERNAME = "demo"
MIN_QUERY_LENGTH = 2


class GeoNamesClient(HttpJsonClient):
    """
    Async client for GeoNames city search with caching

    Results are cached by the exact query string for the lifetime of the
    cache (no TTL): place names do not change.

    Example usage:
        client = GeoNamesClient(username="my_geonames_user")
        for city in await client.searchCities("Spring"):
            print(city.fullName, city.latitude, city.longitude)
    """

    def __init__(
        self,
        username: str = GEONAMES_DEMO_USERNAME,
        baseUrl: str = GEONAMES_BASE_URL,
        cache: Optional[CacheInterface[str, List[City]]] = None,
        maxRows: int = 10,
        requestTimeout: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize GeoNames client

        Args:
            username: GeoNames account name
            baseUrl: API base URL
            cache: Cache for search results (default: in-memory DictCache without TTL)
            maxRows: Maximum number of results per search
            requestTimeout: HTTP request timeout (seconds)
            transport: Optional httpx transport
        """
        super().__init__(baseUrl=baseUrl, requestTimeout=requestTimeout, transport=transport)
        self.username = username
        self.maxRows = maxRows
        self.cache: CacheInterface[str, List[City]] = (
            cache if cache is not None else DictCache[str, List[City]](keyGenerator=StringKeyGenerator())
        )

    async def searchCities(self, query: str) -> List[City]:
        """
        Search cities by name

        Uses: {baseUrl}/searchJSON?q=...&orderby=relevance&cities=cities1000

        Args:
            query: Free-form query, at least 2 characters

        Returns:
            Matching cities ordered by relevance, empty list for short queries

        Raises:
            InvalidURLError, ServerError, NetworkError: Request failed

        Cache key format: query as given
        """
        if len(query) < MIN_QUERY_LENGTH:
            return []

        try:
            cachedData = await self.cache.get(query)
            if cachedData is not None:
                logger.debug(f"Cache hit for city search: {query}")
                return cachedData
        except Exception as e:
            logger.warning(f"Cache error for city search {query}: {e}")

        params = {
            "q": query,
            "maxRows": self.maxRows,
            "username": self.username,
            "orderby": "relevance",
            "cities": "cities1000",
        }
        responseData = await self._getJson("/searchJSON", params)

        if not isinstance(responseData, Mapping) or "geonames" not in responseData:
            status = responseData.get("status") if isinstance(responseData, Mapping) else None
            if isinstance(status, Mapping):
                raise self._decodingFailure(f"GeoNames error {status.get('value')}: {status.get('message')}")
            raise self._decodingFailure("Missing 'geonames' in search response")

        try:
            cities = [self._toCity(record) for record in responseData["geonames"]]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise self._decodingFailure(f"Malformed GeoNames record: {e!r}") from e

        logger.info(f"City search {query!r}: {len(cities)} results")
        try:
            await self.cache.set(query, cities)
        except Exception as e:
            logger.warning(f"Failed to cache city search {query}: {e}")
        return cities

    @staticmethod
    def _toCity(record: Any) -> City:
        timezone = record.get("timezone") or {}
        return City(
            name=record["name"],
            country=record["countryName"],
            latitude=float(record["lat"]),
            longitude=float(record["lng"]),
            timezone=timezone.get("timeZoneId") or "UTC",
        )
