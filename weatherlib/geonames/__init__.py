"""
GeoNames city search client

Example:
    >>> from weatherlib.geonames import GeoNamesClient
    >>> client = GeoNamesClient(username="demo")
    >>> cities = await client.searchCities("Paris")
"""

from .client import GEONAMES_BASE_URL, GEONAMES_DEMO_USERNAME, GeoNamesClient
from .models import City, GeoName, SearchResponse, StatusInfo, TimezoneInfo

__all__ = [
    "GeoNamesClient",
    "GEONAMES_BASE_URL",
    "GEONAMES_DEMO_USERNAME",
    "City",
    "GeoName",
    "SearchResponse",
    "StatusInfo",
    "TimezoneInfo",
]
