"""
GeoNames API Data Models

Raw `/searchJSON` payloads are described with TypedDict classes, search
results handed to the application are `City` instances.
"""

import uuid
from dataclasses import dataclass, field
from typing import List, NotRequired, TypedDict


class TimezoneInfo(TypedDict, total=False):
    """`timezone` block, only returned for style=FULL or some feature classes"""

    timeZoneId: str  # IANA zone, e.g. "Europe/Paris"
    gmtOffset: float
    dstOffset: float


class GeoName(TypedDict):
    """Single record of the `geonames` array"""

    geonameId: int
    name: str  # Place name
    countryName: str  # Country name in English
    countryCode: str  # ISO country code (e.g., "FR")
    lat: str  # Latitude (string in API response)
    lng: str  # Longitude (string in API response)
    population: NotRequired[int]
    timezone: NotRequired[TimezoneInfo]


class StatusInfo(TypedDict):
    """Error object GeoNames returns with HTTP 200, e.g. for a bad username"""

    message: str
    value: int


class SearchResponse(TypedDict, total=False):
    """Response of /searchJSON"""

    totalResultsCount: int
    geonames: List[GeoName]
    status: StatusInfo


@dataclass(frozen=True)
class City:
    """Geocoded place suitable for a weather lookup"""

    name: str
    country: str
    latitude: float
    longitude: float
    timezone: str  # IANA zone id, "UTC" when the provider omits it
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def fullName(self) -> str:
        return f"{self.name}, {self.country}"
