"""
Open-Meteo Async Client

This module provides the OpenMeteoClient class: current weather and hourly
forecast retrieval for preset cities, normalization of the provider payloads
and a short-lived cache for current conditions.
"""

import datetime
import logging
import time
from typing import Any, Dict, Mapping, Optional

import httpx

from ..cache import CacheInterface, Clock, DictCache, StringKeyGenerator
from ..exceptions import InvalidCoordinatesError
from ..http_client import HttpJsonClient
from .conditions import toCondition
from .constants import (
    FORECAST_MAX_ENTRIES,
    FORECAST_STEP_HOURS,
    OPEN_METEO_BASE_URL,
    PRESET_CITIES,
    WEATHER_CACHE_TTL,
    Coordinates,
)
from .models import Forecast, ForecastEntry, WeatherMain, WeatherSnapshot

logger = logging.getLogger(__name__)


class OpenMeteoClient(HttpJsonClient):
    """
    Async client for the Open-Meteo forecast API with caching

    Cities are resolved to coordinates through a static table. Current
    weather is cached per city name for ``weatherTTL`` seconds, forecasts are
    always fetched fresh.

    Example usage:
        client = OpenMeteoClient()

        # Current conditions (cached for 5 minutes)
        snapshot = await client.fetchCurrent("Tokyo")
        print(f"{snapshot.main.temp}°C, {snapshot.condition.description}")

        # Next 24 hours in 3-hour steps
        for entry in await client.fetchForecast("Tokyo"):
            print(entry.timeString, entry.main.temp)
    """

    def __init__(
        self,
        cities: Optional[Mapping[str, Coordinates]] = None,
        cache: Optional[CacheInterface[str, WeatherSnapshot]] = None,
        baseUrl: str = OPEN_METEO_BASE_URL,
        weatherTTL: Optional[int] = WEATHER_CACHE_TTL,
        requestTimeout: float = 10,
        clock: Clock = time.time,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Open-Meteo client

        Args:
            cities: City name -> coordinates table (default: PRESET_CITIES)
            cache: Cache for current weather snapshots (default: in-memory DictCache)
            baseUrl: API base URL
            weatherTTL: Cache TTL for current weather (seconds)
            requestTimeout: HTTP request timeout (seconds)
            clock: Source of the current time, used for snapshot timestamps
            transport: Optional httpx transport
        """
        super().__init__(baseUrl=baseUrl, requestTimeout=requestTimeout, transport=transport)
        self.cities: Dict[str, Coordinates] = dict(cities if cities is not None else PRESET_CITIES)
        self.weatherTTL = weatherTTL
        self.clock = clock
        self.cache: CacheInterface[str, WeatherSnapshot] = (
            cache
            if cache is not None
            else DictCache[str, WeatherSnapshot](keyGenerator=StringKeyGenerator(), defaultTtl=weatherTTL, clock=clock)
        )

    def resolveCoordinates(self, city: str) -> Coordinates:
        """
        Get coordinates of a known city

        Raises:
            InvalidCoordinatesError: If the city is not in the table
        """
        coordinates = self.cities.get(city)
        if coordinates is None:
            logger.warning(f"Unknown city: {city!r}")
            raise InvalidCoordinatesError(city)
        return coordinates

    async def fetchCurrent(self, city: str, useCache: bool = True) -> WeatherSnapshot:
        """
        Get current weather for a city

        Uses: {baseUrl}/forecast?current_weather=true

        Args:
            city: City name from the coordinates table
            useCache: Return a cached snapshot younger than weatherTTL if available

        Returns:
            WeatherSnapshot with temperature and condition. Feels-like equals
            the temperature, humidity and pressure are 0 (not provided).

        Raises:
            InvalidCoordinatesError: Unknown city (no request is made)
            InvalidURLError, ServerError, NetworkError: Request failed

        Cache key format: city name as given
        """
        coordinates = self.resolveCoordinates(city)

        if useCache:
            try:
                cachedData = await self.cache.get(city, self.weatherTTL)
                if cachedData is not None:
                    logger.debug(f"Cache hit for weather: {city}")
                    return cachedData
            except Exception as e:
                logger.warning(f"Cache error for weather {city}: {e}")

        params = {
            "latitude": coordinates.lat,
            "longitude": coordinates.lon,
            "current_weather": "true",
            "temperature_unit": "celsius",
            "windspeed_unit": "kmh",
            "precipitation_unit": "mm",
            "timezone": "auto",
        }
        responseData = await self._getJson("/forecast", params)

        try:
            current = responseData["current_weather"]
            temperature = float(current["temperature"])
            condition = toCondition(int(current["weathercode"]))
        except (KeyError, TypeError, ValueError) as e:
            raise self._decodingFailure(f"Malformed current weather payload: {e!r}") from e

        result = WeatherSnapshot(
            main=WeatherMain(temp=temperature, feelsLike=temperature, humidity=0, pressure=0),
            weather=(condition,),
            name=city,
            timestamp=self.clock(),
        )
        logger.info(f"Fetched current weather for {city}: {temperature}°C, {condition.description}")

        try:
            await self.cache.set(city, result)
            logger.debug(f"Cached weather result: {city}")
        except Exception as e:
            logger.warning(f"Failed to cache weather result {city}: {e}")

        return result

    async def fetchForecast(self, city: str) -> Forecast:
        """
        Get forecast for the next 24 hours in 3-hour steps

        Uses: {baseUrl}/forecast?hourly=temperature_2m,weathercode,precipitation_probability

        The hourly series is sampled at indices 0, 3, 6, ... and the first 8
        samples are returned. Forecasts are not cached.

        Args:
            city: City name from the coordinates table

        Returns:
            Up to 8 ForecastEntry items; `main.humidity` holds the
            precipitation probability of that hour.

        Raises:
            InvalidCoordinatesError: Unknown city (no request is made)
            InvalidURLError, ServerError, NetworkError: Request failed
        """
        coordinates = self.resolveCoordinates(city)

        params = {
            "latitude": coordinates.lat,
            "longitude": coordinates.lon,
            "hourly": "temperature_2m,weathercode,precipitation_probability",
            "temperature_unit": "celsius",
            "timezone": "auto",
        }
        responseData = await self._getJson("/forecast", params)

        try:
            hourly = responseData["hourly"]
            times = hourly["time"]
            temperatures = hourly["temperature_2m"]
            codes = hourly["weathercode"]
            precipitation = hourly["precipitation_probability"]
            utcOffset = int(responseData.get("utc_offset_seconds", 0))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise self._decodingFailure(f"Malformed hourly payload: {e!r}") from e

        if not (len(times) == len(temperatures) == len(codes) == len(precipitation)):
            raise self._decodingFailure(
                f"Hourly arrays are not aligned: time={len(times)}, temperature_2m={len(temperatures)}, "
                f"weathercode={len(codes)}, precipitation_probability={len(precipitation)}"
            )

        forecast: Forecast = []
        for index in range(0, len(times), FORECAST_STEP_HOURS)[:FORECAST_MAX_ENTRIES]:
            try:
                temperature = float(temperatures[index])
                condition = toCondition(int(codes[index]))
                forecast.append(
                    ForecastEntry(
                        dt=_toUnixTime(times[index], utcOffset),
                        main=WeatherMain(
                            temp=temperature,
                            feelsLike=temperature,
                            humidity=int(precipitation[index] or 0),
                            pressure=0,
                        ),
                        weather=(condition,),
                    )
                )
            except (TypeError, ValueError) as e:
                raise self._decodingFailure(f"Malformed hourly entry #{index}: {e!r}") from e

        logger.info(f"Fetched forecast for {city}: {len(forecast)} entries")
        return forecast


def _toUnixTime(value: Any, utcOffset: int) -> int:
    """
    Convert an hourly `time` value to unix seconds

    Numbers are already unix seconds. Strings are ISO8601 local times of the
    requested location, so the response `utc_offset_seconds` is applied
    unless the string carries its own offset.
    """
    if isinstance(value, bool):
        raise TypeError(f"Unexpected time value: {value!r}")
    if isinstance(value, (int, float)):
        return int(value)

    parsed = datetime.datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone(datetime.timedelta(seconds=utcOffset)))
    return int(parsed.timestamp())
