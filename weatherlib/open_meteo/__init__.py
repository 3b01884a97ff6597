"""
Open-Meteo Async Client Library

This module provides an async client for the Open-Meteo forecast API
(https://open-meteo.com/) with in-memory caching of current conditions.
Open-Meteo needs no API key.

Example usage:
    from weatherlib.open_meteo import OpenMeteoClient

    client = OpenMeteoClient()
    snapshot = await client.fetchCurrent("London")
    print(f"Temperature: {snapshot.main.temp}°C, {snapshot.condition.description}")

    forecast = await client.fetchForecast("London")
"""

from .client import OpenMeteoClient
from .conditions import ConditionInfo, WeatherConditionCode, classify, toCondition
from .constants import OPEN_METEO_BASE_URL, PRESET_CITIES, WEATHER_CACHE_TTL, Coordinates
from .models import (
    Forecast,
    ForecastEntry,
    WeatherCondition,
    WeatherMain,
    WeatherSnapshot,
    celsiusToFahrenheit,
    convertTemperature,
    formatTemperature,
)

__all__ = [
    "OpenMeteoClient",
    "ConditionInfo",
    "WeatherConditionCode",
    "classify",
    "toCondition",
    "Coordinates",
    "OPEN_METEO_BASE_URL",
    "PRESET_CITIES",
    "WEATHER_CACHE_TTL",
    "Forecast",
    "ForecastEntry",
    "WeatherCondition",
    "WeatherMain",
    "WeatherSnapshot",
    "celsiusToFahrenheit",
    "convertTemperature",
    "formatTemperature",
]
