"""
Data models for the Open-Meteo client

Raw API payloads are described with TypedDict classes, the normalized model
handed to the application is built from frozen dataclasses. Temperatures are
always stored in Celsius, Fahrenheit is a derived view only.
"""

import datetime
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, TypeAlias, TypedDict

# API Response Models


class CurrentWeatherPayload(TypedDict):
    """`current_weather` block of the forecast endpoint"""

    temperature: float  # Celsius
    weathercode: int  # WMO weather code
    windspeed: float  # km/h
    winddirection: float  # degrees
    time: str  # ISO8601 local time, e.g. "2024-05-01T12:00"


class CurrentWeatherResponse(TypedDict):
    """Response of /forecast?current_weather=true"""

    current_weather: CurrentWeatherPayload


class HourlyPayload(TypedDict):
    """`hourly` block of the forecast endpoint, all arrays are positionally aligned"""

    time: List[str | int]  # ISO8601 local times (or unix seconds with timeformat=unixtime)
    temperature_2m: List[Optional[float]]
    weathercode: List[Optional[int]]
    precipitation_probability: List[Optional[int]]


class HourlyForecastResponse(TypedDict, total=False):
    """Response of /forecast?hourly=..."""

    utc_offset_seconds: int  # Offset of the local times in `hourly.time`
    timezone: str
    hourly: HourlyPayload


# Normalized models


def celsiusToFahrenheit(value: float) -> float:
    return value * 9 / 5 + 32


def convertTemperature(celsius: float, useMetric: bool) -> float:
    """Convert canonical Celsius value to the display unit"""
    return celsius if useMetric else celsiusToFahrenheit(celsius)


def _roundHalfAwayFromZero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def formatTemperature(celsius: float, useMetric: bool) -> str:
    """
    Format temperature for display

    Args:
        celsius: Temperature in Celsius
        useMetric: Show Celsius if True, Fahrenheit otherwise

    Returns:
        Rounded value with unit, e.g. "22°C" or "72°F"
    """
    value = _roundHalfAwayFromZero(convertTemperature(celsius, useMetric))
    return f"{value}°{'C' if useMetric else 'F'}"


@dataclass(frozen=True)
class WeatherMain:
    """Main weather readings"""

    temp: float  # Temperature (Celsius)
    feelsLike: float  # Feels like temperature (Celsius)
    humidity: int  # Humidity percentage, 0 if not provided
    pressure: int  # Pressure (hPa), 0 if not provided

    @property
    def tempFahrenheit(self) -> float:
        return celsiusToFahrenheit(self.temp)

    @property
    def feelsLikeFahrenheit(self) -> float:
        return celsiusToFahrenheit(self.feelsLike)


@dataclass(frozen=True)
class WeatherCondition:
    """Single weather condition entry"""

    description: str  # Human-readable description, e.g. "Light rain"
    icon: str  # Icon identifier, e.g. "cloud.rain.fill"
    main: str  # Condition category


def _asConditions(weather: Sequence[WeatherCondition]) -> Tuple[WeatherCondition, ...]:
    conditions = tuple(weather)
    if not conditions:
        raise ValueError("At least one weather condition is required")
    return conditions


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions for a city at a point in time"""

    main: WeatherMain
    weather: Tuple[WeatherCondition, ...]  # Non-empty, ordered
    name: str  # Source city name
    timestamp: float  # Capture time (unix seconds)

    def __post_init__(self):
        object.__setattr__(self, "weather", _asConditions(self.weather))

    @property
    def condition(self) -> WeatherCondition:
        """Primary (first) condition"""
        return self.weather[0]


@dataclass(frozen=True)
class ForecastEntry:
    """
    One forecast point. Identity is the timestamp: entries for the same city
    compare and hash by `dt` only.

    Note: `main.humidity` carries the precipitation probability (%) for
    forecast entries, the hourly series has no humidity.
    """

    dt: int  # Unix timestamp
    main: WeatherMain = field(compare=False)
    weather: Tuple[WeatherCondition, ...] = field(compare=False)

    def __post_init__(self):
        object.__setattr__(self, "weather", _asConditions(self.weather))

    @property
    def precipitationProbability(self) -> int:
        return self.main.humidity

    @property
    def date(self) -> datetime.datetime:
        return datetime.datetime.fromtimestamp(self.dt, tz=datetime.timezone.utc)

    @property
    def timeString(self) -> str:
        """Local wall-clock time, e.g. 15:00"""
        return datetime.datetime.fromtimestamp(self.dt).strftime("%H:%M")

    @property
    def dayString(self) -> str:
        """Local weekday name, e.g. Monday"""
        return datetime.datetime.fromtimestamp(self.dt).strftime("%A")


Forecast: TypeAlias = List[ForecastEntry]
