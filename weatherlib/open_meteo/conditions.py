"""
WMO weather interpretation codes

Open-Meteo reports the sky state as a WMO code. This module maps those codes
to a human-readable description and an SF Symbols icon name. The mapping is
total: unknown codes fall back to ("Unknown", "cloud").

See: https://open-meteo.com/en/docs (WMO Weather interpretation codes)
"""

from enum import IntEnum
from typing import Dict, NamedTuple

from .models import WeatherCondition


class ConditionInfo(NamedTuple):
    """Normalized code lookup result"""

    description: str
    icon: str


UNKNOWN_CONDITION = ConditionInfo("Unknown", "cloud")


class WeatherConditionCode(IntEnum):
    CLEAR_SKY = 0
    PARTLY_CLOUDY = 1
    CLOUDY = 2
    OVERCAST = 3
    FOGGY = 45
    DEPOSITING_RIME_FOG = 48
    DRIZZLE_LIGHT = 51
    DRIZZLE_MODERATE = 53
    DRIZZLE_DENSE = 55
    RAIN_LIGHT = 61
    RAIN_MODERATE = 63
    RAIN_HEAVY = 65
    SNOW_LIGHT = 71
    SNOW_MODERATE = 73
    SNOW_HEAVY = 75
    SNOW_GRAINS = 77
    RAIN_SHOWERS = 80
    RAIN_SHOWERS_HEAVY = 82
    SNOW_SHOWERS = 85
    THUNDERSTORM = 95
    THUNDERSTORM_HAIL = 99

    @property
    def info(self) -> ConditionInfo:
        return _CONDITIONS[self]


_CONDITIONS: Dict[WeatherConditionCode, ConditionInfo] = {
    WeatherConditionCode.CLEAR_SKY: ConditionInfo("Clear sky", "sun.max.fill"),
    WeatherConditionCode.PARTLY_CLOUDY: ConditionInfo("Partly cloudy", "cloud.sun.fill"),
    WeatherConditionCode.CLOUDY: ConditionInfo("Cloudy", "cloud.fill"),
    WeatherConditionCode.OVERCAST: ConditionInfo("Overcast", "cloud.fill"),
    WeatherConditionCode.FOGGY: ConditionInfo("Foggy", "cloud.fog.fill"),
    WeatherConditionCode.DEPOSITING_RIME_FOG: ConditionInfo("Freezing fog", "cloud.fog.fill"),
    WeatherConditionCode.DRIZZLE_LIGHT: ConditionInfo("Light drizzle", "cloud.drizzle.fill"),
    WeatherConditionCode.DRIZZLE_MODERATE: ConditionInfo("Moderate drizzle", "cloud.drizzle.fill"),
    WeatherConditionCode.DRIZZLE_DENSE: ConditionInfo("Dense drizzle", "cloud.drizzle.fill"),
    WeatherConditionCode.RAIN_LIGHT: ConditionInfo("Light rain", "cloud.rain.fill"),
    WeatherConditionCode.RAIN_MODERATE: ConditionInfo("Moderate rain", "cloud.heavyrain.fill"),
    WeatherConditionCode.RAIN_HEAVY: ConditionInfo("Heavy rain", "cloud.heavyrain.fill"),
    WeatherConditionCode.SNOW_LIGHT: ConditionInfo("Light snow", "cloud.snow.fill"),
    WeatherConditionCode.SNOW_MODERATE: ConditionInfo("Moderate snow", "cloud.snow.fill"),
    WeatherConditionCode.SNOW_HEAVY: ConditionInfo("Heavy snow", "cloud.snow.fill"),
    WeatherConditionCode.SNOW_GRAINS: ConditionInfo("Snow grains", "cloud.snow.fill"),
    WeatherConditionCode.RAIN_SHOWERS: ConditionInfo("Rain showers", "cloud.rain.fill"),
    WeatherConditionCode.RAIN_SHOWERS_HEAVY: ConditionInfo("Heavy rain showers", "cloud.heavyrain.fill"),
    WeatherConditionCode.SNOW_SHOWERS: ConditionInfo("Snow showers", "cloud.snow.fill"),
    WeatherConditionCode.THUNDERSTORM: ConditionInfo("Thunderstorm", "cloud.bolt.fill"),
    WeatherConditionCode.THUNDERSTORM_HAIL: ConditionInfo("Thunderstorm with hail", "cloud.bolt.rain.fill"),
}


def classify(code: int) -> ConditionInfo:
    """
    Map a WMO weather code to its description and icon

    Args:
        code: Weather code reported by the provider

    Returns:
        ConditionInfo for known codes, ("Unknown", "cloud") otherwise
    """
    try:
        return WeatherConditionCode(code).info
    except ValueError:
        return UNKNOWN_CONDITION


def toCondition(code: int) -> WeatherCondition:
    """Build normalized condition entry for a weather code"""
    info = classify(code)
    # Open-Meteo has no separate weather group, description doubles as category
    return WeatherCondition(description=info.description, icon=info.icon, main=info.description)
