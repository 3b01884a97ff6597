"""
Tests for WMO weather code classification
"""

import pytest

from .conditions import UNKNOWN_CONDITION, WeatherConditionCode, classify, toCondition

EXPECTED = {
    0: ("Clear sky", "sun.max.fill"),
    1: ("Partly cloudy", "cloud.sun.fill"),
    2: ("Cloudy", "cloud.fill"),
    3: ("Overcast", "cloud.fill"),
    45: ("Foggy", "cloud.fog.fill"),
    48: ("Freezing fog", "cloud.fog.fill"),
    51: ("Light drizzle", "cloud.drizzle.fill"),
    53: ("Moderate drizzle", "cloud.drizzle.fill"),
    55: ("Dense drizzle", "cloud.drizzle.fill"),
    61: ("Light rain", "cloud.rain.fill"),
    63: ("Moderate rain", "cloud.heavyrain.fill"),
    65: ("Heavy rain", "cloud.heavyrain.fill"),
    71: ("Light snow", "cloud.snow.fill"),
    73: ("Moderate snow", "cloud.snow.fill"),
    75: ("Heavy snow", "cloud.snow.fill"),
    77: ("Snow grains", "cloud.snow.fill"),
    80: ("Rain showers", "cloud.rain.fill"),
    82: ("Heavy rain showers", "cloud.heavyrain.fill"),
    85: ("Snow showers", "cloud.snow.fill"),
    95: ("Thunderstorm", "cloud.bolt.fill"),
    99: ("Thunderstorm with hail", "cloud.bolt.rain.fill"),
}


@pytest.mark.parametrize("code,expected", sorted(EXPECTED.items()))
def test_known_codes(code, expected):
    info = classify(code)
    assert (info.description, info.icon) == expected


def test_every_enum_member_is_covered():
    assert {member.value for member in WeatherConditionCode} == set(EXPECTED)


@pytest.mark.parametrize("code", [-1, 4, 44, 56, 66, 81, 96, 100, 10**6])
def test_unknown_codes_fall_back(code):
    assert classify(code) == UNKNOWN_CONDITION
    assert classify(code) == ("Unknown", "cloud")


def test_to_condition_uses_description_as_category():
    condition = toCondition(63)
    assert condition.description == "Moderate rain"
    assert condition.icon == "cloud.heavyrain.fill"
    assert condition.main == "Moderate rain"


def test_to_condition_unknown():
    condition = toCondition(12345)
    assert (condition.description, condition.icon, condition.main) == ("Unknown", "cloud", "Unknown")
