"""
Tests for the normalized weather models and unit helpers
"""

import datetime

import pytest

from .models import (
    ForecastEntry,
    WeatherCondition,
    WeatherMain,
    WeatherSnapshot,
    celsiusToFahrenheit,
    convertTemperature,
    formatTemperature,
)

CLEAR = WeatherCondition(description="Clear sky", icon="sun.max.fill", main="Clear sky")


def test_celsius_to_fahrenheit():
    assert celsiusToFahrenheit(0) == 32
    assert celsiusToFahrenheit(100) == 212
    assert celsiusToFahrenheit(-40) == -40


def test_convert_temperature():
    assert convertTemperature(20.0, useMetric=True) == 20.0
    assert convertTemperature(20.0, useMetric=False) == 68.0


@pytest.mark.parametrize(
    "celsius,useMetric,expected",
    [
        (21.4, True, "21°C"),
        (21.5, True, "22°C"),
        (-0.5, True, "-1°C"),
        (-3.2, True, "-3°C"),
        (20.0, False, "68°F"),
        (0.0, False, "32°F"),
    ],
)
def test_format_temperature(celsius, useMetric, expected):
    assert formatTemperature(celsius, useMetric) == expected


def test_weather_main_fahrenheit_views():
    main = WeatherMain(temp=10.0, feelsLike=5.0, humidity=0, pressure=0)
    assert main.tempFahrenheit == 50.0
    assert main.feelsLikeFahrenheit == 41.0
    # Canonical values stay in Celsius
    assert main.temp == 10.0


def test_snapshot_requires_condition():
    main = WeatherMain(temp=10.0, feelsLike=10.0, humidity=0, pressure=0)
    with pytest.raises(ValueError):
        WeatherSnapshot(main=main, weather=(), name="Paris", timestamp=0.0)


def test_snapshot_normalizes_conditions_to_tuple():
    main = WeatherMain(temp=10.0, feelsLike=10.0, humidity=0, pressure=0)
    snapshot = WeatherSnapshot(main=main, weather=[CLEAR], name="Paris", timestamp=1.0)
    assert snapshot.weather == (CLEAR,)
    assert snapshot.condition is CLEAR


def test_forecast_entry_identity_is_timestamp():
    first = ForecastEntry(dt=1714521600, main=WeatherMain(10.0, 10.0, 5, 0), weather=(CLEAR,))
    second = ForecastEntry(dt=1714521600, main=WeatherMain(12.0, 12.0, 50, 0), weather=(CLEAR,))
    other = ForecastEntry(dt=1714532400, main=WeatherMain(10.0, 10.0, 5, 0), weather=(CLEAR,))

    assert first == second
    assert hash(first) == hash(second)
    assert first != other
    assert len({first, second, other}) == 2


def test_forecast_entry_derived_fields():
    entry = ForecastEntry(dt=1714521600, main=WeatherMain(10.0, 10.0, 40, 0), weather=(CLEAR,))
    local = datetime.datetime.fromtimestamp(1714521600)

    assert entry.date == datetime.datetime(2024, 5, 1, tzinfo=datetime.timezone.utc)
    assert entry.timeString == local.strftime("%H:%M")
    assert entry.dayString == local.strftime("%A")
    assert entry.precipitationProbability == 40
