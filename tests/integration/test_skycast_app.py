"""
Integration tests for the Skycast application

The application is built from a real config file; only the network is
replaced with golden data.
"""

import json

import pytest

from main import SkycastApp
from skycast.weather import LoadState


def makeApp(configPath, goldenData) -> SkycastApp:
    app = SkycastApp(configPath=str(configPath))
    app.weatherClient.transport = goldenData.transport()
    app.geoNamesClient.transport = goldenData.transport()
    return app


@pytest.mark.asyncio
async def testShowWeatherForDefaultCity(writeConfig, goldenData, capsys):
    configPath = writeConfig('[ui]\ndefault-city = "Tokyo"\n')
    app = makeApp(configPath, goldenData)

    exitCode = await app.showWeather()

    assert exitCode == 0
    state = app.viewModel.state.value
    assert state.status == LoadState.LOADED
    assert state.city == "Tokyo"
    assert state.current.main.temp == 21.4
    assert state.current.condition.description == "Light rain"
    assert len(state.forecast) == 8

    out = capsys.readouterr().out
    assert "Tokyo: 21°C, Light rain" in out
    assert "Next 24 hours:" in out

    assert len(goldenData.requests) == 2


@pytest.mark.asyncio
async def testCurrentWeatherIsCachedAcrossCycles(writeConfig, goldenData):
    app = makeApp(writeConfig(), goldenData)

    await app.showWeather("Tokyo")
    await app.showWeather("Tokyo")

    currentRequests = [r for r in goldenData.requests if r.url.params.get("current_weather") == "true"]
    forecastRequests = [r for r in goldenData.requests if "hourly" in r.url.params]
    assert len(currentRequests) == 1
    assert len(forecastRequests) == 2


@pytest.mark.asyncio
async def testConfiguredOpenMeteoSettings(writeConfig, goldenData):
    configPath = writeConfig(
        '[open-meteo]\nbase-url = "https://meteo.example.org/v1"\ncache-ttl = 0\n'
        '[cities]\n"Reykjavik" = [64.1466, -21.9426]\n'
    )
    app = makeApp(configPath, goldenData)

    await app.showWeather("Reykjavik")
    await app.showWeather("Reykjavik")

    assert goldenData.requests[0].url.host == "meteo.example.org"
    assert goldenData.requests[0].url.params["latitude"] == "64.1466"
    # TTL 0: every cycle refetches current weather
    currentRequests = [r for r in goldenData.requests if r.url.params.get("current_weather") == "true"]
    assert len(currentRequests) == 2


@pytest.mark.asyncio
async def testUnknownCityFails(writeConfig, goldenData, capsys):
    app = makeApp(writeConfig(), goldenData)

    exitCode = await app.showWeather("Atlantis")

    assert exitCode == 1
    assert app.viewModel.state.value.status == LoadState.FAILED
    assert goldenData.requests == []
    assert "Atlantis: Invalid city coordinates." in capsys.readouterr().err


@pytest.mark.asyncio
async def testToggleUnitsIsRemembered(writeConfig, goldenData, tempDir, capsys):
    configPath = writeConfig()
    app = makeApp(configPath, goldenData)

    assert app.viewModel.toggleTemperatureUnit() is False
    await app.showWeather("Tokyo")
    assert "Tokyo: 71°F" in capsys.readouterr().out

    saved = json.loads((tempDir / "preferences.json").read_text(encoding="utf-8"))
    assert saved == {"useMetric": False}

    reopened = makeApp(configPath, goldenData)
    assert reopened.viewModel.useMetric is False


@pytest.mark.asyncio
async def testSearch(writeConfig, goldenData, capsys):
    configPath = writeConfig('[geonames]\nusername = "integration"\n')
    app = makeApp(configPath, goldenData)

    exitCode = await app.search("Paris")

    assert exitCode == 0
    out = capsys.readouterr().out
    assert "Paris, France" in out
    assert "Europe/Paris" in out
    assert out.count("Paris, United States") == 2
    assert "UTC" in out
    assert goldenData.requests[0].url.params["username"] == "integration"


@pytest.mark.asyncio
async def testSearchNoResults(writeConfig, goldenData, capsys):
    app = makeApp(writeConfig(), goldenData)

    assert await app.search("Qqqqzz") == 0
    assert "No cities found" in capsys.readouterr().out


@pytest.mark.asyncio
async def testSearchShortQueryMakesNoRequest(writeConfig, goldenData, capsys):
    app = makeApp(writeConfig(), goldenData)

    assert await app.search("P") == 0
    assert goldenData.requests == []


def testPreferencesCanBeDisabled(writeConfig):
    app = SkycastApp(configPath=str(writeConfig('[preferences]\nfile = ""\n')))

    app.viewModel.toggleTemperatureUnit()

    assert app.viewModel.useMetric is False
