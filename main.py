"""
Skycast - current weather and a 24 hour forecast in the terminal.
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

from skycast.config.manager import ConfigManager
from skycast.preferences import FilePreferencesStore, MemoryPreferencesStore, PreferencesStore
from skycast.weather import LoadState, WeatherViewModel, WeatherViewState
from weatherlib.exceptions import WeatherError
from weatherlib.geonames import GEONAMES_BASE_URL, GEONAMES_DEMO_USERNAME, GeoNamesClient
from weatherlib.logging_utils import DEFAULT_FORMAT, initLogging
from weatherlib.open_meteo import OPEN_METEO_BASE_URL, WEATHER_CACHE_TTL, OpenMeteoClient
from weatherlib.utils import jsonDumps

# Configure basic logging first, replaced by initLogging() once config is loaded
logging.basicConfig(format=DEFAULT_FORMAT, level=logging.WARNING)
logger = logging.getLogger(__name__)

DEFAULT_PREFERENCES_FILE = "~/.config/skycast/preferences.json"


class SkycastApp:
    """Wires configuration, clients, preferences and the view model together."""

    def __init__(self, configPath: str = "config.toml", configDirs: Optional[List[str]] = None):
        self.configManager = ConfigManager(configPath, configDirs)
        initLogging(self.configManager.getLoggingConfig())

        openMeteoConfig = self.configManager.getOpenMeteoConfig()
        self.weatherClient = OpenMeteoClient(
            cities=self.configManager.getCities(),
            baseUrl=openMeteoConfig.get("base-url", OPEN_METEO_BASE_URL),
            weatherTTL=openMeteoConfig.get("cache-ttl", WEATHER_CACHE_TTL),
            requestTimeout=openMeteoConfig.get("request-timeout", 10),
        )

        geoNamesConfig = self.configManager.getGeoNamesConfig()
        self.geoNamesClient = GeoNamesClient(
            username=geoNamesConfig.get("username", GEONAMES_DEMO_USERNAME),
            baseUrl=geoNamesConfig.get("base-url", GEONAMES_BASE_URL),
            maxRows=geoNamesConfig.get("max-rows", 10),
            requestTimeout=geoNamesConfig.get("request-timeout", 10),
        )

        self.preferences = self._makePreferences()
        self.viewModel = WeatherViewModel(
            client=self.weatherClient,
            preferences=self.preferences,
            selectedCity=self.configManager.getDefaultCity(),
        )

    def _makePreferences(self) -> PreferencesStore:
        prefsFile = self.configManager.getPreferencesConfig().get("file", DEFAULT_PREFERENCES_FILE)
        if not prefsFile:
            logger.info("Preferences file is disabled, settings will not be saved")
            return MemoryPreferencesStore()
        return FilePreferencesStore(prefsFile)

    def listCities(self) -> None:
        for name, coordinates in sorted(self.weatherClient.cities.items()):
            print(f"{name:<20} {coordinates.lat:>9.4f} {coordinates.lon:>10.4f}")

    async def search(self, query: str) -> int:
        """Print GeoNames matches for query, returns process exit code"""
        try:
            cities = await self.geoNamesClient.searchCities(query)
        except WeatherError as e:
            print(f"Search failed: {e.userMessage}", file=sys.stderr)
            return 1

        if not cities:
            print(f"No cities found for {query!r}")
            return 0

        for city in cities:
            print(f"{city.fullName:<40} {city.latitude:>9.4f} {city.longitude:>10.4f}  {city.timezone}")
        return 0

    async def showWeather(self, city: Optional[str] = None, useCache: bool = True) -> int:
        """Load and print weather for city, returns process exit code"""
        await self.viewModel.requestWeather(city, useCache=useCache)
        state = self.viewModel.state.value
        self.render(state)
        return 0 if state.status == LoadState.LOADED else 1

    def render(self, state: WeatherViewState) -> None:
        vm = self.viewModel
        if state.status == LoadState.FAILED:
            print(f"{state.city}: {state.errorMessage}", file=sys.stderr)
            return
        if state.current is None:
            return

        print(f"{state.city}: {vm.formatTemperature(state.current.main.temp)}, {vm.description}")
        print(f"Feels like {vm.formatTemperature(state.current.main.feelsLike)}")
        print()
        print("Next 24 hours:")
        for entry in state.forecast:
            print(
                f"  {entry.dayString[:3]} {entry.timeString}  "
                f"{vm.formatTemperature(entry.main.temp):>6}  "
                f"{entry.precipitationProbability:>3}%  {entry.weather[0].description}"
            )


def parseArguments():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Skycast - current weather and 24 hour forecast")
    parser.add_argument(
        "-c",
        "--config",
        default="config.toml",
        help="Path to configuration file (default: config.toml)",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times)",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration and exit",
    )
    parser.add_argument("--city", help="City to show weather for (default: [ui] default-city)")
    parser.add_argument("--search", metavar="QUERY", help="Search cities by name and exit")
    parser.add_argument("--list-cities", action="store_true", help="List cities with known coordinates and exit")
    parser.add_argument("--no-cache", action="store_true", help="Ignore cached current weather")
    parser.add_argument(
        "--toggle-units",
        action="store_true",
        help="Switch between Celsius and Fahrenheit (the choice is remembered)",
    )
    args = parser.parse_args()
    args.config = os.path.abspath(args.config)
    if args.config_dir:
        args.config_dir = [os.path.abspath(dirPath) for dirPath in args.config_dir]
    return args


def main():
    """Main entry point."""
    args = parseArguments()

    try:
        if args.print_config:
            configManager = ConfigManager(args.config, args.config_dir)
            print(jsonDumps(configManager.config, indent=2))
            sys.exit(0)

        app = SkycastApp(configPath=args.config, configDirs=args.config_dir)

        if args.list_cities:
            app.listCities()
            sys.exit(0)

        if args.search is not None:
            sys.exit(asyncio.run(app.search(args.search)))

        if args.toggle_units:
            useMetric = app.viewModel.toggleTemperatureUnit()
            print(f"Temperature unit: {'Celsius' if useMetric else 'Fahrenheit'}")

        sys.exit(asyncio.run(app.showWeather(args.city, useCache=not args.no_cache)))
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    except Exception as e:
        logger.error(f"Skycast crashed: {e}")
        logger.exception(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
