"""
Weather view model

Coordinates one load cycle at a time: current conditions and the forecast
for the selected city are fetched concurrently and published as a single
WeatherViewState. Starting a new cycle cancels the previous one, and a
cycle may only publish while it is still the latest.
"""

import asyncio
import dataclasses
import logging
from typing import Optional, Protocol, Tuple

from weatherlib.exceptions import WeatherError
from weatherlib.open_meteo import Forecast, WeatherSnapshot, convertTemperature, formatTemperature

from ..preferences import USE_METRIC_DEFAULT, USE_METRIC_KEY, PreferencesError, PreferencesStore
from .state import DEFAULT_CITY, LoadState, StateStore, WeatherViewState

logger = logging.getLogger(__name__)


class WeatherClient(Protocol):
    async def fetchCurrent(self, city: str, useCache: bool = True) -> WeatherSnapshot: ...

    async def fetchForecast(self, city: str) -> Forecast: ...


class WeatherViewModel:
    """
    Presentation logic for the weather screen.

    All methods must be called from the event loop thread. Observe changes
    through `state`:

        viewModel = WeatherViewModel(OpenMeteoClient(), MemoryPreferencesStore())
        viewModel.state.subscribe(render)
        await viewModel.requestWeather("Tokyo")
    """

    def __init__(
        self,
        client: WeatherClient,
        preferences: PreferencesStore,
        selectedCity: str = DEFAULT_CITY,
    ):
        self.client = client
        self.preferences = preferences
        self._cycleId = 0
        self._task: Optional[asyncio.Task] = None
        self.state: StateStore[WeatherViewState] = StateStore(
            WeatherViewState(
                city=selectedCity,
                useMetric=preferences.getBool(USE_METRIC_KEY, USE_METRIC_DEFAULT),
            )
        )

    def _publish(self, **changes) -> None:
        self.state.set(dataclasses.replace(self.state.value, **changes))

    # Load cycle

    def requestWeather(self, city: Optional[str] = None, useCache: bool = True) -> asyncio.Task:
        """
        Start a new load cycle, cancelling the one in flight

        Args:
            city: City to load, the currently selected city if None
            useCache: Allow a cached current weather snapshot

        Returns:
            Task of the started cycle, awaiting it never raises fetch errors
            (they end up in the state)
        """
        self._cancelTask()
        self._cycleId += 1
        cycleId = self._cycleId
        city = city if city is not None else self.state.value.city

        self._publish(status=LoadState.LOADING, city=city, errorMessage=None, cycleId=cycleId)
        logger.debug(f"Weather cycle #{cycleId} started for {city}")

        self._task = asyncio.create_task(self._runCycle(cycleId, city, useCache), name=f"weather-cycle-{cycleId}")
        return self._task

    def cancel(self) -> None:
        """Cancel the in-flight cycle, its results will never be published"""
        self._cancelTask()
        self._cycleId += 1
        if self.state.value.isLoading:
            status = LoadState.LOADED if self.state.value.current is not None else LoadState.IDLE
            self._publish(status=status)

    def _cancelTask(self) -> None:
        if self._task is not None and not self._task.done():
            logger.debug(f"Cancelling {self._task.get_name()}")
            self._task.cancel()
        self._task = None

    async def _runCycle(self, cycleId: int, city: str, useCache: bool) -> None:
        try:
            current, forecast = await self._fetchAll(city, useCache)
        except asyncio.CancelledError:
            logger.debug(f"Weather cycle #{cycleId} cancelled")
            raise
        except Exception as e:
            if cycleId != self._cycleId:
                logger.debug(f"Dropping stale failure of cycle #{cycleId}: {e}")
                return
            if isinstance(e, WeatherError):
                message = e.userMessage
                logger.warning(f"Failed to load weather for {city}: {e}")
            else:
                message = str(e)
                logger.error(f"Unexpected error while loading weather for {city}: {e}")
                logger.exception(e)
            self._publish(status=LoadState.FAILED, errorMessage=message)
            return

        if cycleId != self._cycleId:
            logger.debug(f"Dropping stale result of cycle #{cycleId}")
            return

        self._publish(status=LoadState.LOADED, current=current, forecast=tuple(forecast), errorMessage=None)
        logger.debug(f"Weather cycle #{cycleId} loaded for {city}")

    async def _fetchAll(self, city: str, useCache: bool) -> Tuple[WeatherSnapshot, Forecast]:
        """Run both fetches concurrently, the first failure cancels the other one"""
        currentTask = asyncio.create_task(self.client.fetchCurrent(city, useCache=useCache))
        forecastTask = asyncio.create_task(self.client.fetchForecast(city))
        tasks = (currentTask, forecastTask)

        try:
            done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()

        errors = [task.exception() for task in tasks if task in done and not task.cancelled()]
        for error in errors:
            if error is not None:
                raise error

        return currentTask.result(), forecastTask.result()

    # Derived values

    @property
    def selectedCity(self) -> str:
        return self.state.value.city

    @property
    def useMetric(self) -> bool:
        return self.state.value.useMetric

    @property
    def currentWeather(self) -> Optional[WeatherSnapshot]:
        return self.state.value.current

    @property
    def forecast(self) -> Forecast:
        return list(self.state.value.forecast)

    @property
    def isLoading(self) -> bool:
        return self.state.value.isLoading

    @property
    def errorMessage(self) -> Optional[str]:
        return self.state.value.errorMessage

    @property
    def temperature(self) -> float:
        """Current temperature in the display unit, 0 before the first load"""
        current = self.currentWeather
        return convertTemperature(current.main.temp if current else 0.0, self.useMetric)

    @property
    def feelsLike(self) -> float:
        current = self.currentWeather
        return convertTemperature(current.main.feelsLike if current else 0.0, self.useMetric)

    @property
    def humidity(self) -> int:
        current = self.currentWeather
        return current.main.humidity if current else 0

    @property
    def description(self) -> str:
        current = self.currentWeather
        return current.condition.description if current else ""

    @property
    def weatherIcon(self) -> str:
        current = self.currentWeather
        return current.condition.icon if current else "cloud"

    def formatTemperature(self, celsius: float) -> str:
        """Format Celsius value in the display unit, e.g. "22°C" or "72°F"."""
        return formatTemperature(celsius, self.useMetric)

    def toggleTemperatureUnit(self) -> bool:
        """
        Switch between Celsius and Fahrenheit and persist the choice

        Returns:
            New `useMetric` value
        """
        useMetric = not self.useMetric
        try:
            self.preferences.setBool(USE_METRIC_KEY, useMetric)
        except PreferencesError as e:
            logger.error(f"Failed to persist temperature unit: {e}")
        self._publish(useMetric=useMetric)
        return useMetric
