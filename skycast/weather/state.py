"""
Observable view state for the weather screen
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

from weatherlib.open_meteo import ForecastEntry, WeatherSnapshot

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CITY = "San Francisco"


class LoadState(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class WeatherViewState:
    """
    Snapshot of everything the weather screen shows.

    `current` and `forecast` survive failed or in-flight cycles: a new cycle
    only clears `errorMessage`, and a failure only sets it.
    """

    status: LoadState = LoadState.IDLE
    city: str = DEFAULT_CITY
    current: Optional[WeatherSnapshot] = None
    forecast: Tuple[ForecastEntry, ...] = ()
    errorMessage: Optional[str] = None
    cycleId: int = 0  # Cycle that produced this state
    useMetric: bool = True

    @property
    def isLoading(self) -> bool:
        return self.status == LoadState.LOADING


class StateStore(Generic[T]):
    """
    Holds a value and notifies subscribers on every change.

    Subscribers are called synchronously in subscription order. An exception
    in one subscriber is logged and does not stop the others.

    Example:
        >>> store = StateStore(0)
        >>> unsubscribe = store.subscribe(print)
        >>> store.set(1)
        1
        >>> unsubscribe()
    """

    def __init__(self, initial: T):
        self._value = initial
        self._subscribers: List[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """
        Register change callback

        Returns:
            Function removing the subscription, safe to call more than once
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set(self, value: T) -> None:
        self._value = value
        for callback in list(self._subscribers):
            try:
                callback(value)
            except Exception as e:
                logger.error(f"State subscriber {callback!r} failed: {e}")
                logger.exception(e)
