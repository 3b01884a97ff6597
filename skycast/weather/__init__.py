from .state import DEFAULT_CITY, LoadState, StateStore, WeatherViewState
from .view_model import WeatherClient, WeatherViewModel

__all__ = [
    "DEFAULT_CITY",
    "LoadState",
    "StateStore",
    "WeatherClient",
    "WeatherViewModel",
    "WeatherViewState",
]
