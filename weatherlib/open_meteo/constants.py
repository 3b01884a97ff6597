"""
Open-Meteo client constants
"""

from typing import Dict, NamedTuple

OPEN_METEO_BASE_URL = "https://api.open-meteo.com/v1"

# Current weather is considered fresh for 5 minutes
WEATHER_CACHE_TTL = 300

# Hourly series sampling: every 3rd hour, 8 entries => next 24 hours
FORECAST_STEP_HOURS = 3
FORECAST_MAX_ENTRIES = 8


class Coordinates(NamedTuple):
    lat: float
    lon: float


# Preset cities available without geocoding
PRESET_CITIES: Dict[str, Coordinates] = {
    "San Francisco": Coordinates(37.7749, -122.4194),
    "New York": Coordinates(40.7128, -74.0060),
    "London": Coordinates(51.5074, -0.1278),
    "Tokyo": Coordinates(35.6762, 139.6503),
    "Sydney": Coordinates(-33.8688, 151.2093),
    "Paris": Coordinates(48.8566, 2.3522),
    "Dubai": Coordinates(25.2048, 55.2708),
    "Singapore": Coordinates(1.3521, 103.8198),
    "Hong Kong": Coordinates(22.3193, 114.1694),
    "Mumbai": Coordinates(19.0760, 72.8777),
}
