"""
Configuration management for Skycast.
"""

import logging
import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomli

from weatherlib import utils
from weatherlib.open_meteo import PRESET_CITIES, Coordinates

from ..weather.state import DEFAULT_CITY

logger = logging.getLogger(__name__)

ENV_PLACEHOLDER_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}")


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Return value of the referenced environment variable, or the placeholder itself if unset."""
    return os.getenv(match.group(1), match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """
    Recursively substitute ${VAR_NAME} placeholders in configuration values.

    Strings, dicts and lists are processed, other values are returned unchanged.
    """
    if isinstance(value, str):
        return ENV_PLACEHOLDER_RE.sub(replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


class ConfigManager:
    """Loads the TOML configuration and exposes per-section getters."""

    def __init__(
        self, configPath: str = "config.toml", configDirs: Optional[List[str]] = None, dotEnvFile: str = ".env"
    ):
        """
        Initialize ConfigManager

        Args:
            configPath: Main TOML file, may be missing (defaults apply)
            configDirs: Directories scanned recursively for extra .toml files,
                merged over the main file in sorted order
            dotEnvFile: Optional .env file loaded into the environment first
        """
        self.configPath = configPath
        self.configDirs = configDirs or []
        utils.loadDotenv(path=dotEnvFile)
        self.config: Dict[str, Any] = substituteEnvVars(self._loadConfig())

    def _findTomlFilesRecursive(self, directory: str) -> List[Path]:
        """Recursively find all .toml files in a directory."""
        dirPath = Path(directory)

        if not dirPath.is_dir():
            logger.warning(f"Config directory {directory} does not exist or is not a directory, skipping")
            return []

        tomlFiles = [path for path in dirPath.rglob("*.toml") if path.is_file()]
        for path in tomlFiles:
            logger.debug(f"Found config file: {path}")
        return sorted(tomlFiles)

    def _mergeConfigs(self, baseConfig: Dict[str, Any], newConfig: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge two configuration dictionaries, values from newConfig win."""
        merged = baseConfig.copy()

        for key, value in newConfig.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._mergeConfigs(merged[key], value)
            else:
                merged[key] = value

        return merged

    def _loadConfig(self) -> Dict[str, Any]:
        """
        Load main config file and merge config directories over it.

        Exits with status 1 if the main file exists but is not valid TOML.
        Broken files inside config directories are logged and skipped.
        """
        config: Dict[str, Any] = {}
        configFile = Path(self.configPath)

        if configFile.is_file():
            try:
                with open(configFile, "rb") as f:
                    config = tomli.load(f)
            except (OSError, tomli.TOMLDecodeError) as e:
                logger.error(f"Failed to load configuration {self.configPath}: {e}")
                sys.exit(1)
            logger.info(f"Loaded main config from {self.configPath}")
        else:
            logger.warning(f"Configuration file {self.configPath} not found, using defaults")

        for configDir in self.configDirs:
            tomlFiles = self._findTomlFilesRecursive(configDir)
            logger.info(f"Found {len(tomlFiles)} .toml files in {configDir}")

            for tomlFile in tomlFiles:
                try:
                    with open(tomlFile, "rb") as f:
                        dirConfig = tomli.load(f)
                except (OSError, tomli.TOMLDecodeError) as e:
                    logger.error(f"Failed to load config file {tomlFile}: {e}")
                    continue

                config = self._mergeConfigs(config, dirConfig)
                logger.info(f"Merged config from {tomlFile}")

        return config

    def get(self, key: str, default=None) -> Any:
        """Get configuration value by key."""
        return self.config.get(key, default)

    def getLoggingConfig(self) -> Dict[str, Any]:
        """Get logging-specific configuration."""
        return self.get("logging", {})

    def getOpenMeteoConfig(self) -> Dict[str, Any]:
        """
        Get Open-Meteo configuration

        Returns:
            Dict with optional keys: base-url, request-timeout, cache-ttl
        """
        return self.get("open-meteo", {})

    def getGeoNamesConfig(self) -> Dict[str, Any]:
        """
        Get GeoNames configuration

        Returns:
            Dict with optional keys: base-url, username, max-rows, request-timeout
        """
        return self.get("geonames", {})

    def getPreferencesConfig(self) -> Dict[str, Any]:
        return self.get("preferences", {})

    def getUiConfig(self) -> Dict[str, Any]:
        return self.get("ui", {})

    def getDefaultCity(self) -> str:
        return str(self.getUiConfig().get("default-city", DEFAULT_CITY))

    def getCities(self) -> Dict[str, Coordinates]:
        """
        Get the city coordinates table: preset cities extended (or overridden)
        by the [cities] section, where each entry is `"Name" = [lat, lon]`.
        Invalid entries are logged and skipped.
        """
        cities = dict(PRESET_CITIES)
        for name, value in self.get("cities", {}).items():
            try:
                lat, lon = value
                cities[name] = Coordinates(float(lat), float(lon))
            except (TypeError, ValueError) as e:
                logger.error(f"Invalid coordinates for city {name!r}: {value!r} ({e})")
        return cities
