"""
Preference stores

A preference store keeps a handful of small typed values between runs. Only
booleans are needed: the temperature unit toggle.
"""

import json
import logging
import os
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

USE_METRIC_KEY = "useMetric"
USE_METRIC_DEFAULT = True


class PreferencesError(Exception):
    """
    Raised when preferences cannot be persisted.

    Args:
        message: Human-readable error message
        originalError: Optional original exception that caused this error
    """

    def __init__(self, message: str, originalError: Optional[Exception] = None):
        super().__init__(message)
        self.originalError = originalError


class PreferencesStore(ABC):
    """Abstract key-value store for user preferences."""

    @abstractmethod
    def getBool(self, key: str, default: bool) -> bool:
        """
        Get boolean preference

        Args:
            key: Preference name
            default: Value returned if the preference was never set or is not a boolean
        """
        pass

    @abstractmethod
    def setBool(self, key: str, value: bool) -> None:
        """
        Set boolean preference

        Raises:
            PreferencesError: If the value could not be persisted
        """
        pass


class MemoryPreferencesStore(PreferencesStore):
    """Process-local store, nothing survives a restart."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(initial or {})

    def getBool(self, key: str, default: bool) -> bool:
        value = self._values.get(key)
        return value if isinstance(value, bool) else default

    def setBool(self, key: str, value: bool) -> None:
        self._values[key] = bool(value)


class FilePreferencesStore(PreferencesStore):
    """
    Preferences kept in a JSON object file.

    A missing, unreadable or corrupt file reads as empty, so every getter
    returns its default. Writes go to a temporary file first, then the file is
    atomically renamed over the target.

    Example:
        >>> store = FilePreferencesStore("prefs.json")
        >>> store.getBool("useMetric", True)
        True
    """

    def __init__(self, path: str):
        self.path = Path(path).expanduser()
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, Any]:
        try:
            with open(self.path, "rt", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring preferences file {self.path}: JSON object expected")
            return {}
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        tempPath = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tempPath, "wt", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tempPath, self.path)
        except OSError as e:
            if tempPath.exists():
                try:
                    tempPath.unlink()
                except OSError as cleanupError:
                    logger.debug(f"Failed to remove {tempPath}: {cleanupError}")
            raise PreferencesError(f"Failed to save preferences to {self.path}: {e}", originalError=e) from e

    def getBool(self, key: str, default: bool) -> bool:
        with self._lock:
            value = self._read().get(key)
        return value if isinstance(value, bool) else default

    def setBool(self, key: str, value: bool) -> None:
        with self._lock:
            data = self._read()
            data[key] = bool(value)
            self._write(data)
        logger.debug(f"Saved preference {key}={value}")
