"""
User preferences persistence

Example:
    >>> from skycast.preferences import FilePreferencesStore, USE_METRIC_KEY
    >>> store = FilePreferencesStore("~/.config/skycast/preferences.json")
    >>> store.setBool(USE_METRIC_KEY, False)
"""

from .store import (
    USE_METRIC_DEFAULT,
    USE_METRIC_KEY,
    FilePreferencesStore,
    MemoryPreferencesStore,
    PreferencesError,
    PreferencesStore,
)

__all__ = [
    "USE_METRIC_DEFAULT",
    "USE_METRIC_KEY",
    "FilePreferencesStore",
    "MemoryPreferencesStore",
    "PreferencesError",
    "PreferencesStore",
]
