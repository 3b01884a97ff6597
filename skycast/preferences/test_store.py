"""
Tests for preference stores
"""

import json
import tempfile
from pathlib import Path

import pytest

from .store import (
    USE_METRIC_DEFAULT,
    USE_METRIC_KEY,
    FilePreferencesStore,
    MemoryPreferencesStore,
    PreferencesError,
)

# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def tempDir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def prefsPath(tempDir):
    return tempDir / "preferences.json"


# ============================================================================
# MemoryPreferencesStore
# ============================================================================


def testMemoryStoreDefaults():
    store = MemoryPreferencesStore()
    assert store.getBool(USE_METRIC_KEY, USE_METRIC_DEFAULT) is True
    assert store.getBool(USE_METRIC_KEY, False) is False


def testMemoryStoreSetGet():
    store = MemoryPreferencesStore()
    store.setBool(USE_METRIC_KEY, False)
    assert store.getBool(USE_METRIC_KEY, True) is False


def testMemoryStoreIgnoresNonBool():
    store = MemoryPreferencesStore({USE_METRIC_KEY: "no"})
    assert store.getBool(USE_METRIC_KEY, True) is True


# ============================================================================
# FilePreferencesStore
# ============================================================================


def testFileStoreMissingFileGivesDefault(prefsPath):
    store = FilePreferencesStore(str(prefsPath))
    assert store.getBool(USE_METRIC_KEY, True) is True
    assert not prefsPath.exists()


def testFileStorePersistsAcrossInstances(prefsPath):
    FilePreferencesStore(str(prefsPath)).setBool(USE_METRIC_KEY, False)

    reopened = FilePreferencesStore(str(prefsPath))
    assert reopened.getBool(USE_METRIC_KEY, True) is False
    assert json.loads(prefsPath.read_text(encoding="utf-8")) == {USE_METRIC_KEY: False}


def testFileStoreKeepsOtherKeys(prefsPath):
    prefsPath.write_text(json.dumps({"other": 42}), encoding="utf-8")

    FilePreferencesStore(str(prefsPath)).setBool(USE_METRIC_KEY, True)

    assert json.loads(prefsPath.read_text(encoding="utf-8")) == {"other": 42, USE_METRIC_KEY: True}


def testFileStoreCreatesParentDirectories(tempDir):
    path = tempDir / "nested" / "dir" / "prefs.json"
    FilePreferencesStore(str(path)).setBool(USE_METRIC_KEY, False)
    assert path.is_file()


def testFileStoreLeavesNoTempFile(prefsPath):
    FilePreferencesStore(str(prefsPath)).setBool(USE_METRIC_KEY, False)
    assert [p.name for p in prefsPath.parent.iterdir()] == [prefsPath.name]


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", "", '"text"'])
def testFileStoreCorruptFileGivesDefault(prefsPath, content):
    prefsPath.write_text(content, encoding="utf-8")
    store = FilePreferencesStore(str(prefsPath))

    assert store.getBool(USE_METRIC_KEY, True) is True

    # Next write replaces the corrupt file
    store.setBool(USE_METRIC_KEY, False)
    assert store.getBool(USE_METRIC_KEY, True) is False


def testFileStoreNonBoolValueGivesDefault(prefsPath):
    prefsPath.write_text(json.dumps({USE_METRIC_KEY: 1}), encoding="utf-8")
    assert FilePreferencesStore(str(prefsPath)).getBool(USE_METRIC_KEY, False) is False


def testFileStoreWriteFailure(tempDir):
    blocker = tempDir / "blocker"
    blocker.write_text("file, not a directory", encoding="utf-8")
    store = FilePreferencesStore(str(blocker / "prefs.json"))

    with pytest.raises(PreferencesError) as excInfo:
        store.setBool(USE_METRIC_KEY, False)

    assert isinstance(excInfo.value.originalError, OSError)
