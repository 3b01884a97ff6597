"""
Pytest configuration and common fixtures for Skycast tests.

All fixtures follow camelCase naming convention.
"""

import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

from tests.golden_data.open_meteo.provider import GoldenDataProvider

# ============================================================================
# Filesystem Fixtures
# ============================================================================


@pytest.fixture
def tempDir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def writeConfig(tempDir: Path) -> Callable[[str], Path]:
    """
    Write config.toml into tempDir.

    Preferences are pointed into tempDir unless the content sets them.

    Returns:
        Function taking TOML content and returning the config file path
    """

    def _write(content: str = "") -> Path:
        if "[preferences]" not in content:
            content += f'\n[preferences]\nfile = "{(tempDir / "preferences.json").as_posix()}"\n'
        configPath = tempDir / "config.toml"
        configPath.write_text(content, encoding="utf-8")
        return configPath

    return _write


# ============================================================================
# Network Fixtures
# ============================================================================


@pytest.fixture
def goldenData() -> GoldenDataProvider:
    """Provider of recorded API responses, see tests/golden_data."""
    return GoldenDataProvider()
