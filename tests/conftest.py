"""Shared pytest fixtures for the test suite."""

import logging
import sys
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

import pytest

# Mock hardware-specific modules before they're imported
# These are only available on Raspberry Pi hardware
sys.modules["sense_hat"] = MagicMock()

from greenhouse.lib.config import AlarmLimits, Settings, set_settings
from greenhouse.lib.models import Reading, Setpoints


@pytest.fixture(autouse=True)
def configure_caplog(caplog):
    """Ensure caplog captures logs from the greenhouse namespace."""
    caplog.set_level(logging.INFO, logger="greenhouse")


@pytest.fixture(autouse=True)
def test_settings(tmp_path):
    """Point file paths at a temporary directory for each test."""
    settings = Settings(
        data_log_path=str(tmp_path / "ghdata.txt"),
        setpoints_path=str(tmp_path / "setpoints.json"),
        polling_frequency_sec=0,
    )
    set_settings(settings)
    yield settings
    set_settings(None)


@pytest.fixture
def frozen_time():
    """Return a fixed datetime for deterministic tests."""
    return datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def limits():
    """Default alarm limits (temperature 10-30, humidity 25-70, pressure 985-1016)."""
    return AlarmLimits()


@pytest.fixture
def setpoints():
    return Setpoints(temperature=25.0, humidity=55.0)


@pytest.fixture
def sample_reading(frozen_time):
    """Create a reading inside every alarm limit."""
    return make_reading(recording_time=frozen_time)


@pytest.fixture
def mock_sensor():
    """Create a mock environmental sensor."""
    sensor = MagicMock()
    sensor.temperature = 22.0
    sensor.humidity = 50.0
    sensor.pressure = 1000.0
    sensor.exit = MagicMock()
    return sensor


@pytest.fixture
def mock_display():
    """Create a mock display."""
    display = MagicMock()
    display.clear = MagicMock()
    display.render = MagicMock()
    display.render_header = MagicMock()
    return display


def make_reading(
    temperature: float = 22.0,
    humidity: float = 50.0,
    pressure: float = 1000.0,
    recording_time: datetime | None = None,
) -> Reading:
    """Create a Reading with safe defaults for testing."""
    return Reading(
        temperature=temperature,
        humidity=humidity,
        pressure=pressure,
        recording_time=recording_time or datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC),
    )


def at(base: datetime, seconds: int) -> datetime:
    """Return base shifted by a number of seconds."""
    return base + timedelta(seconds=seconds)
