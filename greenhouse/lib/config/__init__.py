"""Centralized configuration for the greenhouse monitor.

This package provides:
- Enums for measures and units
- Pydantic settings models for configuration
"""

from .constants import SENSOR_RANGES, SETPOINTS_FILE_VERSION
from .enums import MeasureName, Unit
from .settings import AlarmLimits, PollingSettings, Settings, get_settings
from .testing import set_settings

__all__ = [
    # Enums
    "MeasureName",
    "Unit",
    # Settings models
    "AlarmLimits",
    "PollingSettings",
    "Settings",
    # Constants
    "SENSOR_RANGES",
    "SETPOINTS_FILE_VERSION",
    # Functions
    "get_settings",
    "set_settings",
]
