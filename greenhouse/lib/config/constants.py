"""Shared constants for the configuration module.

These constants are separated to avoid circular imports between settings.py
and the mock sensor.
"""

from greenhouse.lib.config.enums import MeasureName

# Sensor ranges used by the simulated sensor (min, max)
SENSOR_RANGES = {
    MeasureName.TEMPERATURE: (-10.0, 50.0),
    MeasureName.HUMIDITY: (0.0, 100.0),
    MeasureName.PRESSURE: (975.0, 1016.0),
}

# Setpoints applied when no setpoint file exists yet
DEFAULT_TARGET_TEMPERATURE = 25.0  # Celsius
DEFAULT_TARGET_HUMIDITY = 55.0  # %

SETPOINTS_FILE_VERSION = 1
