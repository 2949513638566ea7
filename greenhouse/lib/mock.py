"""Mock sensor data generators for development.

Provides a mock implementation of the sensor interface that generates
plausible greenhouse data without requiring hardware. Used by the monitor
when MOCK_SENSORS=1 is set.
"""

import random

from greenhouse.lib.config import SENSOR_RANGES, MeasureName


def _random_walk(
    current: float, drift: float, min_val: float, max_val: float
) -> float:
    """Generate next value using random walk with bounds."""
    change = random.gauss(0, drift)
    new_val = current + change
    return max(min_val, min(max_val, new_val))


class MockSensor:
    """Mock environmental sensor that generates wandering readings.

    Each measure performs a bounded random walk inside the sensor ranges:
    - Temperature: drift=0.5, bounds -10 to 50
    - Humidity: drift=1.0, bounds 0 to 100
    - Pressure: drift=0.8, bounds 975 to 1016
    """

    _DRIFT = {
        MeasureName.TEMPERATURE: 0.5,
        MeasureName.HUMIDITY: 1.0,
        MeasureName.PRESSURE: 0.8,
    }

    def __init__(self) -> None:
        self._values = {
            MeasureName.TEMPERATURE: random.uniform(18.0, 26.0),
            MeasureName.HUMIDITY: random.uniform(45.0, 60.0),
            MeasureName.PRESSURE: random.uniform(995.0, 1010.0),
        }

    def _next(self, name: MeasureName) -> float:
        min_val, max_val = SENSOR_RANGES[name]
        self._values[name] = _random_walk(
            self._values[name], self._DRIFT[name], min_val, max_val
        )
        return round(self._values[name], 1)

    @property
    def temperature(self) -> float:
        return self._next(MeasureName.TEMPERATURE)

    @property
    def humidity(self) -> float:
        return self._next(MeasureName.HUMIDITY)

    @property
    def pressure(self) -> float:
        return self._next(MeasureName.PRESSURE)

    def exit(self) -> None:
        """No-op for mock sensor."""
