"""Environmental sensor interface and the Sense HAT implementation."""

from typing import Protocol


class SensorProtocol(Protocol):
    """Protocol for environmental sensor interface."""

    @property
    def temperature(self) -> float: ...

    @property
    def humidity(self) -> float: ...

    @property
    def pressure(self) -> float: ...

    def exit(self) -> None: ...


class SenseHatSensor:
    """Raspberry Pi Sense HAT temperature, humidity and pressure sensors."""

    def __init__(self) -> None:
        from sense_hat import SenseHat

        self._sense = SenseHat()

    @property
    def temperature(self) -> float:
        return float(self._sense.get_temperature())

    @property
    def humidity(self) -> float:
        return float(self._sense.get_humidity())

    @property
    def pressure(self) -> float:
        return float(self._sense.get_pressure())

    def exit(self) -> None:
        """Blank the LED matrix."""
        self._sense.clear()
