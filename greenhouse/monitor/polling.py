"""Poll the greenhouse sensors, drive the controls and track alarms.

Every cycle reads temperature, humidity and pressure, appends the reading to
the data log, decides the heater and humidifier states from the setpoints,
updates the active alarms from the alarm limits and renders the result.
Cycles run every 2 seconds by default.
"""

import asyncio
from datetime import UTC, datetime
from pathlib import Path
from typing import override

from greenhouse.lib.alarms import AlarmTracker
from greenhouse.lib.config import AlarmLimits, get_settings
from greenhouse.lib.control import evaluate as evaluate_controls
from greenhouse.lib.datalog import append_reading
from greenhouse.lib.models import Reading, Setpoints
from greenhouse.lib.polling import PollingService
from greenhouse.lib.setpoints import resolve_setpoints
from greenhouse.logging import configure, get_logger
from greenhouse.monitor.display import CycleSnapshot, DisplayProtocol
from greenhouse.monitor.sensor import SensorProtocol

logger = get_logger("monitor.polling")


class GreenhouseService(PollingService[Reading]):
    """Sampling loop for the greenhouse sensors."""

    def __init__(
        self,
        sensor: SensorProtocol,
        display: DisplayProtocol,
        *,
        setpoints: Setpoints,
        limits: AlarmLimits,
        tracker: AlarmTracker,
        log_path: str | Path,
        controller_name: str = "Greenhouse",
        frequency_sec: float | None = None,
    ) -> None:
        super().__init__(name="greenhouse", frequency_sec=frequency_sec)
        self._sensor = sensor
        self._display = display
        self._setpoints = setpoints
        self._limits = limits
        self._tracker = tracker
        self._log_path = log_path
        self._controller_name = controller_name
        self._last_snapshot: CycleSnapshot | None = None

    @property
    def tracker(self) -> AlarmTracker:
        return self._tracker

    @property
    def last_snapshot(self) -> CycleSnapshot | None:
        """The snapshot rendered by the most recent cycle."""
        return self._last_snapshot

    @override
    async def initialize(self) -> None:
        """Render the controller header."""
        self._display.render_header(self._controller_name)

    @override
    async def cleanup(self) -> None:
        """Release the sensor and clear the display."""
        self._display.clear()
        self._sensor.exit()

    @override
    async def poll(self) -> Reading:
        """Read all three measures from the sensor."""
        # Run sync sensor reads in thread pool
        temperature = await asyncio.to_thread(lambda: self._sensor.temperature)
        humidity = await asyncio.to_thread(lambda: self._sensor.humidity)
        pressure = await asyncio.to_thread(lambda: self._sensor.pressure)

        reading = Reading(
            temperature=temperature,
            humidity=humidity,
            pressure=pressure,
            recording_time=datetime.now(UTC),
        )
        logger.debug(
            "Read T:%.1f H:%.1f P:%.1f",
            reading.temperature,
            reading.humidity,
            reading.pressure,
        )
        return reading

    @override
    async def persist(self, reading: Reading) -> None:
        """Append the reading to the data log (failures are logged only)."""
        await asyncio.to_thread(append_reading, self._log_path, reading)

    @override
    async def evaluate(self, reading: Reading) -> None:
        """Decide controls, update alarms and render the cycle."""
        controls = evaluate_controls(self._setpoints, reading)
        self._tracker.update(self._limits, reading)
        snapshot = CycleSnapshot(
            reading=reading,
            setpoints=self._setpoints,
            controls=controls,
            alarms=self._tracker.active(),
        )
        self._last_snapshot = snapshot
        self._display.render(snapshot)


def _create_sensor() -> SensorProtocol:
    """Create sensor based on configuration."""
    if get_settings().mock_sensors:
        from greenhouse.lib.mock import MockSensor

        logger.info("Using mock sensor")
        return MockSensor()
    from greenhouse.monitor.sensor import SenseHatSensor

    return SenseHatSensor()


def _create_display() -> DisplayProtocol:
    """Create the console display."""
    from greenhouse.monitor.display import ConsoleDisplay

    return ConsoleDisplay()


def create_service() -> GreenhouseService:
    """Build the service from settings, loading or persisting setpoints."""
    settings = get_settings()
    tracker = AlarmTracker()
    setpoints = resolve_setpoints(
        settings.setpoints_path, settings.default_setpoints
    )
    return GreenhouseService(
        _create_sensor(),
        _create_display(),
        setpoints=setpoints,
        limits=settings.alarm_limits,
        tracker=tracker,
        log_path=settings.data_log_path,
        controller_name=settings.controller_name,
    )


def main() -> None:
    """Main entry point for the greenhouse monitor."""
    configure()
    service = create_service()
    service.run()


if __name__ == "__main__":
    main()
