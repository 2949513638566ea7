"""Console display for the greenhouse monitor.

Renders one block per cycle: the reading, the setpoints, the actuator
states and the active alarms.
"""

import sys
from dataclasses import dataclass, field
from typing import Protocol, TextIO

from greenhouse.lib.alarms import AlarmKind, AlarmRecord, format_alarms
from greenhouse.lib.config import Unit
from greenhouse.lib.models import ControlState, Reading, Setpoints


@dataclass(frozen=True, slots=True)
class CycleSnapshot:
    """Everything the display needs for one cycle."""

    reading: Reading
    setpoints: Setpoints
    controls: ControlState
    alarms: list[AlarmRecord] = field(default_factory=list)


class DisplayProtocol(Protocol):
    """Protocol for display interface."""

    def render_header(self, name: str) -> None: ...

    def render(self, snapshot: CycleSnapshot) -> None: ...

    def clear(self) -> None: ...


class ConsoleDisplay:
    """Text display writing to a stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def render_header(self, name: str) -> None:
        self._write(f"{name}'s Greenhouse Controller\n")

    def render(self, snapshot: CycleSnapshot) -> None:
        reading = snapshot.reading
        setpoints = snapshot.setpoints
        controls = snapshot.controls

        lines = [
            "",
            reading.recording_time.astimezone().ctime(),
            f"Readings\tT:{reading.temperature:5.1f}{Unit.CELSIUS}"
            f"\tH:{reading.humidity:5.1f}{Unit.PERCENT}"
            f"\tP:{reading.pressure:6.1f}{Unit.MILLIBAR}",
            f"Setpoints\tT:{setpoints.temperature:5.1f}{Unit.CELSIUS}"
            f"\tH:{setpoints.humidity:5.1f}{Unit.PERCENT}",
            f"Controls\tHeater: {int(controls.heater)}"
            f"\tHumidifier: {int(controls.humidifier)}",
            "Alarms",
        ]
        lines.extend(format_alarms(snapshot.alarms) or [AlarmKind.NONE.display_name])
        self._write("\n".join(lines) + "\n")

    def clear(self) -> None:
        """Nothing to clear on a console."""
