"""Tests for the console display."""

import io

import pytest

from greenhouse.lib.alarms import AlarmKind, AlarmRecord
from greenhouse.lib.models import ControlState, Setpoints
from greenhouse.monitor.display import ConsoleDisplay, CycleSnapshot
from tests.conftest import make_reading


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def display(stream):
    return ConsoleDisplay(stream)


def _snapshot(recording_time, alarms=None):
    return CycleSnapshot(
        reading=make_reading(
            temperature=20.0,
            humidity=60.0,
            pressure=1001.3,
            recording_time=recording_time,
        ),
        setpoints=Setpoints(25.0, 55.0),
        controls=ControlState(heater=True, humidifier=False),
        alarms=alarms or [],
    )


class TestConsoleDisplay:
    def test_header(self, display, stream):
        display.render_header("Ada")
        assert stream.getvalue() == "Ada's Greenhouse Controller\n"

    def test_render_reading_setpoints_and_controls(
        self, display, stream, frozen_time
    ):
        display.render(_snapshot(frozen_time))

        out = stream.getvalue()
        assert frozen_time.astimezone().ctime() in out
        assert "Readings\tT: 20.0C\tH: 60.0%\tP:1001.3mb" in out
        assert "Setpoints\tT: 25.0C\tH: 55.0%" in out
        assert "Controls\tHeater: 1\tHumidifier: 0" in out

    def test_no_alarms_placeholder(self, display, stream, frozen_time):
        display.render(_snapshot(frozen_time))

        assert stream.getvalue().rstrip().endswith("Alarms\nNo Alarms")

    def test_active_alarm_lines(self, display, stream, frozen_time):
        alarms = [
            AlarmRecord(AlarmKind.HIGH_HUMIDITY, frozen_time, 75.0),
            AlarmRecord(AlarmKind.LOW_PRESSURE, frozen_time, 980.0),
        ]

        display.render(_snapshot(frozen_time, alarms))

        out = stream.getvalue()
        stamp = frozen_time.astimezone().ctime()
        assert f"HighHumidity alarm {stamp}\nLowPressure alarm {stamp}\n" in out
        assert "No Alarms" not in out

    def test_clear_writes_nothing(self, display, stream):
        display.clear()
        assert stream.getvalue() == ""
