"""Heater and humidifier control decisions."""

from greenhouse.lib.models import ControlState, Reading, Setpoints


def evaluate(setpoints: Setpoints, reading: Reading) -> ControlState:
    """Compute actuator states from the setpoints and the current reading.

    An actuator is switched ON only while its measure is strictly below the
    setpoint; a reading equal to the setpoint switches it OFF.
    """
    return ControlState(
        heater=reading.temperature < setpoints.temperature,
        humidifier=reading.humidity < setpoints.humidity,
    )
