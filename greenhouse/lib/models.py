"""Domain models for greenhouse readings, setpoints and controls."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Reading:
    temperature: float
    humidity: float
    pressure: float
    recording_time: datetime


@dataclass(frozen=True, slots=True)
class Setpoints:
    """Target values the controls try to maintain."""

    temperature: float
    humidity: float


@dataclass(frozen=True, slots=True)
class ControlState:
    """Actuator states for a single cycle (True means ON)."""

    heater: bool
    humidifier: bool
