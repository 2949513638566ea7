"""Enumerations for the greenhouse monitor."""

from enum import StrEnum


class Unit(StrEnum):
    """Measurement units for sensor readings."""

    CELSIUS = "C"
    PERCENT = "%"
    MILLIBAR = "mb"


class MeasureName(StrEnum):
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    PRESSURE = "pressure"
