"""Alarm state tracking for greenhouse limit violations.

Provides an AlarmTracker holding at most one active record per alarm kind.
Every cycle the tracker is updated in place from the current reading: a
breached limit inserts a record if none exists yet, a limit back in range
removes its record. A record keeps the time of the reading that first raised
it for as long as the condition persists.

Thread-safe: a single lock guards the active set. It is held for one update
or one snapshot read at a time, so a display or query interface can read the
set while the sampling loop owns it.
"""

import operator
import threading
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Self

from greenhouse.lib.config import AlarmLimits, MeasureName
from greenhouse.lib.models import Reading
from greenhouse.logging import get_logger

logger = get_logger("lib.alarms")


class AlarmKind(Enum):
    """Alarm kinds, with the name used when displaying them."""

    NONE = "No Alarms"
    HIGH_TEMPERATURE = "HighTemperature"
    LOW_TEMPERATURE = "LowTemperature"
    HIGH_HUMIDITY = "HighHumidity"
    LOW_HUMIDITY = "LowHumidity"
    HIGH_PRESSURE = "HighPressure"
    LOW_PRESSURE = "LowPressure"

    @property
    def display_name(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class AlarmRecord:
    """An active alarm condition."""

    kind: AlarmKind
    triggered_at: datetime
    value: float


@dataclass(frozen=True, slots=True)
class _AlarmRule:
    """Maps one alarm kind to the measure and limit it checks."""

    kind: AlarmKind
    measure: MeasureName
    limit: str
    comparator: Callable[[float, float], bool]

    def is_breached(self, limits: AlarmLimits, reading: Reading) -> bool:
        return self.comparator(self.value_of(reading), getattr(limits, self.limit))

    def value_of(self, reading: Reading) -> float:
        return getattr(reading, self.measure)


# Evaluated in this order every cycle: temperature, humidity, pressure,
# high before low.
ALARM_RULES: tuple[_AlarmRule, ...] = (
    _AlarmRule(
        AlarmKind.HIGH_TEMPERATURE,
        MeasureName.TEMPERATURE,
        "high_temperature",
        operator.ge,
    ),
    _AlarmRule(
        AlarmKind.LOW_TEMPERATURE,
        MeasureName.TEMPERATURE,
        "low_temperature",
        operator.le,
    ),
    _AlarmRule(
        AlarmKind.HIGH_HUMIDITY,
        MeasureName.HUMIDITY,
        "high_humidity",
        operator.ge,
    ),
    _AlarmRule(
        AlarmKind.LOW_HUMIDITY,
        MeasureName.HUMIDITY,
        "low_humidity",
        operator.le,
    ),
    _AlarmRule(
        AlarmKind.HIGH_PRESSURE,
        MeasureName.PRESSURE,
        "high_pressure",
        operator.ge,
    ),
    _AlarmRule(
        AlarmKind.LOW_PRESSURE,
        MeasureName.PRESSURE,
        "low_pressure",
        operator.le,
    ),
)


class AlarmTracker:
    """Tracks the set of active alarms, one record per kind.

    Records are kept in the order they were raised. An empty tracker means
    no alarms; AlarmKind.NONE is never stored.
    """

    def __init__(self) -> None:
        """Initialize the tracker with an empty set."""
        self._lock = threading.Lock()
        self._records: dict[AlarmKind, AlarmRecord] = {}

    def _insert(self, kind: AlarmKind, triggered_at: datetime, value: float) -> bool:
        """Insert a record if none exists for kind. Caller holds the lock."""
        if kind is AlarmKind.NONE or kind in self._records:
            return False
        try:
            record = AlarmRecord(kind=kind, triggered_at=triggered_at, value=value)
        except MemoryError:
            # Left unrecorded; the next update retries.
            logger.error("Could not record %s alarm", kind.display_name)
            return False
        self._records[kind] = record
        logger.info(
            "%s alarm raised: %.1f at %s",
            kind.display_name,
            value,
            triggered_at.isoformat(),
        )
        return True

    def _remove(self, kind: AlarmKind) -> bool:
        """Remove the record for kind if present. Caller holds the lock."""
        if self._records.pop(kind, None) is None:
            return False
        logger.info("%s alarm cleared", kind.display_name)
        return True

    def set_alarm(self, kind: AlarmKind, triggered_at: datetime, value: float) -> bool:
        """Record an alarm unless one of the same kind is already active.

        Returns:
            True if a new record was added.
        """
        with self._lock:
            return self._insert(kind, triggered_at, value)

    def clear_alarm(self, kind: AlarmKind) -> bool:
        """Remove the alarm of the given kind, if active.

        Returns:
            True if a record was removed.
        """
        with self._lock:
            return self._remove(kind)

    def update(self, limits: AlarmLimits, reading: Reading) -> Self:
        """Bring the active set in line with a new reading.

        Each rule only ever touches its own kind. Records for conditions
        that are still breached keep their original trigger time and value.

        Returns:
            The tracker itself, for chaining.
        """
        with self._lock:
            for rule in ALARM_RULES:
                if rule.is_breached(limits, reading):
                    self._insert(
                        rule.kind, reading.recording_time, rule.value_of(reading)
                    )
                else:
                    self._remove(rule.kind)
        return self

    def active(self) -> list[AlarmRecord]:
        """Return a snapshot of active records in the order they were raised."""
        with self._lock:
            return list(self._records.values())

    def get(self, kind: AlarmKind) -> AlarmRecord | None:
        """Get the active record for a kind, if any."""
        with self._lock:
            return self._records.get(kind)

    @property
    def is_empty(self) -> bool:
        with self._lock:
            return not self._records

    def reset(self) -> None:
        """Clear all active alarms."""
        with self._lock:
            self._records.clear()

    def __contains__(self, kind: object) -> bool:
        with self._lock:
            return kind in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __iter__(self) -> Iterator[AlarmRecord]:
        return iter(self.active())


def update_alarms(
    tracker: AlarmTracker, limits: AlarmLimits, reading: Reading
) -> AlarmTracker:
    """Update the tracker in place from a reading and return it."""
    return tracker.update(limits, reading)


def format_alarm(record: AlarmRecord) -> str:
    """Format an active alarm as '<AlarmName> alarm <ctime>' in local time."""
    stamp = record.triggered_at.astimezone().ctime()
    return f"{record.kind.display_name} alarm {stamp}"


def format_alarms(records: Iterable[AlarmRecord]) -> list[str]:
    """Format active alarms, one line per record."""
    return [format_alarm(record) for record in records]
