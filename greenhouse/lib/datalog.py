"""Append-only CSV log of greenhouse readings.

Each reading is written as one line: the local ctime fields joined by commas,
followed by temperature, humidity and pressure, e.g.
``Sat,Jun,15,12:00:00,2024, 22.5, 55.0,1001.3``.
"""

from pathlib import Path

from greenhouse.lib.models import Reading
from greenhouse.logging import get_logger

logger = get_logger("lib.datalog")


def format_log_line(reading: Reading) -> str:
    """Format a reading as a data log line (without line terminator)."""
    weekday, month, day, clock, year = (
        reading.recording_time.astimezone().ctime().split()
    )
    return (
        f"{weekday},{month},{int(day):2d},{clock},{year},"
        f"{reading.temperature:5.1f},{reading.humidity:5.1f},"
        f"{reading.pressure:6.1f}"
    )


def append_reading(path: str | Path, reading: Reading) -> bool:
    """Append a reading to the data log.

    Returns:
        True if the line was written, False if the file could not be opened
        or written. Failures are logged and never raised.
    """
    try:
        with Path(path).open("a", encoding="utf-8") as f:
            f.write(format_log_line(reading) + "\n")
    except OSError as e:
        logger.error("Can't open data log %s, reading not logged: %s", path, e)
        return False
    return True
