"""Persistent storage for the greenhouse setpoints.

Setpoints are stored as a small versioned JSON document::

    {"version": 1, "temperature": 25.0, "humidity": 55.0}

A missing, unreadable or malformed file means no setpoints have been
persisted yet; callers then fall back to the configured defaults.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from greenhouse.lib.config import SETPOINTS_FILE_VERSION
from greenhouse.lib.exceptions import SetpointsError
from greenhouse.lib.models import Setpoints
from greenhouse.logging import get_logger

logger = get_logger("lib.setpoints")


class _SetpointsDocument(BaseModel):
    """On-disk representation of the setpoints."""

    model_config = ConfigDict(frozen=True)

    version: int
    temperature: float
    humidity: float


def encode_setpoints(setpoints: Setpoints) -> str:
    """Serialize setpoints to the current file format."""
    return _SetpointsDocument(
        version=SETPOINTS_FILE_VERSION,
        temperature=setpoints.temperature,
        humidity=setpoints.humidity,
    ).model_dump_json()


def decode_setpoints(raw: str | bytes) -> Setpoints:
    """Parse a setpoint document.

    Raises:
        SetpointsError: If the document is malformed or of an unsupported
            version.
    """
    try:
        doc = _SetpointsDocument.model_validate_json(raw)
    except ValidationError as e:
        raise SetpointsError(f"Malformed setpoint document: {e}") from e
    if doc.version != SETPOINTS_FILE_VERSION:
        raise SetpointsError(
            f"Unsupported setpoint file version {doc.version} "
            f"(expected {SETPOINTS_FILE_VERSION})"
        )
    return Setpoints(temperature=doc.temperature, humidity=doc.humidity)


def load_setpoints(path: str | Path) -> Setpoints | None:
    """Load setpoints from a file, or None if none are stored there."""
    try:
        raw = Path(path).read_bytes()
    except FileNotFoundError:
        logger.debug("No setpoint file at %s", path)
        return None
    except OSError as e:
        logger.warning("Can't open setpoint file %s: %s", path, e)
        return None

    try:
        return decode_setpoints(raw)
    except SetpointsError as e:
        logger.warning("Ignoring setpoint file %s: %s", path, e)
        return None


def save_setpoints(path: str | Path, setpoints: Setpoints) -> bool:
    """Persist setpoints, replacing any previous file.

    Returns:
        True if the file was written, False otherwise.
    """
    try:
        Path(path).write_text(encode_setpoints(setpoints), encoding="utf-8")
    except OSError as e:
        logger.error("Can't write setpoint file %s: %s", path, e)
        return False
    return True


def resolve_setpoints(path: str | Path, default: Setpoints) -> Setpoints:
    """Load persisted setpoints, persisting the default if there are none."""
    setpoints = load_setpoints(path)
    if setpoints is not None:
        logger.info(
            "Loaded setpoints T:%.1f H:%.1f from %s",
            setpoints.temperature,
            setpoints.humidity,
            path,
        )
        return setpoints

    logger.info(
        "Using default setpoints T:%.1f H:%.1f",
        default.temperature,
        default.humidity,
    )
    save_setpoints(path, default)
    return default
