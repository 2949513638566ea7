"""Settings models and configuration loading for the greenhouse monitor."""

from functools import cached_property, lru_cache
from typing import Annotated, Any, Self

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from greenhouse.lib.config.constants import (
    DEFAULT_TARGET_HUMIDITY,
    DEFAULT_TARGET_TEMPERATURE,
)
from greenhouse.lib.models import Setpoints


def _parse_bool(v: Any) -> bool:
    """Parse boolean from string '1'/'0' or actual bool."""
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        return v == "1"
    return bool(v)


_BoolFromStr = Annotated[bool, BeforeValidator(_parse_bool)]


class AlarmLimits(BaseModel):
    """Alarm thresholds, inclusive on both sides.

    A reading at or above a high limit, or at or below a low limit, is in
    alarm.
    """

    model_config = ConfigDict(frozen=True)

    high_temperature: float = 30
    low_temperature: float = 10
    high_humidity: float = 70
    low_humidity: float = 25
    high_pressure: float = 1016
    low_pressure: float = 985

    @model_validator(mode="after")
    def validate_limits(self) -> Self:
        """Each low limit must sit strictly below its high limit."""
        errors: list[str] = []
        for name in ("temperature", "humidity", "pressure"):
            low = getattr(self, f"low_{name}")
            high = getattr(self, f"high_{name}")
            if low >= high:
                errors.append(
                    f"low {name} limit ({low}) must be less than "
                    f"high {name} limit ({high})"
                )
        if errors:
            raise ValueError("; ".join(errors))
        return self


class PollingSettings(BaseModel):
    """Sampling loop settings."""

    model_config = ConfigDict(frozen=True)

    frequency_sec: float = 2.0


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    controller_name: str = "Greenhouse"

    # Files
    data_log_path: str = "ghdata.txt"
    setpoints_path: str = "setpoints.json"

    # Sensors
    mock_sensors: _BoolFromStr = False

    # Default setpoints, persisted on first start
    target_temperature: float = Field(
        default=DEFAULT_TARGET_TEMPERATURE, ge=-40, le=80
    )
    target_humidity: float = Field(default=DEFAULT_TARGET_HUMIDITY, ge=0, le=100)

    # Alarm limits
    max_temperature: float = Field(default=30, ge=-40, le=80)
    min_temperature: float = Field(default=10, ge=-40, le=80)
    max_humidity: float = Field(default=70, ge=0, le=100)
    min_humidity: float = Field(default=25, ge=0, le=100)
    max_pressure: float = Field(default=1016, ge=260, le=1260)
    min_pressure: float = Field(default=985, ge=260, le=1260)

    # Sampling loop
    polling_frequency_sec: float = Field(default=2.0, ge=0)

    @cached_property
    def alarm_limits(self) -> AlarmLimits:
        """Get alarm limits as nested object."""
        return AlarmLimits(
            high_temperature=self.max_temperature,
            low_temperature=self.min_temperature,
            high_humidity=self.max_humidity,
            low_humidity=self.min_humidity,
            high_pressure=self.max_pressure,
            low_pressure=self.min_pressure,
        )

    @cached_property
    def default_setpoints(self) -> Setpoints:
        """Get the setpoints used when none have been persisted yet."""
        return Setpoints(
            temperature=self.target_temperature,
            humidity=self.target_humidity,
        )

    @cached_property
    def polling(self) -> PollingSettings:
        """Get polling settings."""
        return PollingSettings(frequency_sec=self.polling_frequency_sec)

    @model_validator(mode="after")
    def validate_settings(self) -> Self:
        """Validate cross-field configuration constraints."""
        errors: list[str] = []

        for name in ("temperature", "humidity", "pressure"):
            low = getattr(self, f"min_{name}")
            high = getattr(self, f"max_{name}")
            if low >= high:
                errors.append(
                    f"MIN_{name.upper()} ({low}) must be less than "
                    f"MAX_{name.upper()} ({high})"
                )

        if errors:
            raise ValueError(
                "Configuration validation failed:\n  - "
                + "\n  - ".join(errors)
            )

        return self


# Settings override for testing - allows injecting custom Settings without
# modifying environment variables or clearing the lru_cache.
_settings_override: Settings | None = None


@lru_cache(maxsize=1)
def _load_settings() -> Settings:
    """Load settings from environment (cached)."""
    return Settings()


def get_settings() -> Settings:
    """Get the global settings instance.

    Returns the test override if set, otherwise loads from environment
    variables (cached after first load). For testing, use set_settings()
    from greenhouse.lib.config.testing to override.
    """
    if _settings_override is not None:
        return _settings_override
    return _load_settings()
