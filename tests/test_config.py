"""Tests for the configuration module."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from greenhouse.lib.config import (
    AlarmLimits,
    PollingSettings,
    Settings,
    get_settings,
    set_settings,
)
from greenhouse.lib.models import Setpoints


class TestAlarmLimits:
    def test_default_values(self):
        limits = AlarmLimits()

        assert limits.high_temperature == 30
        assert limits.low_temperature == 10
        assert limits.high_humidity == 70
        assert limits.low_humidity == 25
        assert limits.high_pressure == 1016
        assert limits.low_pressure == 985

    def test_inverted_pair_rejected(self):
        with pytest.raises(ValidationError, match="low humidity limit"):
            AlarmLimits(low_humidity=80, high_humidity=70)

    def test_is_frozen(self):
        limits = AlarmLimits()
        with pytest.raises(ValidationError):
            limits.high_temperature = 40


class TestSettings:
    @patch.dict("os.environ", {}, clear=True)
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.mock_sensors is False
        assert settings.data_log_path == "ghdata.txt"
        assert settings.setpoints_path == "setpoints.json"
        assert settings.polling == PollingSettings(frequency_sec=2.0)
        assert settings.default_setpoints == Setpoints(25.0, 55.0)
        assert settings.alarm_limits == AlarmLimits()

    @patch.dict(
        "os.environ",
        {
            "MOCK_SENSORS": "1",
            "MAX_TEMPERATURE": "35",
            "MIN_TEMPERATURE": "5",
            "MAX_PRESSURE": "1020",
            "TARGET_HUMIDITY": "60",
            "POLLING_FREQUENCY_SEC": "5",
        },
        clear=True,
    )
    def test_from_env(self):
        settings = Settings(_env_file=None)

        assert settings.mock_sensors is True
        assert settings.alarm_limits.high_temperature == 35
        assert settings.alarm_limits.low_temperature == 5
        assert settings.alarm_limits.high_pressure == 1020
        assert settings.default_setpoints == Setpoints(25.0, 60.0)
        assert settings.polling.frequency_sec == 5

    @patch.dict("os.environ", {"MOCK_SENSORS": "0"}, clear=True)
    def test_mock_sensors_zero_is_false(self):
        assert Settings(_env_file=None).mock_sensors is False

    def test_inverted_temperature_limits_rejected(self):
        with pytest.raises(ValidationError, match="MIN_TEMPERATURE"):
            Settings(_env_file=None, min_temperature=30, max_temperature=20)

    def test_inverted_pressure_limits_rejected(self):
        with pytest.raises(ValidationError, match="MIN_PRESSURE"):
            Settings(_env_file=None, min_pressure=1020, max_pressure=1000)

    def test_out_of_range_humidity_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_humidity=120)

    def test_negative_polling_frequency_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, polling_frequency_sec=-1)


class TestSettingsOverride:
    def test_set_settings_overrides_global(self):
        custom = Settings(_env_file=None, controller_name="Ada")
        set_settings(custom)

        assert get_settings() is custom
