"""
Test module for pluglog.config.settings
"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from pluglog.config.settings import (
    LoggingSettings,
    PluglogSettings,
    get_settings,
    reset_settings,
)
from pluglog.models.exceptions import ConfigurationError
from pluglog.models.interfaces import LogLevel


class TestLoggingSettings:
    """Test cases for LoggingSettings."""

    def test_defaults(self, monkeypatch):
        """Test default values without environment overrides."""
        for name in ("PLUGLOG_LEVEL", "PLUGLOG_TRANSPORTS", "PLUGLOG_DEFAULT_META"):
            monkeypatch.delenv(name, raising=False)

        settings = LoggingSettings()

        assert settings.level == LogLevel.INFO
        assert settings.transports == ["json"]
        assert settings.default_meta == {}
        assert settings.include_trace_context is True
        assert settings.logger_name == "pluglog"

    def test_environment_overrides(self, monkeypatch):
        """Test PLUGLOG_ variables are read, complex values as JSON."""
        monkeypatch.setenv("PLUGLOG_LEVEL", "DEBUG")
        monkeypatch.setenv("PLUGLOG_TRANSPORTS", '["json", "stdlib"]')
        monkeypatch.setenv("PLUGLOG_DEFAULT_META", '{"service": "billing"}')
        monkeypatch.setenv("PLUGLOG_INCLUDE_TRACE_CONTEXT", "false")

        settings = LoggingSettings()

        assert settings.level == LogLevel.DEBUG
        assert settings.transports == ["json", "stdlib"]
        assert settings.default_meta == {"service": "billing"}
        assert settings.include_trace_context is False

    def test_level_is_case_insensitive(self):
        """Test level names are normalised before validation."""
        assert LoggingSettings(level=" Warn ").level == LogLevel.WARN

    def test_invalid_level_rejected(self):
        """Test unknown levels fail validation at configuration time."""
        with pytest.raises(ValidationError):
            LoggingSettings(level="verbose")

    def test_invalid_transport_rejected(self):
        """Test unknown transport names fail validation."""
        with pytest.raises(ValidationError):
            LoggingSettings(transports=["kafka"])


class TestGetSettings:
    """Test cases for the settings singleton."""

    def test_singleton(self):
        """Test repeated calls return the same instance."""
        first = get_settings()
        assert get_settings() is first
        assert isinstance(first, PluglogSettings)
        assert isinstance(first.logging, LoggingSettings)

    def test_reset_settings(self):
        """Test reset forces a new instance."""
        first = get_settings()
        reset_settings()
        assert get_settings() is not first

    def test_initialization_failure_is_configuration_error(self):
        """Test validation failures are wrapped with an error code."""
        with patch('pluglog.config.settings.PluglogSettings', side_effect=ValueError("bad value")):
            with pytest.raises(ConfigurationError) as exc_info:
                get_settings()

        assert exc_info.value.error_code == "SETTINGS_INIT_ERROR"
        assert exc_info.value.context["error_type"] == "ValueError"
