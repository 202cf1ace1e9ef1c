"""
Test module for pluglog.models.exceptions
"""

from pluglog.models.exceptions import (
    ConfigurationError,
    InvalidLogLevelError,
    PluglogError,
)


class TestExceptions:
    """Test cases for the pluglog error hierarchy."""

    def test_base_error_defaults(self):
        """Test the base error carries a default code and empty context."""
        error = PluglogError("boom")

        assert error.message == "boom"
        assert error.error_code == "PLUGLOG_ERROR"
        assert error.context == {}
        assert str(error) == "[PLUGLOG_ERROR] boom"

    def test_configuration_error(self):
        """Test configuration errors default to CONFIG_ERROR."""
        error = ConfigurationError("missing formatter", context={"formatter_type": "NoneType"})

        assert isinstance(error, PluglogError)
        assert str(error) == "[CONFIG_ERROR] missing formatter"
        assert error.context == {"formatter_type": "NoneType"}

    def test_custom_error_code(self):
        """Test an explicit error code wins."""
        assert ConfigurationError("x", error_code="SETTINGS_INIT_ERROR").error_code == "SETTINGS_INIT_ERROR"

    def test_invalid_log_level_is_value_error(self):
        """Test level errors can be caught as ValueError."""
        error = InvalidLogLevelError("Unknown log level: 'x'")

        assert isinstance(error, ValueError)
        assert isinstance(error, PluglogError)
        assert error.error_code == "INVALID_LOG_LEVEL"
