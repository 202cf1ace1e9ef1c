"""
pluglog Configuration

Settings for building loggers, loaded with pydantic-settings from the
environment and an optional .env file.

Environment variables use the ``PLUGLOG_`` prefix, for example
``PLUGLOG_LEVEL=debug`` or ``PLUGLOG_TRANSPORTS='["json","stdlib"]'``.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from pluglog.models.interfaces import LogLevel


TransportName = Literal["json", "structlog", "stdlib"]


class LoggingSettings(BaseSettings):
    """Logger dispatcher and transport configuration"""
    level: LogLevel = Field(default=LogLevel.INFO)
    transports: List[TransportName] = Field(default_factory=lambda: ["json"])
    default_meta: Dict[str, Any] = Field(default_factory=dict)

    # JSON formatter / structlog transport
    include_trace_context: bool = Field(default=True)

    # Standard library transport
    logger_name: str = Field(default="pluglog")
    stdlib_format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    model_config = {"env_prefix": "PLUGLOG_", "extra": "ignore"}

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class PluglogSettings(BaseSettings):
    """
    Root configuration for pluglog.

    All configuration access should go through this class or the nested
    sections it holds.
    """
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"
    }


_settings_instance: Optional[PluglogSettings] = None


def get_settings() -> PluglogSettings:
    """
    Get global settings instance (singleton pattern).

    Raises:
        ConfigurationError: If settings validation fails
    """
    global _settings_instance
    if _settings_instance is None:
        try:
            from dotenv import load_dotenv

            load_dotenv()
            _settings_instance = PluglogSettings()
        except Exception as e:
            from pluglog.models.exceptions import ConfigurationError
            raise ConfigurationError(
                f"Settings initialization failed: {e}",
                error_code="SETTINGS_INIT_ERROR",
                context={"original_error": str(e), "error_type": type(e).__name__}
            ) from e
    return _settings_instance


def reset_settings() -> None:
    """
    Reset settings instance (primarily for testing).

    Forces recreation of settings on next get_settings() call.
    """
    global _settings_instance
    _settings_instance = None
