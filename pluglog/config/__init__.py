"""pluglog configuration."""

from .settings import LoggingSettings, PluglogSettings, get_settings, reset_settings

__all__ = ['LoggingSettings', 'PluglogSettings', 'get_settings', 'reset_settings']
