"""Core models for pluglog: level vocabulary, contracts and exceptions."""

from .exceptions import ConfigurationError, InvalidLogLevelError, PluglogError
from .interfaces import (
    IBaseLogger,
    ILogFormatter,
    ILogger,
    ILogTransport,
    LogContext,
    LogLevel,
)

__all__ = [
    'LogLevel',
    'LogContext',
    'ILogTransport',
    'ILogFormatter',
    'IBaseLogger',
    'ILogger',
    'PluglogError',
    'ConfigurationError',
    'InvalidLogLevelError',
]
