"""pluglog - pluggable logging facade with swappable transports."""

__version__ = "1.0.0"

from .infrastructure.logging import (
    JsonFormatter,
    JsonTransport,
    Logger,
    StdlibTransport,
    StructlogTransport,
    create_logger,
)
from .models import ConfigurationError, ILogFormatter, ILogTransport, LogLevel

__all__ = [
    'Logger',
    'create_logger',
    'LogLevel',
    'ILogTransport',
    'ILogFormatter',
    'JsonFormatter',
    'JsonTransport',
    'StructlogTransport',
    'StdlibTransport',
    'ConfigurationError',
]
