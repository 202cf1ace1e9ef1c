"""
pluglog Interfaces

Severity level vocabulary, the metadata shape and the abstract contracts
for transports, formatters and loggers.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Mapping, Optional, TypedDict, Union


class LogLevel(str, Enum):
    """Severity levels understood by pluglog.

    Declaration order is not the ordering policy; see
    ``pluglog.infrastructure.logging.levels.LEVEL_ORDER``.
    """
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"


class LogContext(TypedDict, total=False):
    """Well-known default context keys.

    Any other string key is accepted at runtime; the dispatcher only
    requires a mapping.
    """
    requestId: str
    userId: str
    transactionId: str


# Levels arrive from callers as members or as their string values
LevelLike = Union[LogLevel, str]


class ILogTransport(ABC):
    """Interface for log delivery backends.

    A transport receives every record that passes the dispatcher's level
    filter. Metadata handed over by the dispatcher is already merged with
    the default context and free of circular references.

    Integration Notes:
        - Exceptions raised by ``log`` are not caught by the dispatcher
        - Backends with their own level vocabulary normalise unknown levels
          themselves
    """

    @abstractmethod
    def log(self, level: LevelLike, message: str, meta: Any = None) -> None:
        """Deliver a single log record.

        Args:
            level: Severity of the record
            message: Log message
            meta: Structured metadata, usually a mapping
        """
        pass


class ILogFormatter(ABC):
    """Interface for serializers that turn a record into a single string."""

    @abstractmethod
    def format(self, level: LevelLike, message: Optional[str], meta: Any = None) -> str:
        """Serialize a record.

        Args:
            level: Severity of the record
            message: Log message, ``None`` is rendered as ``"undefined"``
            meta: Structured metadata, non-structured values become ``{}``

        Returns:
            Canonical serialized representation of the record
        """
        pass


class IBaseLogger(ABC):
    """Leveled logging entry points used by application code."""

    @abstractmethod
    def log(self, level: LevelLike, message: str, meta: Any = None) -> None:
        pass

    @abstractmethod
    def info(self, message: str, meta: Any = None) -> None:
        pass

    @abstractmethod
    def error(self, message: str, meta: Any = None) -> None:
        pass

    @abstractmethod
    def warn(self, message: str, meta: Any = None) -> None:
        pass

    @abstractmethod
    def debug(self, message: str, meta: Any = None) -> None:
        pass


class ILogger(IBaseLogger):
    """Logger facade with a mutable transport registry, threshold and default context."""

    @abstractmethod
    def add_transport(self, transport: ILogTransport) -> None:
        """Register a delivery backend. Duplicates are kept and deliver independently."""
        pass

    @abstractmethod
    def remove_transport(self, transport: ILogTransport) -> None:
        """Unregister every entry identical to ``transport``. Unknown transports are ignored."""
        pass

    @abstractmethod
    def set_log_level(self, level: LevelLike) -> None:
        """Replace the severity threshold for subsequent log calls."""
        pass

    @abstractmethod
    def set_default_meta(self, meta: Mapping[str, Any]) -> None:
        """Shallow-merge ``meta`` into the default context."""
        pass
