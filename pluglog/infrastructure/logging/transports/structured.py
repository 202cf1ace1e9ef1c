"""
pluglog structlog Transport

Adapter delivering records through a structlog logger. Metadata mappings
become top-level event fields.
"""

from collections.abc import Mapping
from typing import Any, List, Optional, TextIO

from pluglog.infrastructure.logging.config import build_structlog_logger
from pluglog.infrastructure.logging.levels import coerce_level
from pluglog.models.interfaces import ILogTransport, LevelLike, LogLevel


# structlog method names and the numeric levels its filtering loggers use
STRUCTLOG_METHODS = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "critical",
}

STRUCTLOG_LEVELS = {
    LogLevel.DEBUG: 10,
    LogLevel.INFO: 20,
    LogLevel.WARN: 30,
    LogLevel.ERROR: 40,
    LogLevel.FATAL: 50,
}


class StructlogTransport(ILogTransport):
    """
    Transport backed by structlog.

    Levels outside debug/info/warn/error/fatal, at construction and per
    call, fall back to info.

    Attributes:
        level: Effective minimum level of the underlying logger
    """

    def __init__(
        self,
        level: LevelLike = LogLevel.INFO,
        processors: Optional[List[Any]] = None,
        destination: Optional[TextIO] = None,
        logger: Optional[Any] = None
    ):
        """
        Initialize the structlog transport.

        Args:
            level: Minimum level handled by the structlog logger
            processors: Processor chain replacing the default JSON chain
            destination: File-like object receiving rendered output
            logger: Prebuilt structlog logger; ``processors`` and
                ``destination`` are ignored when given
        """
        self.level = coerce_level(level)
        if logger is None:
            logger = build_structlog_logger(
                STRUCTLOG_LEVELS[self.level],
                processors=processors,
                destination=destination,
            )
        self._logger = logger

    def log(self, level: LevelLike, message: Optional[str], meta: Any = None) -> None:
        method_name = STRUCTLOG_METHODS[coerce_level(level)]
        safe_message = message if message is not None else ""

        bound = self._logger
        if isinstance(meta, Mapping):
            bound = bound.bind(**{str(key): value for key, value in meta.items()})
        elif meta is not None:
            bound = bound.bind(meta=meta)

        getattr(bound, method_name)(safe_message)
