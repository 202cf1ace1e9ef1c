"""
pluglog Standard Library Transport

Adapter delivering records through a ``logging.Logger`` with its own
handlers and formatter.
"""

import logging
from typing import Any, List, Optional

from pluglog.infrastructure.logging.levels import coerce_level
from pluglog.models.exceptions import ConfigurationError
from pluglog.models.interfaces import ILogTransport, LevelLike, LogLevel


STDLIB_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StdlibTransport(ILogTransport):
    """
    Transport backed by the ``logging`` package.

    Every instance owns a private ``logging.Logger`` that is not registered
    with the logging manager, so two transports built with the same name
    keep their own level and handlers. Propagation is disabled so records
    are not emitted twice. Metadata is attached to each record as
    ``record.meta``.

    Attributes:
        level: Effective level of the underlying logger
        logger: The configured ``logging.Logger``
    """

    def __init__(
        self,
        level: LevelLike = LogLevel.INFO,
        formatter: Optional[logging.Formatter] = None,
        handlers: Optional[List[logging.Handler]] = None,
        name: str = "pluglog"
    ):
        """
        Initialize the stdlib transport.

        Args:
            level: Minimum level handled by the logger
            formatter: Formatter applied to every handler
            handlers: Output handlers, a single StreamHandler when empty
            name: Name given to the ``logging.Logger``

        Raises:
            ConfigurationError: If ``formatter`` is not a ``logging.Formatter``
        """
        if formatter is None:
            formatter = logging.Formatter(DEFAULT_FORMAT)
        if not isinstance(formatter, logging.Formatter):
            raise ConfigurationError(
                "Invalid format provided.",
                context={"formatter_type": type(formatter).__name__}
            )

        self.level = coerce_level(level)
        handlers = list(handlers) if handlers else [logging.StreamHandler()]

        self.logger = logging.Logger(name, STDLIB_LEVELS[self.level])
        self.logger.propagate = False
        for handler in handlers:
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log(self, level: LevelLike, message: str, meta: Any = None) -> None:
        log_level = STDLIB_LEVELS[coerce_level(level)]
        self.logger.log(log_level, message, extra={"meta": meta})

    def close(self) -> None:
        """Detach and close every handler of this transport."""
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()
