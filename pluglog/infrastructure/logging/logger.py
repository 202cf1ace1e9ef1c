"""
pluglog Logger Dispatcher

The facade application code logs through. It filters records by severity,
merges call-site metadata into the default context, removes circular
references and fans the record out to every registered transport.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pluglog.infrastructure.logging.levels import rank_or_unranked
from pluglog.infrastructure.logging.merger import merge_meta
from pluglog.infrastructure.logging.sanitizer import sanitize
from pluglog.models.interfaces import ILogger, ILogTransport, LevelLike, LogLevel


logger = logging.getLogger(__name__)


class Logger(ILogger):
    """
    Dispatcher that delivers log records to pluggable transports.

    Delivery is synchronous and follows registration order. An exception
    raised by a transport propagates to the caller and the remaining
    transports are skipped for that record.

    Each instance owns its threshold, default context and transport
    registry. None of them are locked; callers sharing an instance across
    threads must synchronise mutations themselves.

    Attributes:
        level: Current severity threshold
        default_meta: Copy of the default context
        transports: Registered transports in delivery order
    """

    def __init__(
        self,
        default_meta: Optional[Mapping[str, Any]] = None,
        level: LevelLike = LogLevel.INFO,
        transports: Optional[Iterable[ILogTransport]] = None
    ):
        """
        Initialize the dispatcher.

        Args:
            default_meta: Context attached to every record
            level: Initial severity threshold
            transports: Transports to register up front
        """
        self._transports: List[ILogTransport] = list(transports or [])
        self._level: LevelLike = level
        self._default_meta: Dict[str, Any] = dict(default_meta or {})

    @property
    def level(self) -> LevelLike:
        return self._level

    @property
    def default_meta(self) -> Dict[str, Any]:
        return dict(self._default_meta)

    @property
    def transports(self) -> Tuple[ILogTransport, ...]:
        return tuple(self._transports)

    def set_default_meta(self, meta: Mapping[str, Any]) -> None:
        self._default_meta = {**self._default_meta, **meta}

    def add_transport(self, transport: ILogTransport) -> None:
        self._transports.append(transport)
        logger.debug(
            "Transport registered: %s (%d total)",
            type(transport).__name__, len(self._transports)
        )

    def remove_transport(self, transport: ILogTransport) -> None:
        remaining = [t for t in self._transports if t is not transport]
        removed = len(self._transports) - len(remaining)
        self._transports = remaining
        if removed:
            logger.debug(
                "Transport removed: %s (%d entries)",
                type(transport).__name__, removed
            )

    def set_log_level(self, level: LevelLike) -> None:
        self._level = level

    def _should_log(self, level: LevelLike) -> bool:
        return rank_or_unranked(level) >= rank_or_unranked(self._level)

    def log(self, level: LevelLike, message: str, meta: Any = None) -> None:
        """
        Filter, enrich and deliver one record.

        Args:
            level: Severity of the record
            message: Log message
            meta: Call-site metadata; only mappings are merged into the
                default context
        """
        if not self._should_log(level):
            return

        final_meta = sanitize(merge_meta(self._default_meta, meta))
        for transport in list(self._transports):
            transport.log(level, message, final_meta)

    def debug(self, message: str, meta: Any = None) -> None:
        self.log(LogLevel.DEBUG, message, meta)

    def info(self, message: str, meta: Any = None) -> None:
        self.log(LogLevel.INFO, message, meta)

    def warn(self, message: str, meta: Any = None) -> None:
        self.log(LogLevel.WARN, message, meta)

    def error(self, message: str, meta: Any = None) -> None:
        self.log(LogLevel.ERROR, message, meta)

    def fatal(self, message: str, meta: Any = None) -> None:
        self.log(LogLevel.FATAL, message, meta)
