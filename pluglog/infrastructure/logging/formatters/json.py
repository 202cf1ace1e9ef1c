"""
pluglog JSON Formatter

Serializes a record into one JSON object carrying level, message,
sanitized metadata, an ISO-8601 timestamp and the process id.
"""

import json
import os
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from pluglog.infrastructure.logging.config import current_trace_context
from pluglog.infrastructure.logging.sanitizer import sanitize_meta
from pluglog.models.interfaces import ILogFormatter, LevelLike


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _isoformat(moment: datetime) -> str:
    # 2024-01-01T12:00:00.000Z
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonFormatter(ILogFormatter):
    """
    Formatter producing a single-line JSON document per record.

    Metadata that is not a mapping or a sequence is rendered as ``{}``.
    Values JSON cannot represent natively are rendered with ``str()``.
    """

    def __init__(
        self,
        include_trace_context: bool = True,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize the formatter.

        Args:
            include_trace_context: Add OpenTelemetry ``trace_id``/``span_id``
                when a span is recording
            clock: Source of the record timestamp, UTC now by default
        """
        self.include_trace_context = include_trace_context
        self._clock = clock or _utc_now

    def format(self, level: LevelLike, message: Optional[str], meta: Any = None) -> str:
        log_entry = {
            "level": level,
            "message": message if message is not None else "undefined",
            "meta": sanitize_meta(meta),
            "timestamp": _isoformat(self._clock()),
            "pid": os.getpid(),
        }
        if self.include_trace_context:
            log_entry.update(current_trace_context())

        return json.dumps(log_entry, ensure_ascii=False, default=str)
