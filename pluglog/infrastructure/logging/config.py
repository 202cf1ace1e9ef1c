"""
pluglog structlog Configuration

Processor chain shared by the structlog-backed transport, including
OpenTelemetry trace context injection.
"""

from typing import Any, Dict, List, Optional

import structlog
from opentelemetry import trace


def current_trace_context() -> Dict[str, str]:
    """
    Trace and span ids of the active OpenTelemetry span.

    Returns:
        Hex-encoded ``trace_id``/``span_id``, or an empty dict when no span
        is recording
    """
    span = trace.get_current_span()
    if span and span.is_recording():
        span_context = span.get_span_context()
        return {
            "trace_id": format(span_context.trace_id, '032x'),
            "span_id": format(span_context.span_id, '016x'),
        }
    return {}


def add_trace_context(logger, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Add OpenTelemetry trace context to log entries.

    Fields already present in the event are left untouched.

    Args:
        logger: Logger instance
        method_name: Log method name
        event_dict: Event dictionary to process

    Returns:
        Event dictionary with trace context
    """
    for key, value in current_trace_context().items():
        event_dict.setdefault(key, value)
    return event_dict


def default_processors(include_trace_context: bool = True) -> List[Any]:
    """
    Processor chain used when a transport is not given its own.

    Args:
        include_trace_context: Whether to inject OpenTelemetry ids

    Returns:
        List of structlog processors ending with JSON rendering
    """
    processors: List[Any] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if include_trace_context:
        processors.append(add_trace_context)
    processors.append(structlog.processors.JSONRenderer(default=str))
    return processors


def build_structlog_logger(
    min_level: int,
    processors: Optional[List[Any]] = None,
    destination: Optional[Any] = None
):
    """
    Create a standalone structlog logger without touching global configuration.

    Args:
        min_level: Numeric stdlib level below which calls are dropped
        processors: Processor chain, defaults to ``default_processors()``
        destination: File-like object for output, defaults to stdout

    Returns:
        structlog bound logger filtering at ``min_level``
    """
    return structlog.wrap_logger(
        structlog.PrintLogger(file=destination),
        processors=processors if processors is not None else default_processors(),
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
    )
