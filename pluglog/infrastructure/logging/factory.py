"""
pluglog Logger Factory

Builds independent Logger instances from LoggingSettings.
"""

import logging
from typing import Any, Optional

from pluglog.config.settings import LoggingSettings, get_settings
from pluglog.infrastructure.logging.formatters.json import JsonFormatter
from pluglog.infrastructure.logging.logger import Logger
from pluglog.infrastructure.logging.transports.json import JsonTransport
from pluglog.infrastructure.logging.transports.stdlib import StdlibTransport
from pluglog.infrastructure.logging.transports.structured import StructlogTransport
from pluglog.models.exceptions import ConfigurationError
from pluglog.models.interfaces import ILogTransport


logger = logging.getLogger(__name__)


def build_transport(name: str, settings: LoggingSettings) -> ILogTransport:
    """
    Create a transport by its configured name.

    Raises:
        ConfigurationError: If the name is not a known transport
    """
    if name == "json":
        return JsonTransport(JsonFormatter(include_trace_context=settings.include_trace_context))
    if name == "structlog":
        return StructlogTransport(level=settings.level)
    if name == "stdlib":
        return StdlibTransport(
            level=settings.level,
            formatter=logging.Formatter(settings.stdlib_format),
            name=settings.logger_name,
        )
    raise ConfigurationError(
        f"Unknown transport: {name}",
        context={"transport": name, "valid_transports": ["json", "structlog", "stdlib"]}
    )


def create_logger(settings: Optional[LoggingSettings] = None, **default_meta: Any) -> Logger:
    """
    Create a Logger configured from settings.

    Every call returns a new, independent instance.

    Args:
        settings: Logging settings, ``get_settings().logging`` when None
        **default_meta: Extra default context, overriding configured keys

    Returns:
        Logger with the configured threshold, default context and transports

    Example:
        >>> log = create_logger(requestId="123")
        >>> log.info("Application started")
    """
    if settings is None:
        settings = get_settings().logging

    instance = Logger(
        default_meta={**settings.default_meta, **default_meta},
        level=settings.level,
    )
    for name in settings.transports:
        instance.add_transport(build_transport(name, settings))

    logger.debug(
        "Logger created: level=%s transports=%s",
        getattr(settings.level, "value", settings.level), list(settings.transports)
    )
    return instance
