"""
pluglog Logging Infrastructure

Pluggable logging facade: application code logs through a Logger, which
filters by severity, merges default context, removes circular references
from metadata and fans records out to swappable transports.

Components:
- levels: severity ordering policy
- sanitizer: circular-reference-safe metadata copying
- merger: default context and call-site metadata merging
- logger: the Logger dispatcher
- formatters / transports: JSON console output, structlog and stdlib adapters
- factory: Logger construction from settings
"""

from .factory import build_transport, create_logger
from .formatters import JsonFormatter
from .levels import LEVEL_ORDER, coerce_level, is_enabled, rank
from .logger import Logger
from .merger import merge_meta
from .sanitizer import CIRCULAR_MARKER, DEPTH_MARKER, sanitize, sanitize_meta
from .transports import JsonTransport, StdlibTransport, StructlogTransport

__all__ = [
    'Logger',
    'create_logger',
    'build_transport',

    'LEVEL_ORDER',
    'rank',
    'is_enabled',
    'coerce_level',
    'merge_meta',
    'sanitize',
    'sanitize_meta',
    'CIRCULAR_MARKER',
    'DEPTH_MARKER',

    'JsonFormatter',
    'JsonTransport',
    'StructlogTransport',
    'StdlibTransport',
]
