"""Reference transports: console JSON, structlog and the standard library."""

from .json import JsonTransport
from .stdlib import StdlibTransport
from .structured import StructlogTransport

__all__ = ['JsonTransport', 'StructlogTransport', 'StdlibTransport']
