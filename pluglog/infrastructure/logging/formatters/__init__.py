"""Record formatters."""

from .json import JsonFormatter

__all__ = ['JsonFormatter']
