"""
Exception classes for pluglog.

Errors carry an error code and optional context so callers can tell
configuration problems apart from invalid input.
"""

from typing import Any, Dict


class PluglogError(Exception):
    """Base exception for pluglog"""
    
    def __init__(self, message: str, error_code: str = None, context: Dict[str, Any] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "PLUGLOG_ERROR"
        self.context = context or {}

    def __str__(self):
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ConfigurationError(PluglogError):
    """Configuration-related errors, raised while building loggers and transports"""
    
    def __init__(self, message: str, error_code: str = None, context: Dict[str, Any] = None):
        super().__init__(message, error_code or "CONFIG_ERROR", context)


class InvalidLogLevelError(PluglogError, ValueError):
    """A value outside the known severity levels reached the strict level policy"""
    
    def __init__(self, message: str, error_code: str = None, context: Dict[str, Any] = None):
        super().__init__(message, error_code or "INVALID_LOG_LEVEL", context)
