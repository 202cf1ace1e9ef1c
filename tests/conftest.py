"""Shared pytest fixtures and configuration for pluglog tests."""

from typing import Any, List, Tuple

import pytest

from pluglog.config.settings import reset_settings
from pluglog.infrastructure.logging.logger import Logger
from pluglog.models.interfaces import ILogTransport


class CapturingTransport(ILogTransport):
    """Transport recording every delivered record."""

    def __init__(self):
        self.calls: List[Tuple[Any, Any, Any]] = []

    def log(self, level, message, meta=None):
        self.calls.append((level, message, meta))


class FailingTransport(ILogTransport):
    """Transport that raises on every delivery."""

    def log(self, level, message, meta=None):
        raise RuntimeError("transport failure")


@pytest.fixture
def capturing_transport():
    """Fresh capturing transport."""
    return CapturingTransport()


@pytest.fixture
def logger_with_context(capturing_transport):
    """Logger with default context {requestId: '123'} and one capturing transport."""
    logger = Logger({"requestId": "123"})
    logger.add_transport(capturing_transport)
    return logger


@pytest.fixture(autouse=True)
def clean_settings():
    """Ensure every test starts without a cached settings instance."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def transport_class():
    """The capturing transport class, for tests needing several instances."""
    return CapturingTransport


@pytest.fixture
def failing_transport():
    """Transport raising RuntimeError on delivery."""
    return FailingTransport()
