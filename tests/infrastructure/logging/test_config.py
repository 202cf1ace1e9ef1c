"""
Test module for pluglog.infrastructure.logging.config
"""

import io
import json
from unittest.mock import Mock, patch

import structlog

from pluglog.infrastructure.logging.config import (
    add_trace_context,
    build_structlog_logger,
    current_trace_context,
    default_processors,
)


def recording_span(trace_id: int, span_id: int) -> Mock:
    span = Mock()
    span.is_recording.return_value = True
    span.get_span_context.return_value = Mock(trace_id=trace_id, span_id=span_id)
    return span


class TestTraceContext:
    """Test cases for OpenTelemetry trace context helpers."""

    def test_no_active_span(self):
        """Test nothing is returned outside a recording span."""
        assert current_trace_context() == {}

    def test_non_recording_span(self):
        """Test non-recording spans are ignored."""
        span = Mock()
        span.is_recording.return_value = False
        with patch('pluglog.infrastructure.logging.config.trace.get_current_span', return_value=span):
            assert current_trace_context() == {}

    def test_recording_span_ids_are_hex(self):
        """Test ids are zero-padded hex strings."""
        span = recording_span(trace_id=1, span_id=2)
        with patch('pluglog.infrastructure.logging.config.trace.get_current_span', return_value=span):
            context = current_trace_context()

        assert context == {"trace_id": "0" * 31 + "1", "span_id": "0" * 15 + "2"}

    def test_add_trace_context_keeps_existing_fields(self):
        """Test the processor does not overwrite ids already in the event."""
        span = recording_span(trace_id=255, span_id=255)
        event_dict = {"event": "test", "trace_id": "custom"}

        with patch('pluglog.infrastructure.logging.config.trace.get_current_span', return_value=span):
            result = add_trace_context(Mock(), "info", event_dict)

        assert result["trace_id"] == "custom"
        assert result["span_id"] == "00000000000000ff"

    def test_add_trace_context_without_span(self):
        """Test the event is returned unchanged without a span."""
        event_dict = {"event": "test", "level": "info"}
        assert add_trace_context(Mock(), "info", dict(event_dict)) == event_dict


class TestDefaultProcessors:
    """Test cases for the default structlog processor chain."""

    def test_chain_ends_with_json_renderer(self):
        """Test the final processor renders JSON."""
        processors = default_processors()
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert add_trace_context in processors

    def test_trace_context_can_be_disabled(self):
        """Test the trace processor is optional."""
        assert add_trace_context not in default_processors(include_trace_context=False)


class TestBuildStructlogLogger:
    """Test cases for standalone structlog logger construction."""

    def setup_method(self):
        """Setup for each test method."""
        structlog.reset_defaults()

    def teardown_method(self):
        """Cleanup after each test method."""
        structlog.reset_defaults()

    def test_does_not_configure_structlog_globally(self):
        """Test building a logger leaves global configuration alone."""
        with patch('structlog.configure') as mock_configure:
            build_structlog_logger(20)
            mock_configure.assert_not_called()

    def test_filters_below_min_level(self):
        """Test records under the minimum level are dropped."""
        destination = io.StringIO()
        logger = build_structlog_logger(30, destination=destination)

        logger.info("dropped")
        logger.warning("kept", user="u1")

        lines = destination.getvalue().splitlines()
        assert len(lines) == 1
        parsed = json.loads(lines[0])
        assert parsed["event"] == "kept"
        assert parsed["user"] == "u1"
        assert parsed["level"] == "warning"
