"""
Tests for structured logging helpers
"""

from unittest.mock import patch

import pytest
import structlog

from bookcatalog.logging import (
    RequestContextFilter,
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_request_id,
    set_request_context,
)


@pytest.mark.unit
class TestRequestContext:
    def teardown_method(self):
        clear_request_context()

    def test_generate_request_id(self):
        first, second = generate_request_id(), generate_request_id()

        assert len(first) == 14
        assert first != second

    def test_set_and_clear(self):
        assert set_request_context("req-123") == "req-123"
        assert get_request_id() == "req-123"

        clear_request_context()

        assert get_request_id() is None

    def test_set_generates_id(self):
        request_id = set_request_context()

        assert request_id
        assert get_request_id() == request_id

    def test_filter_adds_request_id(self):
        set_request_context("req-456")

        event = RequestContextFilter()(None, "info", {"event": "hello"})

        assert event == {"event": "hello", "request_id": "req-456"}

    def test_filter_without_context(self):
        event = RequestContextFilter()(None, "info", {"event": "hello"})

        assert "request_id" not in event


@pytest.fixture
def restore_structlog():
    """Restore the structlog configuration changed by a test."""
    saved = structlog.get_config()
    yield
    structlog.configure(**saved)


@pytest.mark.unit
class TestConfigureLogging:
    @patch("bookcatalog.logging.logging.basicConfig")
    def test_production_renders_json(self, mock_basic_config, restore_structlog):
        configure_logging(debug=False)

        processors = structlog.get_config()["processors"]
        assert any(isinstance(p, RequestContextFilter) for p in processors)
        assert structlog.processors.format_exc_info in processors
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert not any(
            isinstance(p, structlog.stdlib.PositionalArgumentsFormatter) for p in processors
        )
        mock_basic_config.assert_called_once()

    @patch("bookcatalog.logging.logging.basicConfig")
    def test_debug_renders_console(self, mock_basic_config, restore_structlog):
        configure_logging(debug=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert structlog.processors.format_exc_info not in processors
