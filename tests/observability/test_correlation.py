"""Tests for correlation ID propagation and log record injection."""

import logging
import uuid

from chatlog.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from chatlog.observability.logger import CorrelationIdFilter


class TestCorrelationContext:
    """Tests for the correlation ID context variable."""

    def teardown_method(self) -> None:
        clear_correlation_id()

    def test_default_is_empty(self) -> None:
        """No correlation ID outside a request."""
        assert get_correlation_id() == ""

    def test_set_explicit_id(self) -> None:
        """An explicit ID is stored and returned unchanged."""
        assert set_correlation_id("req-1") == "req-1"
        assert get_correlation_id() == "req-1"

    def test_set_generates_uuid(self) -> None:
        """A missing ID is replaced by a fresh UUID4."""
        value = set_correlation_id()
        assert uuid.UUID(value).version == 4
        assert get_correlation_id() == value

    def test_clear(self) -> None:
        set_correlation_id("req-1")
        clear_correlation_id()
        assert get_correlation_id() == ""


class TestCorrelationIdFilter:
    """Tests for CorrelationIdFilter."""

    @staticmethod
    def _record() -> logging.LogRecord:
        return logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

    def teardown_method(self) -> None:
        clear_correlation_id()

    def test_placeholder_without_request(self) -> None:
        record = self._record()
        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "-"

    def test_injects_current_id(self) -> None:
        set_correlation_id("req-42")
        record = self._record()
        CorrelationIdFilter().filter(record)
        assert record.correlation_id == "req-42"
