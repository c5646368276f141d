"""
Test suite for logging helpers and correlation IDs.

System role: Verification of observability utilities
"""

import logging

from dataroom.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from dataroom.observability.log_utils import safe_log_value
from dataroom.observability.logger import CorrelationIdFilter, configure_logging


class TestCorrelation:
    def test_set_generates_id_when_missing(self):
        value = set_correlation_id()

        assert value
        assert get_correlation_id() == value
        clear_correlation_id()
        assert get_correlation_id() == ""

    def test_set_keeps_given_id(self):
        assert set_correlation_id("req-1") == "req-1"
        clear_correlation_id()


class TestSafeLogValue:
    def test_collections_are_summarized(self):
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"
        assert safe_log_value(None) == "None"

    def test_long_strings_are_truncated(self):
        result = safe_log_value("x" * 20, max_length=5)

        assert result.startswith("xxxxx... (truncated, 20 total)")


class TestLogging:
    def test_filter_attaches_correlation_id(self):
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
        set_correlation_id("req-9")
        try:
            CorrelationIdFilter().filter(record)
        finally:
            clear_correlation_id()

        assert record.correlation_id == "req-9"

    def test_configure_logging_installs_single_handler(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("debug")
            configure_logging("warning")

            assert len(root.handlers) == 1
            assert root.level == logging.WARNING
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
