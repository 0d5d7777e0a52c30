"""
Unit Tests for Centralized Logging.

Tests handler setup, structured fields, and source handling.
"""

import json
import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import MagicMock

import pytest

from gabi_cli.core.logging import VALID_SOURCES, get_logger, log_with_source, setup_logging


def _own_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if not type(h).__module__.startswith("_pytest")]


class TestValidSources:
    """Tests for VALID_SOURCES constant."""

    def test_valid_sources_contains_expected_values(self):
        assert VALID_SOURCES == frozenset({"cli", "cluster", "http", "internal"})

    def test_valid_sources_is_frozenset(self):
        assert isinstance(VALID_SOURCES, frozenset)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_root_level(self):
        setup_logging(level="WARNING")

        assert logging.getLogger().level == logging.WARNING

    def test_console_handler_writes_to_stderr(self):
        import sys

        setup_logging()

        handlers = _own_handlers()
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr

    def test_file_handler_writes_json(self, tmp_path):
        log_file = tmp_path / "logs" / "gabi.jsonl"
        setup_logging(level="INFO", log_file=str(log_file))

        file_handlers = [h for h in _own_handlers() if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1

        get_logger("tests.logging").info("Using Gabi", url="https://gabi.example.com")
        file_handlers[0].flush()

        record = json.loads(log_file.read_text().splitlines()[-1])
        assert record["event"] == "Using Gabi"
        assert record["url"] == "https://gabi.example.com"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        setup_logging()

        assert len(_own_handlers()) == 1

    def test_invalid_level_raises(self):
        with pytest.raises(AttributeError):
            setup_logging(level="CHATTY")

    def test_library_loggers_quiet_by_default(self):
        setup_logging(level="INFO")

        assert logging.getLogger("kubernetes").level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_library_loggers_info_in_debug(self):
        setup_logging(level="DEBUG")

        assert logging.getLogger("urllib3").level == logging.INFO


class TestLogWithSource:
    """Tests for log_with_source."""

    def test_passes_source_and_fields(self):
        logger = MagicMock()

        log_with_source(logger, "http", "debug", "Query response", status_code=200)

        logger.debug.assert_called_once_with("Query response", source="http", status_code=200)

    def test_invalid_level_raises(self):
        with pytest.raises(AttributeError):
            log_with_source(object(), "cli", "info", "message")
