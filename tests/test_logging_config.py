"""Tests for logging setup and formatters."""

import json
import logging
import sys

import pytest

from zenreader.logging_config import (
    PACKAGE_LOGGER,
    ConsoleFormatter,
    JSONFormatter,
    setup_logging,
)


def make_record(message="Loaded text with %d tokens", args=(3,), **extra):
    record = logging.LogRecord(
        "zenreader.services.engine", logging.INFO, __file__, 42, message, args, None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_package_logger():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level = package_logger.level
    handlers = list(package_logger.handlers)
    yield package_logger
    package_logger.setLevel(level)
    package_logger.handlers[:] = handlers


class TestJSONFormatter:
    def test_fields(self):
        entry = json.loads(JSONFormatter().format(make_record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "zenreader.services.engine"
        assert entry["message"] == "Loaded text with 3 tokens"
        assert entry["location"].endswith(":42")
        assert entry["timestamp"].endswith("+00:00")
        assert "exception" not in entry

    def test_extra_fields_merged(self):
        entry = json.loads(JSONFormatter().format(make_record(total_words=3)))
        assert entry["total_words"] == 3
        assert "args" not in entry

    def test_exception_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = make_record()
            record.exc_info = sys.exc_info()

        entry = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in entry["exception"]


class TestConsoleFormatter:
    def test_level_and_message(self):
        line = ConsoleFormatter().format(make_record())
        assert "[INFO]" in line
        assert line.endswith("zenreader.services.engine - Loaded text with 3 tokens")


class TestSetupLogging:
    def test_json_handler(self, restore_package_logger):
        setup_logging("debug", json_logs=True)
        assert restore_package_logger.level == logging.DEBUG
        (handler,) = restore_package_logger.handlers
        assert isinstance(handler.formatter, JSONFormatter)

    def test_repeated_setup_replaces_handler(self, restore_package_logger):
        setup_logging("INFO")
        setup_logging("WARNING")
        (handler,) = restore_package_logger.handlers
        assert isinstance(handler.formatter, ConsoleFormatter)
        assert restore_package_logger.level == logging.WARNING

    def test_unknown_level(self, restore_package_logger):
        with pytest.raises(ValueError):
            setup_logging("LOUD")
