"""
Tests for logging configuration.
"""

import json
import logging

import pytest

from football_cli.utils.logging_config import (
    APIRequestLogger,
    ConsoleFormatter,
    JSONFormatter,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(msg="hello", **extra):
    record = logging.LogRecord("football_cli.test", logging.INFO, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra():
    payload = json.loads(JSONFormatter().format(make_record(endpoint="fixtures")))

    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["extra"] == {"endpoint": "fixtures"}


def test_console_formatter_colors_by_level():
    formatted = ConsoleFormatter().format(make_record())

    assert formatted.startswith(ConsoleFormatter.COLORS["INFO"])
    assert "hello" in formatted


def test_setup_logging_without_file(restore_root_logger):
    root = setup_logging(level="debug")

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1


def test_setup_logging_writes_json_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "logs" / "football.log"
    setup_logging(level="INFO", json_logs=True, log_file=log_file)

    APIRequestLogger("football_data").log_request(
        endpoint="fixtures", response_status=200, response_time_ms=12.5
    )
    for handler in logging.getLogger().handlers:
        handler.flush()

    entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert entry["message"] == "API request: GET fixtures"
    assert entry["extra"]["response_status"] == 200
