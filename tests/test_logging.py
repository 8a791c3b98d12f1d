"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from duobudget.config import BaseConfig
from duobudget.logging_config import JSONFormatter, RequestContextFilter, get_logger, setup_logging


@pytest.fixture
def config(tmp_path, monkeypatch):
    monkeypatch.setenv("DUOBUDGET_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("DUOBUDGET_DEV_MODE", "true")
    yield BaseConfig()
    root = logging.getLogger("duobudget")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


def _record(**kwargs) -> logging.LogRecord:
    fields = dict(
        name="duobudget.test",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg="Test message",
        args=(),
        exc_info=None,
    )
    fields.update(kwargs)
    record = logging.LogRecord(**fields)
    record.module = "test_module"
    record.funcName = "test_function"
    return record


def test_json_formatter():
    """JSONFormatter emits one JSON object with the record's fields."""

    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "duobudget.test"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(JSONFormatter().format(_record(level=logging.ERROR, exc_info=exc_info)))

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"] is not None


def test_json_formatter_includes_extra_fields():
    record = _record()
    record.household_id = "hh-1"
    record.amount = "60.00"

    log_data = json.loads(JSONFormatter().format(record))
    assert log_data["extra"] == {"household_id": "hh-1", "amount": "60.00"}


def test_setup_logging(config, tmp_path):
    """Logging setup creates the rotating JSON log file."""

    logger = setup_logging(config)

    assert logger.name == "duobudget"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2  # Console + File

    log_file = tmp_path / "logs" / "duobudget.log"
    assert log_file.exists()

    logger.warning("Settlement already recorded", extra={"household_id": "hh-1"})
    for handler in logger.handlers:
        handler.flush()

    lines = [line for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    assert len(lines) >= 2
    entries = [json.loads(line) for line in lines]
    assert entries[0]["message"] == "Logging initialized"
    assert entries[-1]["extra"] == {"household_id": "hh-1"}


def test_request_context_is_stamped_on_records():
    from flask import Flask

    record = _record()
    request_filter = RequestContextFilter()

    assert request_filter.filter(record) is True
    assert not hasattr(record, "user_id")

    with Flask(__name__).test_request_context("/dashboard/settlement", headers={"X-User-Id": "user-sam"}):
        request_filter.filter(record)

    log_data = json.loads(JSONFormatter().format(record))
    assert log_data["extra"] == {"user_id": "user-sam", "request_path": "/dashboard/settlement"}


def test_setup_logging_is_idempotent(config):
    setup_logging(config)
    logger = setup_logging(config)
    assert len(logger.handlers) == 2


def test_get_logger():
    """get_logger nests module loggers under the package logger."""

    assert get_logger("module1").name == "duobudget.module1"
    assert get_logger("duobudget.services.settlement").name == "duobudget.services.settlement"
    assert get_logger("module1") is not get_logger("module2")


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(config, dev_mode):
    """Console logging level adjusts based on dev mode."""

    config.DEV_MODE = dev_mode
    logger = setup_logging(config)

    console_handler = next(
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.handlers.RotatingFileHandler)
    )
    expected_level = logging.INFO if dev_mode else logging.WARNING
    assert console_handler.level == expected_level
    assert logger.level == (logging.DEBUG if dev_mode else logging.INFO)
