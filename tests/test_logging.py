"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import sys

from habitstreak.config import BaseConfig
from habitstreak.logging_config import JSONFormatter, get_logger, setup_logging


def _record(**kwargs) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=kwargs.pop("level", logging.INFO),
        pathname="test.py",
        lineno=42,
        msg=kwargs.pop("msg", "Test message"),
        args=(),
        exc_info=kwargs.pop("exc_info", None),
    )
    record.module = "test_module"
    record.funcName = "test_function"
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


def test_json_formatter():
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "test.logger"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_extra_fields():
    log_data = json.loads(JSONFormatter().format(_record(habit_id="17", streak=3)))

    assert log_data["extra"] == {"habit_id": "17", "streak": 3}


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(
        JSONFormatter().format(_record(level=logging.ERROR, msg="Error occurred", exc_info=exc_info))
    )

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"] is not None


def test_setup_logging(isolated_env):
    config = BaseConfig()

    logger = setup_logging(config)

    assert logger.name == "habitstreak"
    assert len(logger.handlers) == 2  # Console + File

    log_file = isolated_env / "logs" / "habitstreak.log"
    assert log_file.exists()

    get_logger("services.registry").info("Habit added", extra={"habit_id": "1"})
    for handler in logger.handlers:
        handler.flush()

    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    assert lines[0]["message"] == "Logging initialized"
    assert lines[-1]["logger"] == "habitstreak.services.registry"
    assert lines[-1]["extra"] == {"habit_id": "1"}

    # Repeated setup replaces handlers instead of stacking them
    assert len(setup_logging(config).handlers) == 2


def test_get_logger_namespaces():
    assert get_logger("cli").name == "habitstreak.cli"
    assert get_logger("habitstreak.services.stats").name == "habitstreak.services.stats"

