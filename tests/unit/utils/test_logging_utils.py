"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from tweenkit.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)


@pytest.fixture
def restore_root_logging():
    """Undo configure_logging after a test."""
    yield
    for handler in logging.getLogger().handlers:
        handler.close()
    logging.basicConfig(force=True)


def _record(msg: str = "Test message", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )
    record.funcName = "test_function"
    record.module = "test_module"
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self):
        """Test basic log record formatting to JSON."""
        data = json.loads(StructuredJSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "test.logger"
        assert data["context"]["module"] == "test_module"
        assert data["context"]["function"] == "test_function"
        assert data["context"]["line"] == 42

    def test_extra_fields_in_context(self):
        """Extra attributes end up in the context."""
        data = json.loads(StructuredJSONFormatter().format(_record(ease_type="OutBounce")))

        assert data["context"]["ease_type"] == "OutBounce"

    def test_private_fields_excluded(self):
        """Underscore attributes are not serialized."""
        data = json.loads(StructuredJSONFormatter().format(_record(_secret="x")))

        assert "_secret" not in data["context"]

    def test_exception_info(self):
        """Exceptions are described in the context."""
        try:
            raise ValueError("bad curve")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "bad curve"
        assert "Traceback" in data["context"]["stack_trace"]


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_sets_level(self, restore_root_logging):
        """Root level follows the argument, case-insensitively."""
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_structured_uses_json_formatter(self, restore_root_logging):
        """structured=True installs the JSON formatter."""
        configure_logging(structured=True)
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, StructuredJSONFormatter)

    def test_logs_to_file(self, tmp_path, restore_root_logging):
        """filename sends output to a file."""
        log_file = tmp_path / "out.log"
        configure_logging(level="INFO", format_string="%(message)s", filename=str(log_file))
        logging.getLogger("tweenkit.test").info("hello file")
        logging.getLogger().handlers[0].flush()
        assert log_file.read_text(encoding="utf-8").strip() == "hello file"


class TestGetLogger:
    """Test suite for get_logger."""

    def test_plain_logger(self):
        """Without context a Logger is returned."""
        assert isinstance(get_logger("tweenkit.plain"), logging.Logger)

    def test_adapter_with_context(self):
        """Context kwargs produce a LoggerAdapter."""
        adapter = get_logger("tweenkit.ctx", scene="intro")
        assert isinstance(adapter, logging.LoggerAdapter)
        assert adapter.extra == {"scene": "intro"}
