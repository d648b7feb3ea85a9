"""Tests for logging setup and formatters."""

import json
import sys
import logging
import logging.handlers
import threading

import pytest

from image_inverter.common import LogContext, setup_logging
from image_inverter.common.logging import (
    DetailedFormatter,
    SimpleFormatter,
    StructuredFormatter,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(msg="hello", exc_info=None):
    return logging.LogRecord("image_inverter.test", logging.INFO, __file__, 10, msg, None, exc_info)


class TestSetupLogging:
    """Tests for setup_logging function."""

    @pytest.mark.parametrize("fmt,formatter", [
        ("simple", SimpleFormatter),
        ("detailed", DetailedFormatter),
        ("json", StructuredFormatter),
    ])
    def test_console_formatter(self, fmt, formatter):
        setup_logging(level="DEBUG", format=fmt)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, formatter)

    def test_file_handler_uses_json(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        setup_logging(level="INFO", format="simple", log_file=log_file)

        logging.getLogger("image_inverter.test").info("to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["message"] == "to file"

    def test_rotation_settings(self, tmp_path):
        setup_logging(log_file=tmp_path / "run.log", max_file_size_mb=2, backup_count=3)

        file_handlers = [
            h for h in logging.getLogger().handlers
            if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 2 * 1024 * 1024
        assert file_handlers[0].backupCount == 3
        file_handlers[0].close()

    def test_pil_logger_quieted(self):
        setup_logging(level="DEBUG")
        assert logging.getLogger("PIL").level == logging.WARNING


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def test_fields(self):
        data = json.loads(StructuredFormatter().format(make_record()))
        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["logger"] == "image_inverter.test"
        assert data["thread"] == threading.current_thread().name

    def test_exception(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = make_record(exc_info=sys.exc_info())

        data = json.loads(StructuredFormatter().format(record))
        assert data["exception"]["type"] == "ValueError"
        assert data["exception"]["message"] == "bad"


class TestLogContext:
    """Tests for LogContext."""

    def test_adds_fields_and_restores_factory(self):
        logger = logging.getLogger("image_inverter.test")
        original = logging.getLogRecordFactory()

        with LogContext(logger, input_dir="/in"):
            record = logging.getLogRecordFactory()("n", logging.INFO, "f", 1, "m", None, None)
            assert record.extra_fields == {"input_dir": "/in"}

        assert logging.getLogRecordFactory() is original

    def test_fields_reach_other_threads(self):
        logger = logging.getLogger("image_inverter.test")
        records = []

        def make():
            records.append(logging.getLogRecordFactory()("n", logging.INFO, "f", 1, "m", None, None))

        with LogContext(logger, run="abc"):
            t = threading.Thread(target=make)
            t.start()
            t.join()

        assert records[0].extra_fields == {"run": "abc"}
