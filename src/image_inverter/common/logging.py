"""Logging setup for image_inverter runs.

Every record carries the name of the thread that emitted it (``Producer``,
``Worker-<i>`` or ``MainThread``), since one run interleaves output from all
of them.
"""

import logging
import logging.handlers
import json
import sys
from typing import Any, Dict, Optional, Type
from datetime import datetime, timezone
from pathlib import Path


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            log_data["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": self.formatException(record.exc_info),
            }

        # Fields attached by LogContext
        log_data.update(getattr(record, "extra_fields", {}))

        return json.dumps(log_data, default=str)


class DetailedFormatter(logging.Formatter):
    """Timestamped console format with source location."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s | %(levelname)-8s | %(threadName)s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


class SimpleFormatter(logging.Formatter):
    """Level, thread and message."""

    def __init__(self) -> None:
        super().__init__(fmt="%(levelname)-8s | %(threadName)s | %(message)s")


CONSOLE_FORMATTERS: Dict[str, Type[logging.Formatter]] = {
    "simple": SimpleFormatter,
    "detailed": DetailedFormatter,
    "json": StructuredFormatter,
}


def setup_logging(
    level: str = "INFO",
    format: str = "simple",
    log_file: Optional[Path] = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
) -> None:
    """Replace the root logger's handlers with a stderr handler and, optionally, a JSON log file.

    Args:
        level: Root log level name
        format: Console format, one of CONSOLE_FORMATTERS
        log_file: Rotating log file; its parent directory is created
        max_file_size_mb: Size at which the log file rotates
        backup_count: Rotated files to keep
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.getLevelName(level.upper()))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(CONSOLE_FORMATTERS.get(format, SimpleFormatter)())
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    # Pillow logs every plugin it tries at DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)


class LogContext:
    """Attach fields to every record created while the block is active.

    The record factory is process-wide, so records from threads started
    inside the block carry the fields too.
    """

    def __init__(self, logger: logging.Logger, **fields: Any) -> None:
        self.logger = logger
        self.fields = fields
        self.old_factory = None

    def __enter__(self) -> "LogContext":
        self.old_factory = logging.getLogRecordFactory()
        old_factory = self.old_factory
        fields = self.fields

        def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = old_factory(*args, **kwargs)
            record.extra_fields = {**getattr(record, "extra_fields", {}), **fields}
            return record

        logging.setLogRecordFactory(record_factory)
        self.logger.debug(f"Log context set: {fields}")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        logging.setLogRecordFactory(self.old_factory)
