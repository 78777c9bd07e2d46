"""Structured logging configuration for the application."""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

# Context variable for the command being executed (add, tag, use, ...)
command_var: ContextVar[str] = ContextVar("command", default="")

# Attributes every LogRecord has; anything else came in through extra=
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Fields passed via extra= (path, list, lines, ...)."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line on stderr, for TODO_LOG_FORMAT=json."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        command = command_var.get()
        if command:
            log_data["command"] = command

        extra = _extra_fields(record)
        if extra:
            log_data["extra"] = extra

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class SimpleFormatter(logging.Formatter):
    """
    Short terminal line, e.g.
    `todo: debug [tag] todolists.repositories.base: File rewritten path=... lines=3`.

    Команда одна на процесс, поэтому время не печатаем.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as human-readable text."""
        command = command_var.get()
        command_str = f"[{command}] " if command else ""
        fields = "".join(f" {key}={value}" for key, value in _extra_fields(record).items())

        base = f"todo: {record.levelname.lower()} {command_str}{record.name}: {record.getMessage()}{fields}"

        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)

        return base


def setup_logging(log_level: str = "WARNING", log_format: str = "simple") -> None:
    """
    Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("json" for structured, "simple" for human-readable)
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    # stderr: stdout отдан под вывод команд и под `eval $(todo use --eval ...)`
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    formatter = JSONFormatter() if log_format.lower() == "json" else SimpleFormatter()

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
