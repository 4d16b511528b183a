"""
Logger setup for Bashmaqawa.

Wraps Python's standard logging with a structured formatter. Extra fields
passed to a log call and fields bound with ``log_context`` are rendered as
``key=value`` pairs, or merged into the record when JSON output is enabled.
"""

from __future__ import annotations

import contextlib
import datetime
import enum
import json
import logging
import sys
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from bashmaqawa.logging.config import LoggingSettings, LogLevel

if TYPE_CHECKING:
    from collections.abc import Iterator

ROOT_LOGGER_NAME = "bashmaqawa"

_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

_STANDARD_RECORD_FIELDS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(name)s: %(message)s"
        if include_level and not json_format:
            fmt = "[%(levelname)s] " + fmt
        if include_timestamp:
            fmt = "%(asctime)s " + fmt

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        extra: dict[str, Any] = dict(_log_context.get())
        for key, value in record.__dict__.items():
            if key not in _STANDARD_RECORD_FIELDS:
                extra[key] = value

        if self.json_format:
            return self._format_json(record, extra)
        return self._format_text(super().format(record), extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "logger": record.name,
            "message": record.getMessage(),
            **{k: self._to_jsonable(v) for k, v in extra.items()},
        }
        if self.include_level:
            log_data["level"] = record.levelname
        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])
        return json.dumps(log_data)

    def _format_text(self, message: str, extra: dict[str, Any]) -> str:
        if not extra:
            return message
        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        # Exception text, if any, follows the first line.
        first, sep, rest = message.partition("\n")
        return f"{first} {ctx_str}{sep}{rest}"

    def _format_value(self, value: Any) -> str:
        if isinstance(value, str):
            if " " in value:
                return f'"{value}"'
            return value
        if isinstance(value, datetime.datetime | datetime.date):
            return value.isoformat()
        if isinstance(value, enum.Enum):
            return value.name
        if isinstance(value, BaseException):
            return repr(value)
        try:
            return json.dumps(value)
        except TypeError:
            return str(value)

    def _to_jsonable(self, value: Any) -> Any:
        if isinstance(value, str | int | float | bool) or value is None:
            return value
        return self._format_value(value)


@contextlib.contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Add fields to every record logged within this context.

    The fields are stored in a context variable, so concurrent tasks keep
    separate contexts.

    Args:
        **kwargs: Context key-value pairs
    """
    token = _log_context.set({**_log_context.get(), **kwargs})
    try:
        yield
    finally:
        _log_context.reset(token)


def get_log_context() -> dict[str, Any]:
    """Return a copy of the fields bound by ``log_context``."""
    return dict(_log_context.get())


def configure_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """Configure the package root logger.

    Replaces any handlers previously installed on the root logger, so it is
    safe to call again with new settings.

    Args:
        settings: Logging settings, loaded from the environment if None

    Returns:
        The configured package root logger
    """
    settings = settings or LoggingSettings.load()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(settings.log_level.to_stdlib_level())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = StructuredFormatter(
        json_format=settings.json_format,
        include_timestamp=settings.include_timestamp,
        include_level=settings.include_level,
    )
    if settings.console_enabled:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if settings.file_enabled and settings.file_path:
        handler = logging.FileHandler(settings.file_path, encoding="utf-8")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.propagate = settings.propagate
    return logger


def get_logger(name: str, level: LogLevel | None = None) -> logging.Logger:
    """Get a logger in the package namespace.

    Configures the package root logger from the environment on first use.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        A standard library logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        configure_logging()

    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level.to_stdlib_level())
    return logger
