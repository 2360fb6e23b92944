"""Stdout logging configuration for error-codec consumers.

Records are emitted either as newline-delimited JSON or as plain text with the
bound context appended. Error-classification fields bound through
``log_context`` (kind, status, driver) travel with every record.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, TextIO

from . import fields
from .context import bind_context, get_context

if TYPE_CHECKING:
    from ..config.models import LoggingSettings


class ContextFilter(logging.Filter):
    """Attach the current logging context to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = get_context()
        setattr(record, "context", context)
        for key, value in context.items():
            setattr(record, key, value)
        return True


class JsonFormatter(logging.Formatter):
    """Emit newline-delimited JSON logs with stable core fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.now(UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }

        context = getattr(record, "context", None)
        if isinstance(context, dict):
            payload.update(context)

        if record.exc_info and record.exc_info[0] is not None:
            payload[fields.EXCEPTION_TYPE] = record.exc_info[0].__name__
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Human-readable formatter that still appends structured context."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = getattr(record, "context", None)
        if not isinstance(context, dict) or not context:
            return message
        suffix = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return f"{message} {suffix}"


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure root logging with a single stream handler.

    Existing root handlers are replaced, so calling this repeatedly does not
    duplicate emissions.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setLevel(level.upper())
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())
    root.addHandler(handler)

    bind_context(**{fields.SERVICE: service, fields.ENVIRONMENT: environment})


def configure_logging_from_settings(
    settings: LoggingSettings, *, stream: TextIO | None = None
) -> None:
    """Configure root logging from the resolved ``logging`` settings section."""
    configure_logging(
        level=settings.level,
        json_output=settings.json_output,
        service=settings.service,
        environment=settings.environment,
        stream=stream,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger using Python's standard logging hierarchy."""
    return logging.getLogger(name)
