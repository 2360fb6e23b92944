"""Public logging API for error-codec.

This package wraps Python's ``logging`` module with opinionated defaults for
stdout emission and structured context propagation.
"""

from . import fields
from .config import (
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from .context import bind_context, clear_context, get_context, log_context

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "configure_logging_from_settings",
    "fields",
    "get_context",
    "get_logger",
    "JsonFormatter",
    "log_context",
    "PlainFormatter",
]
