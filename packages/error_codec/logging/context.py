"""Contextvar-backed logging context.

Fields bound here (request path, error kind, mapped status) are attached to
every record emitted in the same task or thread of execution.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar("error_codec_log_context", default={})


def get_context() -> dict[str, str]:
    """Return a shallow copy of the current logging context."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind values into the current context; ``None`` values are skipped.

    Values are stringified so structured records keep a stable shape.
    """
    current = _LOG_CONTEXT.get().copy()
    current.update({str(key): str(value) for key, value in values.items() if value is not None})
    _LOG_CONTEXT.set(current)


def clear_context(*keys: str) -> None:
    """Clear selected keys or the entire logging context."""
    if not keys:
        _LOG_CONTEXT.set({})
        return
    current = _LOG_CONTEXT.get().copy()
    for key in keys:
        current.pop(key, None)
    _LOG_CONTEXT.set(current)


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Temporarily bind logging context for the duration of a block."""
    token = _LOG_CONTEXT.set(_LOG_CONTEXT.get().copy())
    try:
        bind_context(**dict(values))
        yield
    finally:
        _LOG_CONTEXT.reset(token)
