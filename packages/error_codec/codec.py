"""Encode structured errors for transport boundaries and decode them back."""

from __future__ import annotations

import json
from typing import TextIO

from .errors.normalize import as_error_value
from .logging import get_logger
from .wire import ErrorBody, clean_text, parse, serialize

_LOGGER = get_logger(__name__)

__all__ = ["encode", "parse", "write"]


def encode(err: object) -> str:
    """Encode any error as a JSON wire body; never raises.

    Opaque errors are coerced with ``as_error_value`` first. When rendering the
    full body fails, a minimal ``{"code", "message"}`` object is returned.
    """
    error = as_error_value(err)
    try:
        return serialize(ErrorBody.from_error(error))
    except Exception as exc:
        _LOGGER.warning(
            "error body serialization failed; using minimal fallback: %s",
            type(exc).__name__,
        )
        return json.dumps(
            {"code": int(error.kind), "message": clean_text(str(error))},
            ensure_ascii=True,
        )


def write(stream: TextIO, err: object) -> int:
    """Write the encoded form of ``err`` to ``stream`` and return its length."""
    data = encode(err)
    stream.write(data)
    return len(data)
