"""Normalization of arbitrary errors into ``ErrorValue``."""

from __future__ import annotations

import httpx

from ..classify import is_timeout
from ..drivers import driver_error_to_error
from ..wire import parse
from .factories import create, detail
from .kinds import ErrorKind
from .types import DetailEntry, ErrorValue


def as_error_value(err: object) -> ErrorValue:
    """Coerce any error-like value into an ``ErrorValue`` without raising.

    Structured errors pass through unchanged. Driver constraint violations are
    mapped through the driver table, and text that parses as a wire body is
    decoded. Anything else becomes an internal error keeping the original text.
    """
    if isinstance(err, ErrorValue):
        return err
    if err is None:
        return create(ErrorKind.INTERNAL)

    mapped = driver_error_to_error(err)
    if mapped is not None:
        return mapped

    text = _text_of(err)
    parsed, ok = parse(text)
    if ok:
        return parsed
    if not text and isinstance(err, BaseException):
        text = type(err).__name__
    return create(ErrorKind.INTERNAL, text)


def append_details(err: object, *entries: DetailEntry) -> ErrorValue:
    """Append detail entries to any error, coercing it first when opaque."""
    return as_error_value(err).with_details(*entries)


def exception_to_error(exc: BaseException) -> ErrorValue:
    """Normalize a Python exception into a structured ``ErrorValue``.

    This mapping is intentionally conservative and generic. Callers can layer
    domain-specific normalization before falling back to this function.
    """
    if isinstance(exc, ErrorValue):
        return exc

    exception_type = detail("exception_type", type(exc).__name__)

    mapped = driver_error_to_error(exc)
    if mapped is not None:
        return mapped.with_details(exception_type)

    message = _text_of(exc)

    if isinstance(exc, PermissionError):
        return create(ErrorKind.FORBIDDEN, message, exception_type)

    if is_timeout(exc) or isinstance(exc, (ConnectionError, httpx.TransportError)):
        return create(ErrorKind.SERVICE_UNAVAILABLE, message, exception_type)

    if isinstance(exc, NotImplementedError):
        return create(ErrorKind.NOT_IMPLEMENTED, message, exception_type)

    if isinstance(exc, LookupError):
        return create(ErrorKind.NOT_FOUND, message, exception_type)

    if isinstance(exc, (ValueError, TypeError)):
        return create(ErrorKind.BAD_REQUEST, message, exception_type)

    return as_error_value(exc).with_details(exception_type)


def _text_of(err: object) -> str:
    """Return ``str(err)``, or an empty string when stringification fails."""
    try:
        return str(err)
    except Exception:
        return ""
