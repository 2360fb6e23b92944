"""Kind classification predicates over structured and opaque errors.

Every function here accepts any object and never raises. Structured errors are
classified by their ``kind`` field; anything else is resolved through the
driver table and then by parsing its text as a wire body.
"""

from __future__ import annotations

import httpx
import sqlalchemy.exc

from .drivers import ConstraintViolation, constraint_violation
from .errors.kinds import DEFAULT_HTTP_STATUS, ErrorKind
from .errors.types import ErrorValue
from .wire import parse

_TIMEOUT_TYPES: tuple[type[BaseException], ...] = (
    TimeoutError,
    httpx.TimeoutException,
    sqlalchemy.exc.TimeoutError,
)

_CONFLICT_KINDS = frozenset({ErrorKind.CONFLICT, ErrorKind.DUPLICATE_RESOURCE})
_NOT_SUPPORTED_KINDS = frozenset({ErrorKind.NOT_SUPPORTED, ErrorKind.VERSION_NOT_SUPPORTED})
_PERMISSION_KINDS = frozenset({ErrorKind.FORBIDDEN, ErrorKind.UNAUTHORIZED})


def kind_of(err: object) -> ErrorKind | None:
    """Return the kind of ``err``, or ``None`` when it is unrecognized."""
    if isinstance(err, ErrorValue):
        return err.kind
    if err is None:
        return None

    violation = constraint_violation(err)
    if violation is not None:
        return violation.kind

    try:
        text = err if isinstance(err, (str, bytes, bytearray)) else str(err)
    except Exception:
        return None
    parsed, ok = parse(text)
    return parsed.kind if ok else None


def http_status(err: object) -> int:
    """Return the HTTP status for ``err``; unrecognized input maps to 500."""
    kind = kind_of(err)
    if kind is None:
        return DEFAULT_HTTP_STATUS
    return kind.http_status


def _is(err: object, *kinds: ErrorKind) -> bool:
    return kind_of(err) in kinds


def is_internal(err: object) -> bool:
    """Report internal errors, including anything unrecognized."""
    kind = kind_of(err)
    return kind is None or kind is ErrorKind.INTERNAL


def is_bad_input(err: object) -> bool:
    return _is(err, ErrorKind.BAD_REQUEST)


def is_unauthorized(err: object) -> bool:
    return _is(err, ErrorKind.UNAUTHORIZED)


def is_forbidden(err: object) -> bool:
    return _is(err, ErrorKind.FORBIDDEN)


def is_permission_denied(err: object) -> bool:
    """Report forbidden or unauthenticated errors."""
    return _is(err, *_PERMISSION_KINDS)


def is_not_found(err: object) -> bool:
    return _is(err, ErrorKind.NOT_FOUND)


def is_conflict(err: object) -> bool:
    """Report conflicts; duplicate resources count as conflicts."""
    return _is(err, *_CONFLICT_KINDS)


def is_duplicate(err: object) -> bool:
    """Report duplicate resources, including driver unique violations."""
    return _is(err, ErrorKind.DUPLICATE_RESOURCE)


def is_unimplemented(err: object) -> bool:
    return _is(err, ErrorKind.NOT_IMPLEMENTED)


def is_service_unavailable(err: object) -> bool:
    return _is(err, ErrorKind.SERVICE_UNAVAILABLE)


def is_not_supported(err: object) -> bool:
    """Report unsupported operations and unsupported versions."""
    return _is(err, *_NOT_SUPPORTED_KINDS)


def is_not_referenced_id(err: object) -> bool:
    """Report driver foreign-key violations (a reference to a missing row)."""
    return constraint_violation(err) is ConstraintViolation.FOREIGN_KEY


def is_timeout(err: object) -> bool:
    """Report timeouts anywhere in the exception's cause/context chain."""
    seen: set[int] = set()
    current = err if isinstance(err, BaseException) else None
    while current is not None and id(current) not in seen:
        if isinstance(current, _TIMEOUT_TYPES):
            return True
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return False
