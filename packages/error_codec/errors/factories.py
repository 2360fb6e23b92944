"""Factory helpers for creating consistent structured errors."""

from __future__ import annotations

from .kinds import ErrorKind, kind_for_http_status
from .types import DetailEntry, ErrorValue


def detail(name: str, value: object) -> DetailEntry:
    """Create one detail entry, stringifying non-string values."""
    return DetailEntry(name=str(name), value=value if isinstance(value, str) else str(value))


def create(kind: ErrorKind | int, message: str = "", *details: DetailEntry) -> ErrorValue:
    """Create an error of a dynamic kind; unknown codes become ``INTERNAL``."""
    resolved = kind if isinstance(kind, ErrorKind) else ErrorKind.from_code(kind)
    if resolved is None:
        resolved = ErrorKind.INTERNAL
    return ErrorValue(
        kind=resolved,
        message=message or resolved.canonical_message,
        details=tuple(details),
    )


def new(message: str, *details: DetailEntry) -> ErrorValue:
    """Create an internal error with a caller-supplied message."""
    return create(ErrorKind.INTERNAL, message, *details)


def internal(message: str = "", *details: DetailEntry) -> ErrorValue:
    """Create an internal-kind error."""
    return create(ErrorKind.INTERNAL, message, *details)


def bad_request(message: str = "", *details: DetailEntry) -> ErrorValue:
    """Create a bad-input error."""
    return create(ErrorKind.BAD_REQUEST, message, *details)


def unauthorized(message: str = "", *details: DetailEntry) -> ErrorValue:
    """Create an unauthenticated-caller error."""
    return create(ErrorKind.UNAUTHORIZED, message, *details)


def forbidden(message: str = "", *details: DetailEntry) -> ErrorValue:
    """Create a forbidden error."""
    return create(ErrorKind.FORBIDDEN, message, *details)


def not_found(message: str = "", *details: DetailEntry) -> ErrorValue:
    """Create a not-found error."""
    return create(ErrorKind.NOT_FOUND, message, *details)


def conflict(message: str = "", *details: DetailEntry) -> ErrorValue:
    """Create a conflict error."""
    return create(ErrorKind.CONFLICT, message, *details)


def duplicate_resource(message: str = "", *details: DetailEntry) -> ErrorValue:
    """Create a duplicate-resource error (a conflict alias)."""
    return create(ErrorKind.DUPLICATE_RESOURCE, message, *details)


def not_implemented(message: str = "", *details: DetailEntry) -> ErrorValue:
    """Create an unimplemented-operation error."""
    return create(ErrorKind.NOT_IMPLEMENTED, message, *details)


def service_unavailable(message: str = "", *details: DetailEntry) -> ErrorValue:
    """Create a service-unavailable error."""
    return create(ErrorKind.SERVICE_UNAVAILABLE, message, *details)


def version_not_supported(message: str = "", *details: DetailEntry) -> ErrorValue:
    """Create a version-not-supported error."""
    return create(ErrorKind.VERSION_NOT_SUPPORTED, message, *details)


def not_supported(message: str = "", *details: DetailEntry) -> ErrorValue:
    """Create an unsupported-operation error."""
    return create(ErrorKind.NOT_SUPPORTED, message, *details)


def from_http_status(
    status: int,
    *details: DetailEntry,
    message: str | None = None,
) -> ErrorValue:
    """Create the error matching one HTTP status; unknown statuses are internal."""
    return create(kind_for_http_status(status), message or "", *details)
