"""Structured error kinds, JSON codec, and classification helpers.

Typical use::

    from packages.error_codec import detail, encode, http_status, not_found, parse

    error = not_found("user missing", detail("userId", "42"))
    body, status = encode(error), http_status(error)
    received, ok = parse(body)
"""

from .errors import (
    CANONICAL_MESSAGES,
    DetailEntry,
    ErrorKind,
    ErrorValue,
    append_details,
    as_error_value,
    bad_request,
    conflict,
    create,
    detail,
    duplicate_resource,
    exception_to_error,
    forbidden,
    from_http_status,
    internal,
    new,
    not_found,
    not_implemented,
    not_supported,
    service_unavailable,
    unauthorized,
    version_not_supported,
)
from .codec import encode, parse, write
from .classify import (
    http_status,
    is_bad_input,
    is_conflict,
    is_duplicate,
    is_forbidden,
    is_internal,
    is_not_found,
    is_not_referenced_id,
    is_not_supported,
    is_permission_denied,
    is_service_unavailable,
    is_timeout,
    is_unauthorized,
    is_unimplemented,
    kind_of,
)
from .drivers import ConstraintViolation, DriverFamily, constraint_violation

__all__ = [
    "CANONICAL_MESSAGES",
    "ConstraintViolation",
    "DetailEntry",
    "DriverFamily",
    "ErrorKind",
    "ErrorValue",
    "append_details",
    "as_error_value",
    "bad_request",
    "conflict",
    "constraint_violation",
    "create",
    "detail",
    "duplicate_resource",
    "encode",
    "exception_to_error",
    "forbidden",
    "from_http_status",
    "http_status",
    "internal",
    "is_bad_input",
    "is_conflict",
    "is_duplicate",
    "is_forbidden",
    "is_internal",
    "is_not_found",
    "is_not_referenced_id",
    "is_not_supported",
    "is_permission_denied",
    "is_service_unavailable",
    "is_timeout",
    "is_unauthorized",
    "is_unimplemented",
    "kind_of",
    "new",
    "not_found",
    "not_implemented",
    "not_supported",
    "parse",
    "service_unavailable",
    "unauthorized",
    "version_not_supported",
    "write",
]
