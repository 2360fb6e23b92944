"""Public structured error API: kinds, values, factories, and normalization."""

from .kinds import (
    CANONICAL_MESSAGES,
    DEFAULT_HTTP_STATUS,
    HTTP_STATUS_TO_KIND,
    KIND_TO_HTTP_STATUS,
    ErrorKind,
    kind_for_http_status,
)
from .types import DetailEntry, ErrorValue
from .factories import (
    bad_request,
    conflict,
    create,
    detail,
    duplicate_resource,
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
from .normalize import append_details, as_error_value, exception_to_error

__all__ = [
    "CANONICAL_MESSAGES",
    "DEFAULT_HTTP_STATUS",
    "DetailEntry",
    "ErrorKind",
    "ErrorValue",
    "HTTP_STATUS_TO_KIND",
    "KIND_TO_HTTP_STATUS",
    "append_details",
    "as_error_value",
    "bad_request",
    "conflict",
    "create",
    "detail",
    "duplicate_resource",
    "exception_to_error",
    "forbidden",
    "from_http_status",
    "internal",
    "kind_for_http_status",
    "new",
    "not_found",
    "not_implemented",
    "not_supported",
    "service_unavailable",
    "unauthorized",
    "version_not_supported",
]
