"""Closed error-kind taxonomy and its HTTP status tables.

Kind values are the stable numeric codes carried on the wire. They must never
be renumbered once released; new kinds take the next free code.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping


class ErrorKind(IntEnum):
    """Canonical error classes shared across transport boundaries."""

    INTERNAL = 0
    BAD_REQUEST = 1
    UNAUTHORIZED = 2
    FORBIDDEN = 3
    NOT_FOUND = 4
    CONFLICT = 5
    NOT_IMPLEMENTED = 6
    SERVICE_UNAVAILABLE = 7
    VERSION_NOT_SUPPORTED = 8
    DUPLICATE_RESOURCE = 9
    NOT_SUPPORTED = 10

    @classmethod
    def from_code(cls, code: object) -> ErrorKind | None:
        """Return the kind for one numeric code, or ``None`` when unknown."""
        if isinstance(code, bool) or not isinstance(code, int):
            return None
        try:
            return cls(code)
        except ValueError:
            return None

    @property
    def http_status(self) -> int:
        """HTTP status code mapped to this kind."""
        return KIND_TO_HTTP_STATUS[self]

    @property
    def canonical_message(self) -> str:
        """Default human-readable message for this kind."""
        return CANONICAL_MESSAGES[self]


DEFAULT_HTTP_STATUS = 500

KIND_TO_HTTP_STATUS: Mapping[ErrorKind, int] = MappingProxyType(
    {
        ErrorKind.INTERNAL: 500,
        ErrorKind.BAD_REQUEST: 400,
        ErrorKind.UNAUTHORIZED: 401,
        ErrorKind.FORBIDDEN: 403,
        ErrorKind.NOT_FOUND: 404,
        ErrorKind.CONFLICT: 409,
        ErrorKind.NOT_IMPLEMENTED: 501,
        ErrorKind.SERVICE_UNAVAILABLE: 503,
        ErrorKind.VERSION_NOT_SUPPORTED: 505,
        ErrorKind.DUPLICATE_RESOURCE: 409,
        ErrorKind.NOT_SUPPORTED: 505,
    }
)

# Reverse table: where two kinds share a status the lower code wins.
HTTP_STATUS_TO_KIND: Mapping[int, ErrorKind] = MappingProxyType(
    {
        400: ErrorKind.BAD_REQUEST,
        401: ErrorKind.UNAUTHORIZED,
        403: ErrorKind.FORBIDDEN,
        404: ErrorKind.NOT_FOUND,
        409: ErrorKind.CONFLICT,
        500: ErrorKind.INTERNAL,
        501: ErrorKind.NOT_IMPLEMENTED,
        503: ErrorKind.SERVICE_UNAVAILABLE,
        505: ErrorKind.VERSION_NOT_SUPPORTED,
    }
)

CANONICAL_MESSAGES: Mapping[ErrorKind, str] = MappingProxyType(
    {
        ErrorKind.INTERNAL: "internal",
        ErrorKind.BAD_REQUEST: "bad input",
        ErrorKind.UNAUTHORIZED: "unauthorized",
        ErrorKind.FORBIDDEN: "forbidden",
        ErrorKind.NOT_FOUND: "not found",
        ErrorKind.CONFLICT: "conflict",
        ErrorKind.NOT_IMPLEMENTED: "unimplemented",
        ErrorKind.SERVICE_UNAVAILABLE: "service unavailable",
        ErrorKind.VERSION_NOT_SUPPORTED: "version not supported",
        ErrorKind.DUPLICATE_RESOURCE: "duplicate resource",
        ErrorKind.NOT_SUPPORTED: "unsupported",
    }
)


def kind_for_http_status(status: int) -> ErrorKind:
    """Map one HTTP status back to a kind, defaulting to ``INTERNAL``."""
    return HTTP_STATUS_TO_KIND.get(status, ErrorKind.INTERNAL)
