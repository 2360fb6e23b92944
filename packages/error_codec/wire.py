"""JSON wire models and tolerant decoding for structured errors.

Canonical body shape::

    {"code": 4, "message": "user missing", "details": [{"name": "userId", "value": "42"}]}

``code`` is omitted for ``INTERNAL`` and ``details`` is omitted when empty.
Decoding also accepts the legacy map shape ``{"details": {"userId": "42"}}``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, ValidationError, field_validator

from .errors.kinds import ErrorKind
from .errors.types import DetailEntry, ErrorValue
from .logging import get_logger

_LOGGER = get_logger(__name__)


def clean_text(value: str) -> str:
    """Replace characters that cannot be encoded as UTF-8, such as lone surrogates."""
    return value.encode("utf-8", "replace").decode("utf-8")


class DetailBody(BaseModel):
    """Wire shape of one detail entry."""

    model_config = ConfigDict(extra="ignore")

    name: str
    value: str

    @field_validator("value", mode="before")
    @classmethod
    def _stringify_scalars(cls, value: object) -> object:
        """Accept scalar JSON values by converting them to strings."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value


class ErrorBody(BaseModel):
    """Wire shape of one structured error."""

    model_config = ConfigDict(extra="ignore")

    code: StrictInt | None = None
    message: str
    details: list[DetailBody] | None = None

    @field_validator("details", mode="before")
    @classmethod
    def _accept_legacy_map(cls, value: object) -> object:
        """Convert map-shaped details into the entry-list shape."""
        if isinstance(value, dict):
            return [{"name": key, "value": item} for key, item in value.items()]
        return value

    @classmethod
    def from_error(cls, error: ErrorValue) -> ErrorBody:
        """Build the wire body for one structured error."""
        return cls(
            code=int(error.kind) or None,
            message=clean_text(str(error)),
            details=[
                DetailBody(name=clean_text(entry.name), value=clean_text(entry.value))
                for entry in error.details
            ]
            or None,
        )

    def to_error(self) -> ErrorValue:
        """Rebuild a structured error from this body."""
        kind = ErrorKind.from_code(self.code or 0) or ErrorKind.INTERNAL
        return ErrorValue(
            kind=kind,
            message=self.message,
            details=tuple(
                DetailEntry(name=item.name, value=item.value)
                for item in self.details or ()
            ),
        )


def parse(wire: Any) -> tuple[ErrorValue, bool]:
    """Decode one wire body, reporting whether it is a well-formed structured error.

    ``ok`` is true only when the body validates, its code is a known non-zero
    kind, and its message is non-empty. Anything else yields a zero-valued
    ``ErrorValue`` and ``False``.
    """
    if not isinstance(wire, (str, bytes, bytearray)) or not wire:
        return ErrorValue(), False

    try:
        body = ErrorBody.model_validate_json(wire)
    except ValidationError as exc:
        _LOGGER.debug("rejected error body: %s", exc.error_count())
        return ErrorValue(), False

    if not body.code or ErrorKind.from_code(body.code) is None or not body.message:
        _LOGGER.debug("rejected error body without recognized code or message")
        return ErrorValue(), False
    return body.to_error(), True


def serialize(body: ErrorBody) -> str:
    """Render one wire body as compact JSON without absent fields."""
    return body.model_dump_json(exclude_none=True)
