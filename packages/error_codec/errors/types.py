"""Canonical structured error value and its detail entries.

``ErrorValue`` is both a plain data record and a raisable exception. Values
are immutable: enrichment returns a new value with the extra details appended.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .kinds import ErrorKind


@dataclass(frozen=True, slots=True)
class DetailEntry:
    """One named auxiliary fact attached to an error."""

    name: str
    value: str


@dataclass(frozen=True)
class ErrorValue(Exception):
    """Structured error carrying a kind, a message, and ordered details."""

    kind: ErrorKind = ErrorKind.INTERNAL
    message: str = ""
    details: tuple[DetailEntry, ...] = ()

    def __post_init__(self) -> None:
        kind = self.kind
        if not isinstance(kind, ErrorKind):
            kind = ErrorKind.from_code(kind) or ErrorKind.INTERNAL
            object.__setattr__(self, "kind", kind)
        if not isinstance(self.details, tuple):
            object.__setattr__(self, "details", tuple(self.details))

    def __reduce__(self) -> tuple[type[ErrorValue], tuple[object, ...]]:
        """Rebuild through ``__init__`` so copy and pickle skip frozen setattr."""
        return (type(self), (self.kind, self.message, self.details))

    def add_note(self, note: str) -> None:
        """Attach a traceback note; notes are not part of the error's value."""
        if not isinstance(note, str):
            raise TypeError(f"note must be a str, not {type(note).__name__}")
        notes = [*getattr(self, "__notes__", ()), note]
        object.__setattr__(self, "__notes__", notes)

    def __str__(self) -> str:
        """Return the message, or the kind's canonical message when empty."""
        return self.message or self.kind.canonical_message

    @property
    def http_status(self) -> int:
        """HTTP status mapped to this error's kind."""
        return self.kind.http_status

    def with_details(self, *entries: DetailEntry) -> ErrorValue:
        """Return a copy with ``entries`` appended after the existing details."""
        if not entries:
            return self
        return replace(self, details=self.details + tuple(entries))

    def detail_values(self, name: str) -> tuple[str, ...]:
        """Return every value recorded under ``name`` in insertion order."""
        return tuple(entry.value for entry in self.details if entry.name == name)
