"""Tests for kind classification predicates and HTTP status mapping."""

from __future__ import annotations

import httpx
import pytest
import sqlalchemy.exc

from packages.error_codec import (
    ErrorKind,
    bad_request,
    conflict,
    duplicate_resource,
    encode,
    forbidden,
    http_status,
    internal,
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
    not_found,
    not_implemented,
    not_supported,
    service_unavailable,
    unauthorized,
    version_not_supported,
)

ALLOWED_STATUSES = {400, 401, 403, 404, 409, 500, 501, 503, 505}

ALL_PREDICATES = [
    is_bad_input,
    is_conflict,
    is_duplicate,
    is_forbidden,
    is_not_found,
    is_not_referenced_id,
    is_not_supported,
    is_permission_denied,
    is_service_unavailable,
    is_timeout,
    is_unauthorized,
    is_unimplemented,
]

GARBAGE = [None, "", "not json", b"\xff\xfe", 42, object(), ValueError(), RuntimeError("{")]


class _Unprintable(Exception):
    def __str__(self) -> str:
        raise RuntimeError("cannot render")


@pytest.mark.parametrize("value", GARBAGE + [_Unprintable()])
def test_http_status_defaults_to_500_for_unrecognized_input(value: object) -> None:
    """Garbage input should never raise and should map to 500."""
    assert http_status(value) == 500
    assert kind_of(value) is None
    assert is_internal(value) is True


@pytest.mark.parametrize("value", GARBAGE + [_Unprintable()])
@pytest.mark.parametrize("predicate", ALL_PREDICATES)
def test_predicates_return_false_for_unrecognized_input(predicate, value: object) -> None:
    """Predicates should degrade to ``False`` rather than raising."""
    assert predicate(value) is False


@pytest.mark.parametrize("kind", list(ErrorKind))
def test_http_status_stays_within_fixed_set(kind: ErrorKind) -> None:
    """Every kind should map into the fixed status set."""
    assert http_status(kind.canonical_message) in ALLOWED_STATUSES
    assert kind.http_status in ALLOWED_STATUSES


def test_predicates_match_their_kinds() -> None:
    """Each predicate should recognize the kind it is named for."""
    assert is_bad_input(bad_request("x"))
    assert is_unauthorized(unauthorized("x"))
    assert is_forbidden(forbidden("x"))
    assert is_not_found(not_found("x"))
    assert is_unimplemented(not_implemented("x"))
    assert is_service_unavailable(service_unavailable("x"))
    assert not is_forbidden(unauthorized("x"))
    assert not is_not_found(conflict("x"))


def test_duplicate_is_a_conflict_alias() -> None:
    """Duplicates count as conflicts, but plain conflicts are not duplicates."""
    assert is_conflict(duplicate_resource("x"))
    assert is_duplicate(duplicate_resource("x"))
    assert is_conflict(conflict("x"))
    assert not is_duplicate(conflict("x"))


def test_not_supported_covers_both_unsupported_kinds() -> None:
    """Unsupported operations and versions should both be reported."""
    assert is_not_supported(not_supported("x"))
    assert is_not_supported(version_not_supported("x"))
    assert not is_not_supported(not_implemented("x"))


def test_permission_denied_covers_forbidden_and_unauthorized() -> None:
    """Permission denial should include both auth failure kinds."""
    assert is_permission_denied(forbidden("x"))
    assert is_permission_denied(unauthorized("x"))
    assert not is_permission_denied(not_found("x"))


def test_predicates_parse_opaque_errors_carrying_wire_bodies() -> None:
    """Opaque errors whose text is a wire body should classify by its kind."""
    opaque = RuntimeError(encode(not_found("user missing")))

    assert is_not_found(opaque)
    assert http_status(opaque) == 404
    assert http_status(encode(forbidden("nope"))) == 403


def test_internal_errors_classify_as_internal() -> None:
    """Internal errors map to 500 and only the internal predicate."""
    error = internal("boom")
    assert http_status(error) == 500
    assert is_internal(error)
    assert not is_conflict(error)


def test_is_timeout_recognizes_timeout_types() -> None:
    """Builtin, httpx, and SQLAlchemy pool timeouts should all be timeouts."""
    assert is_timeout(TimeoutError("slow"))
    assert is_timeout(httpx.ReadTimeout("slow"))
    assert is_timeout(sqlalchemy.exc.TimeoutError("pool exhausted"))
    assert not is_timeout(service_unavailable("x"))


def test_is_timeout_follows_exception_chain() -> None:
    """A timeout anywhere in the cause chain should count."""
    try:
        try:
            raise TimeoutError("slow")
        except TimeoutError as inner:
            raise RuntimeError("wrapped") from inner
    except RuntimeError as outer:
        assert is_timeout(outer)
