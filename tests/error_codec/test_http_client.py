"""Tests for decoding structured errors from httpx responses."""

from __future__ import annotations

import httpx
import pytest

from packages.error_codec import ErrorKind, ErrorValue, detail, duplicate_resource, encode, is_conflict
from packages.error_codec.config import HttpSettings
from packages.error_codec.http import error_from_response, raise_for_error


def test_success_responses_carry_no_error() -> None:
    """Statuses below 400 should not produce an error."""
    assert error_from_response(httpx.Response(200, text="ok")) is None
    assert error_from_response(httpx.Response(302)) is None


def test_structured_body_wins_over_status() -> None:
    """A well-formed wire body should be decoded as-is."""
    body = encode(duplicate_resource("email taken", detail("field", "email")))

    error = error_from_response(httpx.Response(409, text=body))

    assert error is not None
    assert error.kind is ErrorKind.DUPLICATE_RESOURCE
    assert error.detail_values("field") == ("email",)
    assert is_conflict(error)


def test_unstructured_body_falls_back_to_status_table() -> None:
    """Non-JSON bodies should map through the status and be kept as a detail."""
    error = error_from_response(httpx.Response(503, text="upstream down" * 100), max_body_chars=20)

    assert error is not None
    assert error.kind is ErrorKind.SERVICE_UNAVAILABLE
    assert error.message == "service unavailable"
    assert error.detail_values("body") == (("upstream down" * 100)[:20],)


def test_unknown_error_status_is_internal_without_body_detail() -> None:
    """Unmapped statuses should be internal; empty bodies add no detail."""
    error = error_from_response(httpx.Response(429))

    assert error is not None
    assert error.kind is ErrorKind.INTERNAL
    assert error.details == ()


def test_raise_for_error_raises_structured_error() -> None:
    """Error responses should raise the decoded structured error."""
    with pytest.raises(ErrorValue) as exc_info:
        raise_for_error(httpx.Response(404, text="gone"))

    assert exc_info.value.kind is ErrorKind.NOT_FOUND
    raise_for_error(httpx.Response(204))


def test_body_detail_limit_comes_from_settings() -> None:
    """Without an explicit limit, ``http.max_body_detail_chars`` truncates the body."""
    response = httpx.Response(502, text="x" * 100)

    default = error_from_response(response)
    limited = error_from_response(response, settings=HttpSettings(max_body_detail_chars=8))
    disabled = error_from_response(response, settings=HttpSettings(max_body_detail_chars=0))

    assert default is not None and default.detail_values("body") == ("x" * 100,)
    assert limited is not None and limited.detail_values("body") == ("x" * 8,)
    assert disabled is not None and disabled.details == ()
