"""Read structured errors back out of httpx responses."""

from __future__ import annotations

import httpx

from ..config.models import HttpSettings
from ..errors.factories import detail, from_http_status
from ..errors.types import ErrorValue
from ..wire import parse


def _response_text(response: httpx.Response) -> str:
    """Return response text without raising secondary decode errors."""
    try:
        return response.text
    except Exception:
        return ""


def error_from_response(
    response: httpx.Response,
    *,
    max_body_chars: int | None = None,
    settings: HttpSettings | None = None,
) -> ErrorValue | None:
    """Decode the error carried by one response; ``None`` for non-error statuses.

    A structured body wins. Otherwise the kind comes from the status table and
    a truncated copy of the body is attached as a ``body`` detail. The limit
    defaults to ``http.max_body_detail_chars``.
    """
    if response.status_code < 400:
        return None
    if max_body_chars is None:
        max_body_chars = (settings or HttpSettings()).max_body_detail_chars

    text = _response_text(response)
    parsed, ok = parse(text)
    if ok:
        return parsed

    details = (detail("body", text[:max_body_chars]),) if text and max_body_chars else ()
    return from_http_status(response.status_code, *details)


def raise_for_error(
    response: httpx.Response,
    *,
    max_body_chars: int | None = None,
    settings: HttpSettings | None = None,
) -> None:
    """Raise the structured error carried by one error response."""
    error = error_from_response(response, max_body_chars=max_body_chars, settings=settings)
    if error is not None:
        raise error
