"""FastAPI helpers that render structured errors as HTTP responses."""

from __future__ import annotations

from dataclasses import replace

from fastapi import FastAPI, Request, Response

from ..classify import http_status
from ..codec import encode
from ..config import ErrorCodecSettings
from ..errors.normalize import as_error_value, exception_to_error
from ..errors.types import ErrorValue
from ..logging import fields, get_logger, log_context

JSON_MEDIA_TYPE = "application/json"

_LOGGER = get_logger(__name__)


def error_response(err: object, *, include_details: bool = True) -> Response:
    """Build one JSON response whose status is mapped from the error kind."""
    error = as_error_value(err)
    if not include_details and error.details:
        error = replace(error, details=())
    return Response(
        content=encode(error),
        status_code=http_status(error),
        media_type=JSON_MEDIA_TYPE,
    )


def register_exception_handlers(
    app: FastAPI,
    *,
    settings: ErrorCodecSettings | None = None,
) -> None:
    """Install handlers rendering raised errors through the codec.

    ``ErrorValue`` exceptions are rendered as-is. Any other exception is
    normalized, logged with its classification, and rendered; its raw text and
    details are replaced by the kind's canonical message unless
    ``http.expose_unhandled_messages`` is enabled.
    """
    http_settings = (settings or ErrorCodecSettings()).http

    async def handle_error_value(request: Request, exc: Exception) -> Response:
        return error_response(exc, include_details=http_settings.include_details)

    async def handle_unexpected(request: Request, exc: Exception) -> Response:
        error = exception_to_error(exc)
        with log_context(
            {
                fields.ERROR_KIND: error.kind.name,
                fields.HTTP_STATUS: error.http_status,
                fields.DRIVER: next(iter(error.detail_values("driver")), None),
                fields.REQUEST_PATH: request.url.path,
                fields.REQUEST_METHOD: request.method,
            }
        ):
            _LOGGER.error("unhandled exception", exc_info=exc)

        if not http_settings.expose_unhandled_messages:
            error = replace(error, message=error.kind.canonical_message, details=())
        return error_response(error, include_details=http_settings.include_details)

    app.add_exception_handler(ErrorValue, handle_error_value)
    app.add_exception_handler(Exception, handle_unexpected)
