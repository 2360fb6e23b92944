"""Tests for FastAPI error rendering and exception handlers."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from packages.error_codec import detail, duplicate_resource, encode, not_found
from packages.error_codec.config import ErrorCodecSettings
from packages.error_codec.http import JSON_MEDIA_TYPE, error_response, register_exception_handlers
from packages.error_codec.logging import get_context


def _client(settings: ErrorCodecSettings | None = None) -> TestClient:
    """Build an app whose routes raise assorted errors."""
    app = FastAPI()
    register_exception_handlers(app, settings=settings)

    @app.get("/users/{user_id}")
    async def get_user(user_id: str) -> dict[str, str]:
        raise not_found("user missing", detail("userId", user_id))

    @app.get("/crash")
    async def crash() -> dict[str, str]:
        raise RuntimeError("db password is hunter2")

    @app.get("/lookup")
    async def lookup() -> dict[str, str]:
        raise KeyError("session")

    @app.get("/upstream")
    async def upstream() -> dict[str, str]:
        raise httpx.ReadTimeout("upstream read timed out")

    @app.post("/signup")
    async def signup() -> dict[str, str]:
        with closing(sqlite3.connect(":memory:")) as connection:
            connection.execute("CREATE TABLE users (email TEXT UNIQUE)")
            connection.execute("INSERT INTO users VALUES ('a@example.com')")
            connection.execute("INSERT INTO users VALUES ('a@example.com')")
        return {}

    return TestClient(app, raise_server_exceptions=False)


def test_error_response_sets_status_body_and_media_type() -> None:
    """Responses should carry the encoded body and the mapped status."""
    error = duplicate_resource("email taken", detail("field", "email"))

    response = error_response(error)

    assert response.status_code == 409
    assert response.media_type == JSON_MEDIA_TYPE
    assert response.body == encode(error).encode()


def test_error_response_can_strip_details() -> None:
    """Details should be dropped when the caller opts out."""
    response = error_response(not_found("x", detail("secret", "1")), include_details=False)
    assert response.body == b'{"code":4,"message":"x"}'


def test_raised_error_value_is_rendered_with_its_status() -> None:
    """Raised structured errors should be rendered through the codec."""
    response = _client().get("/users/42")

    assert response.status_code == 404
    assert response.json() == {
        "code": 4,
        "message": "user missing",
        "details": [{"name": "userId", "value": "42"}],
    }


def test_unhandled_exception_is_masked_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Unexpected exceptions should return the canonical message and be logged."""
    with caplog.at_level(logging.ERROR):
        response = _client().get("/crash")

    assert response.status_code == 500
    assert response.json() == {"message": "internal"}
    assert "hunter2" not in response.text
    assert "unhandled exception" in caplog.text


def test_unhandled_exception_is_classified_by_type() -> None:
    """Builtin exception types should still map to their kinds."""
    response = _client().get("/lookup")

    assert response.status_code == 404
    assert response.json() == {"code": 4, "message": "not found"}


def test_unhandled_messages_are_exposed_when_configured() -> None:
    """Settings can opt into returning the raw exception text."""
    settings = ErrorCodecSettings(http={"expose_unhandled_messages": True, "include_details": False})

    response = _client(settings).get("/crash")

    assert response.status_code == 500
    assert response.json() == {"message": "db password is hunter2"}


def test_unhandled_client_timeout_maps_to_service_unavailable() -> None:
    """Upstream HTTP timeouts should surface as 503 rather than 500."""
    response = _client().get("/upstream")

    assert response.status_code == 503
    assert response.json() == {"code": 7, "message": "service unavailable"}


class _ContextCapture(logging.Handler):
    """Record the logging context active when each record is emitted."""

    def __init__(self) -> None:
        super().__init__()
        self.contexts: list[dict[str, str]] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.contexts.append(get_context())


def test_unhandled_driver_violation_logs_driver_and_kind() -> None:
    """Driver constraint violations should be logged with their driver family."""
    capture = _ContextCapture()
    logger = logging.getLogger("packages.error_codec.http.server")
    logger.addHandler(capture)
    try:
        response = _client().post("/signup")
    finally:
        logger.removeHandler(capture)

    assert response.status_code == 409
    assert response.json() == {"code": 9, "message": "duplicate resource"}
    assert capture.contexts[-1]["driver"] == "sqlite"
    assert capture.contexts[-1]["error_kind"] == "DUPLICATE_RESOURCE"
    assert capture.contexts[-1]["request_method"] == "POST"
