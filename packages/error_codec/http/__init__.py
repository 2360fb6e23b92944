"""HTTP adapters: FastAPI response rendering and httpx response decoding."""

from .client import error_from_response, raise_for_error
from .server import JSON_MEDIA_TYPE, error_response, register_exception_handlers

__all__ = [
    "JSON_MEDIA_TYPE",
    "error_from_response",
    "error_response",
    "raise_for_error",
    "register_exception_handlers",
]
