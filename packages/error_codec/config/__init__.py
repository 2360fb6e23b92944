"""Public API for error-codec configuration."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    ErrorCodecSettings,
    HttpSettings,
    LoggingSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ErrorCodecSettings",
    "HttpSettings",
    "LoggingSettings",
    "load_settings",
]
