"""Settings loading with the standard precedence cascade.

The cascade is always:
1) CLI/init params
2) Environment variables (``ERROR_CODEC_`` prefix, ``__`` for nesting)
3) YAML config file (``~/.config/error_codec/error_codec.yaml`` by default)
4) Model defaults

Example: ``ERROR_CODEC_HTTP__INCLUDE_DETAILS=false`` -> ``http.include_details = False``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Mapping

from pydantic_settings import BaseSettings, EnvSettingsSource, PydanticBaseSettingsSource

from .models import DEFAULT_CONFIG_PATH, ErrorCodecSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
) -> ErrorCodecSettings:
    """Resolve settings, reading YAML from ``config_path`` when given.

    ``environ`` replaces ``os.environ`` as the environment source when given.
    """
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    class _Settings(ErrorCodecSettings):
        _config_path: ClassVar[Path] = resolved

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,
            file_secret_settings: PydanticBaseSettingsSource,
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            if environ is not None:
                env_settings = _mapping_env_source(settings_cls, environ)
            return super().settings_customise_sources(
                settings_cls,
                init_settings,
                env_settings,
                dotenv_settings,
                file_secret_settings,
            )

    return _Settings(**dict(cli_params or {}))


def _mapping_env_source(
    settings_cls: type[BaseSettings], environ: Mapping[str, str]
) -> EnvSettingsSource:
    """Build an env source that reads ``environ`` instead of the process env."""
    source = EnvSettingsSource(settings_cls)
    source.env_vars = {
        (key if source.case_sensitive else key.lower()): value
        for key, value in environ.items()
    }
    return source
