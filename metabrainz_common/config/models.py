"""Typed configuration models for MetaBrainz client helpers."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "metabrainz" / "common.yaml"
DEFAULT_TRACER_NAME = "metabrainz_common.http"


class HttpSettings(BaseModel):
    """Response tracing settings."""

    trace: bool = False
    logger: str = Field(default=DEFAULT_TRACER_NAME, min_length=1)


class CommonSettings(BaseSettings):
    """Root settings resolved from init/env/yaml sources."""

    model_config = SettingsConfigDict(
        env_prefix="METABRAINZ_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    http: HttpSettings = Field(default_factory=HttpSettings)

    _config_path: ClassVar[Path] = DEFAULT_CONFIG_PATH

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=cls._config_path,
                yaml_file_encoding="utf-8",
            ),
        )
