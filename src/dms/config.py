from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Tuple, Type

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from .events import DEFAULT_NAMESPACE, DEFAULT_SERVICE_NAME

CONFIG_ENV_VAR = "DMS_CONFIG"
DEFAULT_CONFIG_FILE = "config.yml"


def config_path() -> Path:
    """Path of the optional YAML config file, overridable via ``DMS_CONFIG``."""
    return Path(os.getenv(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE))


class Settings(BaseSettings):
    """Runtime configuration.

    Values come from keyword arguments, ``DMS_*`` environment variables, a
    ``.env`` file and finally the YAML config file, in that priority.
    """

    model_config = SettingsConfigDict(
        env_prefix="DMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "DEBUG"
    diagnostic_level: str = "WARNING"
    namespace: str = DEFAULT_NAMESPACE
    service_name: str = DEFAULT_SERVICE_NAME
    transaction_id: str = "0"
    halt_on_error: bool = False

    @field_validator("log_level", "diagnostic_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        name = str(value).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            return "INFO"
        return name

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=config_path()),
            file_secret_settings,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()


__all__ = ["Settings", "config_path", "get_settings"]
