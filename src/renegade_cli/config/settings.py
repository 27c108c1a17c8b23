"""Application settings for the Renegade CLI."""

from __future__ import annotations

import os
import tomllib
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, cast

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SETTINGS_FILE_ENV_VAR = "RENEGADE_SETTINGS_FILE"
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "renegade-cli"
CONFIG_FILE_NAME = "config.json"


class LogFormat(str, Enum):
    """Supported log renderers."""

    JSON = "json"
    TEXT = "text"


def _resolve_settings_path() -> Optional[Path]:
    env_value = os.getenv(SETTINGS_FILE_ENV_VAR)
    if not env_value:
        return None
    candidate = Path(env_value).expanduser()
    if not candidate.is_absolute():
        candidate = Path.cwd() / candidate
    return candidate


def _load_toml_settings() -> Tuple[Dict[str, Any], Optional[Path]]:
    path = _resolve_settings_path()
    if path is None or not path.exists():
        return {}, None
    with path.open("rb") as handle:
        payload = tomllib.load(handle)
    if not isinstance(payload, dict):
        return {}, path
    return cast(Dict[str, Any], payload), path


class MonitoringConfig(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="WARNING")
    log_format: LogFormat = Field(default=LogFormat.JSON)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> str:
        return str(value).strip().upper()


class StorageConfig(BaseModel):
    """Where the persisted CLI configuration lives."""

    config_dir: Path = Field(default=DEFAULT_CONFIG_DIR)

    @field_validator("config_dir", mode="before")
    @classmethod
    def _expand_user(cls, value: Any) -> Path:
        return Path(value).expanduser()

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME


class RelayerConfig(BaseModel):
    """HTTP behaviour for relayer and token-mapping requests."""

    http_timeout: float = Field(default=10.0, ge=1.0, le=120.0)
    auth_expiration_ms: int = Field(default=10_000, ge=1_000)
    token_mapping_retries: int = Field(default=3, ge=1, le=10)
    token_mapping_cache_ttl_seconds: int = Field(default=300, ge=0)
    user_agent: str = Field(default="renegade-cli/0.1")


class AppConfig(BaseSettings):
    """Aggregated application configuration."""

    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    relayer: RelayerConfig = Field(default_factory=RelayerConfig)
    settings_file: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        def file_settings(_: Optional[BaseSettings] = None) -> Dict[str, Any]:
            payload, path = _load_toml_settings()
            if path is not None:
                payload = {**payload, "settings_file": path}
            return payload

        # Environment variables win over the static settings file.
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_settings,
            file_secret_settings,
        )


@lru_cache(maxsize=1)
def get_app_config() -> AppConfig:
    """Create a cached application configuration object."""

    return AppConfig()


__all__ = [
    "AppConfig",
    "CONFIG_FILE_NAME",
    "DEFAULT_CONFIG_DIR",
    "LogFormat",
    "MonitoringConfig",
    "RelayerConfig",
    "SETTINGS_FILE_ENV_VAR",
    "StorageConfig",
    "get_app_config",
]
