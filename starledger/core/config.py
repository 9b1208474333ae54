"""starledger.core.config

Two config surfaces only:
1) `config/default.yaml` (optionally `config/user.yaml`)
2) Environment variables, prefixed `STARLEDGER_`

Environment beats YAML. Everything else is derived.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from starledger import CHALLENGE_SUFFIX, FRESHNESS_WINDOW_SECONDS, GENESIS_DATA
from starledger.core.exceptions import ConfigError

SignatureScheme = Literal["eip191", "bitcoin"]


class RegistryConfig(BaseModel):
    freshness_window_seconds: int = FRESHNESS_WINDOW_SECONDS
    challenge_suffix: str = CHALLENGE_SUFFIX
    genesis_data: str = GENESIS_DATA
    signature_scheme: SignatureScheme = "eip191"

    @field_validator("freshness_window_seconds")
    @classmethod
    def window_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("freshness_window_seconds must be >= 1")
        return v

    @field_validator("challenge_suffix")
    @classmethod
    def suffix_cannot_contain_colon(cls, v: str) -> str:
        if ":" in v:
            raise ValueError("challenge_suffix cannot contain ':'")
        return v

    @field_validator("signature_scheme", mode="before")
    @classmethod
    def scheme_lower(cls, v: str) -> str:
        return str(v).lower()


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def level_upper(cls, v: str) -> str:
        return str(v).upper()


class ApiConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8000


class Config(BaseSettings):
    """Root configuration. Single source of truth."""

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    model_config = {"env_prefix": "STARLEDGER_", "env_nested_delimiter": "__"}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # YAML arrives as init kwargs; env vars are merged over it key by key.
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        try:
            raw = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Config file is not valid YAML: {path}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}")

        try:
            return cls(**raw)
        except ValidationError as e:
            raise ConfigError(f"Invalid config in {path}: {e}") from e

    @classmethod
    def from_repo_defaults(cls, repo_root: Path | None = None) -> Config:
        root = repo_root or Path.cwd()
        user_path = root / "config" / "user.yaml"
        if user_path.exists():
            return cls.from_yaml(user_path)
        return cls.from_yaml(root / "config" / "default.yaml")
