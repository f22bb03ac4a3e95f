"""Configuration settings and loading."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from skuselect.index.builder import DEFAULT_DELIMITER


class SelectorConfig(BaseSettings):
    """Configuration for skuselect."""

    model_config = SettingsConfigDict(
        env_prefix="SKUSELECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    delimiter: str = DEFAULT_DELIMITER
    log_level: str = "WARNING"
    verbose: bool = False

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        if not v:
            raise ValueError("delimiter cannot be empty")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if level not in valid:
            raise ValueError(f"Invalid log level: {v}. Valid: {sorted(valid)}")
        return level


def load_config(config_path: str | Path | None = None) -> SelectorConfig:
    """Load configuration from file and environment.

    Priority: env vars > config file > defaults
    """
    config_data: dict[str, Any] = {}

    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path) as f:
                config_data = yaml.safe_load(f) or {}

    config_data.update(_get_env_overrides())

    return SelectorConfig(**config_data)


def _get_env_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: dict[str, Any] = {}

    env_mappings = {
        "SKUSELECT_DELIMITER": "delimiter",
        "SKUSELECT_LOG_LEVEL": "log_level",
        "SKUSELECT_VERBOSE": ("verbose", lambda x: x.lower() in ("true", "1", "yes")),
    }

    for env_key, config_key in env_mappings.items():
        value = os.environ.get(env_key)
        if value is not None:
            if isinstance(config_key, tuple):
                key, converter = config_key
                overrides[key] = converter(value)
            else:
                overrides[config_key] = value

    return overrides
