"""Unified configuration via pydantic-settings."""

import logging
from pathlib import Path
from typing import Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitscribe.exceptions import ConfigError


class GitscribeConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GITSCRIBE_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Output
    output_format: Literal["json", "text"] = "json"
    json_indent: int | None = 2

    # Logging
    log_level: str = "WARNING"
    log_dir: Path | None = None
    log_max_bytes: int = 10_485_760
    log_backup_count: int = 5

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("json_indent")
    @classmethod
    def validate_json_indent(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError("json_indent must be >= 0")
        return v

    @field_validator("log_dir")
    @classmethod
    def expand_log_dir(cls, v: Path | None) -> Path | None:
        return v.expanduser() if v is not None else None


def load_config() -> GitscribeConfig:
    """Build the config from the environment, raising ConfigError when invalid."""
    try:
        return GitscribeConfig()
    except ValidationError as e:
        raise ConfigError(str(e)) from e
