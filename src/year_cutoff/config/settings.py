"""
Configuration management for year-cutoff.

Environment-based configuration using Pydantic BaseSettings. Every field can
be overridden with a ``YEAR_CUTOFF_`` prefixed environment variable, e.g.
``YEAR_CUTOFF_CUTOFF_YEAR=2049``.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("YEAR_CUTOFF_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Fields:
    - log_level: Logging level name (normalized to uppercase)
    - cutoff_year: Cutoff year for interpreters built from settings;
      None means current year + DEFAULT_CUTOFF_OFFSET
    """

    log_level: str = Field(default="INFO", description="Logging level")
    cutoff_year: Optional[int] = Field(
        default=None,
        description="Cutoff year for short year interpretation (None = from clock)",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        """Uppercase the level name and reject names stdlib logging doesn't know."""
        level_name = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level_name), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level_name

    model_config = SettingsConfigDict(
        env_prefix="YEAR_CUTOFF_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
