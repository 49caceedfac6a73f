"""
Configuration management for sql_formatter.

Environment-based settings using Pydantic BaseSettings. Every field has a
default so the library works without any environment; variables with the
SQLFMT_ prefix (or an optional .env file) override them.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_OVERRIDE = os.getenv("SQLFMT_ENV_FILE")
SETTINGS_ENV_FILE = Path(ENV_FILE_OVERRIDE).expanduser() if ENV_FILE_OVERRIDE else Path(".env")


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the SQLFMT_ prefix, for example
    SQLFMT_DEFAULT_LANGUAGE=db2 changes the dialect used by the CLI when
    --language is not given. LOG_LEVEL is also read without the prefix.
    """

    LOG_LEVEL: str = Field(
        default="WARNING",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    default_language: str = Field(
        default="sql", description="Dialect used when none is requested"
    )
    default_indent: str = Field(
        default="  ", description="Indentation unit used by the CLI"
    )
    default_reserved_word_case: Optional[Literal["upper", "lower"]] = Field(
        default=None, description="Reserved word case used by the CLI"
    )
    dialects_dir: Optional[str] = Field(
        default=None,
        description="Directory holding <dialect>.yml profiles, overrides the bundled ones",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    model_config = SettingsConfigDict(
        env_prefix="SQLFMT_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings instance.

    Settings are created once and reused for the process lifetime; tests call
    get_settings.cache_clear() after changing the environment.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
