"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: FILE2DDL_
    """

    model_config = SettingsConfigDict(
        env_prefix="FILE2DDL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Analysis defaults (CLI flags take precedence)
    default_dialect: str = Field(
        default="postgresql",
        description="Database flavor used when --flavor is not given",
    )
    default_quote_mode: str = Field(
        default="none",
        description="Quote handling used when --quotes is not given: none, single or double",
    )

    # Configuration paths
    dialects_path: Path | None = Field(
        default=None,
        description="Extra directory of <dialect>.yaml type catalogs",
    )

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
