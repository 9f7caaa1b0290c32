"""
Library settings using Pydantic Settings.

Loads configuration from environment variables with type validation
and default values. Settings are immutable once loaded.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    Use get_settings() to access the singleton instance.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the settings singleton.

    Uses lru_cache so settings are only loaded once.

    Returns:
        Settings: The settings instance.
    """
    return Settings()


# Convenience export for direct import
settings = get_settings()
