"""
Configuration settings for the acceptance harness.

Defaults target the public Hacker News API. Every field can be overridden via
an ``HN_``-prefixed environment variable or a ``.env`` file.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Acceptance harness configuration settings.

    All settings can be overridden via environment variables.
    """

    # Upstream API Configuration
    api_base_url: str = Field(
        default="https://hacker-news.firebaseio.com/v0",
        description="Base URL for the Hacker News API"
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for a single HTTP request"
    )

    # Retry Configuration
    retry_max_attempts: int = Field(
        default=3,
        ge=1,
        description="Maximum attempts per request before giving up"
    )
    retry_backoff_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Backoff unit; attempt N waits N times this value"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="text",
        description="Logging format (json or text)"
    )

    model_config = SettingsConfigDict(
        env_prefix="HN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Configured settings instance
    """
    return Settings()
