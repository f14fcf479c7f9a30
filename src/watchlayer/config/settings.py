"""
Application settings using Pydantic.

Provides environment-based configuration loading with WATCHLAYER_ prefix.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # AWS
    aws_region: str = "us-east-1"
    aws_endpoint_url: str | None = None
    aws_profile: str | None = None

    # Discovery
    resource_kind: str = "sqs_queue"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "WATCHLAYER_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
