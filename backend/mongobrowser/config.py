"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Connection targets
    uri_scheme: str = "mongodb"
    default_port: int = 27017
    connect_timeout_ms: int = 10000
    server_selection_timeout_ms: int = 10000

    # Pagination defaults for untrusted limit/offset values
    default_page_limit: int = 100
    default_page_offset: int = 0

    # HTTP
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
