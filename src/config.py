"""Application configuration using Pydantic settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Book API"
    app_description: str = "CRUD API for books"
    app_version: str = "1.0.0"
    debug: bool = False

    # Routing
    api_prefix: str = "/api"
    docs_url: str = "/api-docs"

    # Server
    host: str = "0.0.0.0"
    port: int = 2500
    workers: int = 1


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
