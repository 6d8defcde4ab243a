"""Application configuration using Pydantic settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Book Exchange Service"
    debug: bool = False

    # Storage
    storage_backend: Literal["memory", "file", "redis"] = "file"
    storage_key: str = "bookExchange_books"
    data_dir: Path = Path("data")
    redis_url: str = "redis://localhost:6379/0"

    # Catalog
    seed_samples: bool = True
    export_dir: Path = Path("exports")

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
