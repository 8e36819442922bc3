"""Application settings using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8004
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./payment_lifecycle.db"

    # Payee integration service
    payee_service_url: str = "http://localhost:8010"
    payee_service_timeout: float = 10.0

    # Duplicate detection window, in days either side of the payment date
    duplicate_check_window_days: int = 3

    # Dates
    date_format: str = "%Y-%m-%d"
    timezone: str = "UTC"

    # CORS
    cors_origins: list[str] = ["http://localhost:4200", "http://localhost:3000"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
