"""
Application settings.

Values come from environment variables or a ``.env`` file in the working
directory. Provider keys default to empty strings so the kiosk still starts
(and serves sentinel values) when they are missing.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the kiosk feed."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "kiosk-board"
    app_env: str = "local"
    debug: bool = False

    # Provider secrets
    weather_service_key: str = Field(default="", description="data.go.kr service key")
    neis_api_key: str = Field(default="", description="NEIS open API key")

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=5000, ge=1, le=65535)

    # Deployment location
    timezone: str = "Asia/Seoul"
    grid_nx: int = 73
    grid_ny: int = 103
    office_code: str = "Q10"
    school_code: str = "8490058"

    # Caching / upstream bounds
    cache_ttl_seconds: int = Field(default=600, gt=0)
    request_timeout: float = Field(default=10.0, gt=0)

    # Static assets
    photos_dir: Path = Path("photos")
    public_dir: Path = Path("public")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
