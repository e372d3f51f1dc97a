"""FastAPI application settings."""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache
import os


def _parse_cors_origins() -> list[str]:
    """Parse CORS origins from environment variable."""
    cors_env = os.getenv("FILTERSET_CORS_ORIGINS", "")
    if cors_env:
        return [origin.strip() for origin in cors_env.split(",")]
    # Default development origins
    return ["http://localhost:3000", "http://localhost:5173"]


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # App info
    app_name: str = "Filter Set API"
    version: str = "1.0.0"
    debug: bool = False

    # Database; None keeps the demo customers in memory
    database_path: Optional[Path] = None

    # CORS - configurable via environment variable
    cors_origins: list[str] = _parse_cors_origins()

    # Result limits
    default_limit: int = 50
    max_limit: int = 1000

    class Config:
        env_prefix = "FILTERSET_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
