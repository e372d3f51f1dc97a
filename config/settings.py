"""Application settings and configuration."""

from pathlib import Path
from dataclasses import dataclass, field
import os
from dotenv import load_dotenv

from config.constants import DEFAULT_YEAR_WINDOW

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent


@dataclass
class DatabaseConfig:
    """Database configuration settings."""

    path: Path = field(
        default_factory=lambda: Path(
            os.getenv("FILTERSET_DB_PATH", str(PROJECT_ROOT / "data" / "filterset.duckdb"))
        )
    )
    max_rows: int = field(
        default_factory=lambda: int(os.getenv("FILTERSET_MAX_ROWS", "1000"))
    )


@dataclass
class DateConfig:
    """Date input configuration.

    Dates entered with two-digit years fall inside a 100-year window that
    ends ``year_window`` years after the current year.
    """

    year_window: int = field(
        default_factory=lambda: int(os.getenv("FILTERSET_YEAR_WINDOW", str(DEFAULT_YEAR_WINDOW)))
    )


@dataclass
class AppConfig:
    """Application configuration settings."""

    name: str = field(default_factory=lambda: os.getenv("APP_NAME", "filterset"))
    version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("FILTERSET_LOG_LEVEL", "INFO"))


@dataclass
class Config:
    """Main configuration container."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    dates: DateConfig = field(default_factory=DateConfig)
    app: AppConfig = field(default_factory=AppConfig)

    def ensure_directories(self) -> None:
        """Create necessary directories if they don't exist."""
        self.database.path.parent.mkdir(parents=True, exist_ok=True)


# Global config instance
config = Config()
