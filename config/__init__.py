"""Configuration module for filterset."""

from .settings import config, DatabaseConfig, DateConfig, AppConfig, Config
from .constants import (
    DEFAULT_YEAR_WINDOW,
    DATE_FORMATS,
    CONDITION_SEPARATOR,
    MAX_SELECT_SIZE,
)

__all__ = [
    # Settings
    "config",
    "DatabaseConfig",
    "DateConfig",
    "AppConfig",
    "Config",
    # Constants
    "DEFAULT_YEAR_WINDOW",
    "DATE_FORMATS",
    "CONDITION_SEPARATOR",
    "MAX_SELECT_SIZE",
]
