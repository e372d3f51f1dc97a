"""Logging configuration for filterset.

All loggers live under the ``filterset`` namespace, so one call to
``setup_logging`` configures the library, the API and the scripts.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

ROOT_LOGGER = "filterset"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Default log file path
DEFAULT_LOG_FILE = Path(__file__).parent.parent / "logs" / f"filterset_{datetime.now().strftime('%Y%m%d')}.log"


def _level(log_level: Optional[str]) -> int:
    if log_level is None:
        from config.settings import config
        log_level = config.app.log_level
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return level


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure the ``filterset`` logger.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Defaults to
            ``FILTERSET_LOG_LEVEL``.
        log_file: Optional path to log file
        log_to_console: Whether to also log to stdout

    Returns:
        The configured ``filterset`` logger.
    """
    level = _level(log_level)
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    # Replace handlers from an earlier call
    logger.handlers.clear()

    handlers = []
    if log_to_console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Logger named ``filterset.<name>`` (or the root ``filterset`` logger)."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
