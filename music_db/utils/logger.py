"""
Logger utility for consistent logging across MusicDB.

This module provides a standardized way to create and configure loggers
throughout the application, ensuring consistent log formatting and behavior.

Features:
- Consistent log format across all modules
- Configurable log level from settings
- Stream handler to stdout
- Rotating file handler for errors
- Prevents duplicate handlers when called multiple times
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from music_db.utils.config import get_settings

# Default log format
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
VERBOSE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _level_from_settings() -> int:
    return getattr(logging, get_settings().LOG_LEVEL.upper(), logging.INFO)


def setup_logging(log_to_file: bool = True) -> logging.Logger:
    """
    Configure global logging for the application.

    Args:
        log_to_file: Also write errors to a rotating file under LOG_DIR

    Returns:
        logging.Logger: Application logger
    """
    settings = get_settings()
    log_level = _level_from_settings()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates when reloading
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    standard_formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(standard_formatter)
    console_handler.setLevel(logging.DEBUG if settings.DEBUG else log_level)
    root_logger.addHandler(console_handler)

    if log_to_file:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)

        error_file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "error.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5
        )
        error_file_handler.setLevel(logging.ERROR)
        error_file_handler.setFormatter(logging.Formatter(VERBOSE_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        root_logger.addHandler(error_file_handler)

    # SQL statements only show up in debug mode
    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )
    logging.getLogger('httpx').setLevel(logging.WARNING)

    logger = logging.getLogger('music_db')
    logger.info(f"Logging initialized with level {logging.getLevelName(log_level)}")
    return logger


def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger instance with consistent formatting.

    A stdout handler is attached only when neither this logger nor the root
    logger has handlers yet, so repeated calls never duplicate output.

    Args:
        name: Logger name, normally ``__name__``
        level: Logging level; defaults to LOG_LEVEL from settings

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name or 'music_db')
    logger.setLevel(level if level is not None else _level_from_settings())

    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        logger.addHandler(handler)

    return logger
