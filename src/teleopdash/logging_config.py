"""
Logging Configuration
Sets up the package logger for the dashboard.

The level and an optional log file can be chosen without touching code:
    TELEOPDASH_LOG_LEVEL=debug     (any logging level name, default INFO)
    TELEOPDASH_LOG_FILE=nav.log    (also write the log to this file)
"""
import logging
import os
import sys
from typing import Optional

from teleopdash.config import LOG_FILE_ENV, LOG_LEVEL_ENV

PACKAGE_LOGGER = "teleopdash"


def level_from_name(name: Optional[str], default: int = logging.INFO) -> int:
    """Translate a level name such as 'debug' into a logging constant."""
    if not name:
        return default
    value = logging.getLevelName(name.strip().upper())
    return value if isinstance(value, int) else default


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'teleopdash' logger.

    Args:
        level: Logging level. None reads TELEOPDASH_LOG_LEVEL.
        log_file: Path to also write the log to. None reads TELEOPDASH_LOG_FILE.

    Returns:
        The configured package logger.
    """
    env_level = os.environ.get(LOG_LEVEL_ENV)
    if level is None:
        level = level_from_name(env_level)
    if log_file is None:
        log_file = os.environ.get(LOG_FILE_ENV) or None

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # setup may run more than once per process (tests, restarts)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if env_level and level_from_name(env_level, default=-1) == -1:
        logger.warning(f"Unknown {LOG_LEVEL_ENV} value '{env_level}', using {logging.getLevelName(level)}.")
    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
