# -*- coding: utf-8 -*-
"""
Logging configuration.

Every module logs through a child of the "cadastro" logger. Levels, the
console handler and the rotating log file all come from Config, so they can
be tuned from .env (LOG_LEVEL, LOG_CONSOLE_LEVEL, LOG_TO_CONSOLE, LOGS_DIR).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

APP_LOGGER_NAME = "cadastro"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def _level(name: str, default: int) -> int:
    """Resolve a level name from Config; unknown names fall back to default."""
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_logger(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the application logger from Config.

    Args:
        level: Overrides Config.LOG_LEVEL for the file handler and the logger
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    file_level = _level(level or Config.LOG_LEVEL, logging.DEBUG)
    console_level = _level(Config.LOG_CONSOLE_LEVEL, logging.INFO)

    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(min(file_level, console_level) if Config.LOG_TO_CONSOLE else file_level)
    logger.propagate = False

    # setup_logger may run more than once; handlers are replaced, not stacked
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(Config.LOG_FORMAT, datefmt=Config.LOG_DATE_FORMAT)

    file_handler = RotatingFileHandler(
        Config.LOG_PATH,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if Config.LOG_TO_CONSOLE:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(message)s"))
        logger.addHandler(console_handler)

    _logger = logger
    logger.debug(f"Logging to {Config.LOG_PATH} (file={logging.getLevelName(file_level)})")
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
