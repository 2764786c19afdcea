"""
Logging utility for histstats
"""

import logging
import datetime
from pathlib import Path
from typing import Optional

from ..config import LOG_DIR, LOG_FORMAT, LOG_LEVEL

ROOT_LOGGER_NAME = 'histstats'

def setup_logger(log_dir: Optional[str] = LOG_DIR, level: str = LOG_LEVEL) -> logging.Logger:
    """Set up and return the package logger."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # Create console handler
    console_handler = logging.StreamHandler()
    try:
        console_handler.setLevel(level.upper())
    except (ValueError, TypeError, AttributeError):
        console_handler.setLevel(logging.WARNING)
        bad_level = level
    else:
        bad_level = None
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)

    if bad_level is not None:
        logger.warning(f"Unknown log level {bad_level!r}, using WARNING")

    # Create file handler
    if log_dir:
        logs_dir = Path(log_dir)
        timestamp = datetime.datetime.now().strftime('%Y%m%d_%H%M%S')
        log_file = logs_dir / f"histstats_{timestamp}.log"
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
        except OSError as e:
            logger.warning(f"File logging disabled, cannot write to {logs_dir}: {e}")
            return logger
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
        logger.debug(f"Logger initialized. Log file: {log_file}")

    return logger

# Global logger instance
_logger = None

def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger under the package namespace, configuring it on first use"""
    global _logger
    if _logger is None:
        _logger = setup_logger()
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return _logger.getChild(name)
