"""
Logging utility for termls
"""

import logging
import datetime
from pathlib import Path

from ..config import (
    LOG_FORMAT,
    CONSOLE_LOG_FORMAT,
    get_log_level,
    get_log_dir,
)

ROOT_LOGGER_NAME = 'termls'

_configured = False


def setup_logging(level: str = None, log_dir: str = None) -> logging.Logger:
    """Attach the console (and optional file) handlers to the termls logger.

    Args:
        level: Console log level name. Defaults to TERMLS_LOG_LEVEL.
        log_dir: Directory for a timestamped log file. Defaults to TERMLS_LOG_DIR;
            no file is written when neither is set.

    Returns:
        The configured package logger
    """
    global _configured

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level or get_log_level(), logging.WARNING))
    console_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))
    logger.addHandler(console_handler)

    log_dir = log_dir or get_log_dir()
    if log_dir:
        logs_path = Path(log_dir)
        logs_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.datetime.now().strftime('%Y%m%d_%H%M%S')
        log_file = logs_path / f"termls_{timestamp}.log"
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
        logger.debug(f"Logger initialized. Log file: {log_file}")

    logger.propagate = False
    _configured = True
    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Get a logger under the termls namespace, configuring handlers on first use."""
    if not _configured:
        setup_logging()
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
