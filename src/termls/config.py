"""
Configuration module for termls
"""
import os
from typing import Optional

from dotenv import load_dotenv, find_dotenv

# Color configuration
DEFAULT_LSCOLORS = 'exfxcxdxbxegedabagacad'
LSCOLORS_VAR = 'LSCOLORS'
LS_COLORS_VAR = 'LS_COLORS'

# Layout configuration
DEFAULT_TERMINAL_WIDTH = 80
GRID_SEPARATOR = '  '
COLUMNS_VAR = 'TERMLS_COLUMNS'

# Timestamps older than this (or further in the future than the slack) show the year
SIX_MONTHS_SECONDS = 182 * 24 * 60 * 60
FUTURE_SLACK_SECONDS = 5

# Account databases
PASSWD_FILE = '/etc/passwd'
GROUP_FILE = '/etc/group'

# Logging configuration
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s'
CONSOLE_LOG_FORMAT = '%(name)s: %(levelname)s: %(message)s'
LOG_LEVEL_VAR = 'TERMLS_LOG_LEVEL'
LOG_DIR_VAR = 'TERMLS_LOG_DIR'
DEFAULT_LOG_LEVEL = 'WARNING'  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


def load_environment() -> Optional[str]:
    """Load a .env file from the working directory tree, if there is one.

    Variables already present in the environment are never overridden.

    Returns:
        Path of the loaded .env file, or None when none was found
    """
    env_path = find_dotenv(usecwd=True)
    if not env_path:
        return None
    load_dotenv(env_path, override=False)
    return env_path


def get_color_specs():
    """Return the (LSCOLORS, LS_COLORS) pair, empty values mapped to None."""
    return (
        os.getenv(LSCOLORS_VAR) or None,
        os.getenv(LS_COLORS_VAR) or None,
    )


def get_log_level() -> str:
    return os.getenv(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL).upper()


def get_log_dir() -> Optional[str]:
    return os.getenv(LOG_DIR_VAR) or None


def get_columns_override() -> Optional[int]:
    """Terminal width forced through the environment, if any."""
    value = os.getenv(COLUMNS_VAR)
    if not value:
        return None
    try:
        columns = int(value)
    except ValueError:
        return None
    return columns if columns > 0 else None
