"""Logging configuration for the interpreter and its drivers."""
import logging
import os
import sys
from typing import Optional

from silence.config import get_log_level


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the command line driver.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to SILENCE_LOG_LEVEL.
        log_file: Optional path to log file. If None, logs go to stderr so
            they never mix with program output.
    """
    level = (level or get_log_level()).upper()
    numeric_level = getattr(logging, level, logging.WARNING)

    config = {
        'level': numeric_level,
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    }

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        config['filename'] = log_file
    else:
        config['stream'] = sys.stderr

    logging.basicConfig(**config)
    logging.getLogger(__name__).debug("Logging initialized at %s level", level)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for `name`, typically __name__ of the calling module."""
    return logging.getLogger(name)
