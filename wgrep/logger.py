"""Logging configuration for wgrep.

Everything goes to stderr: stdout is reserved for query results so the
output can be piped.
"""

import logging
import sys
from typing import Optional, Union

from wgrep.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_NAME = "wgrep"


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Configure the package logger with a single stderr handler.

    Args:
        level: Logging level; defaults to ``settings.log_level``

    Returns:
        The configured ``wgrep`` logger
    """
    logger = logging.getLogger(_ROOT_NAME)
    logger.setLevel(level if level is not None else settings.log_level)

    # Re-bind on every call; sys.stderr may have been swapped since the last run
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    # Don't double-log through the root logger
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the ``wgrep`` logger for module *name*."""
    if not name.startswith(_ROOT_NAME):
        name = f"{_ROOT_NAME}.{name}"
    return logging.getLogger(name)
