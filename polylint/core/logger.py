"""
Logger - Handler setup for the polylint logger hierarchy.

Modules log through `logging.getLogger(__name__)`; this only decides where
those records go and at which level.
"""

import logging
import sys
from typing import Optional

from .config import settings


LOGGER_NAME = "polylint"
LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stdout handler to the package logger.

    Safe to call more than once; only the level changes on later calls.

    Args:
        level: Level name, defaults to settings.LOG_LEVEL

    Returns:
        The configured "polylint" logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
