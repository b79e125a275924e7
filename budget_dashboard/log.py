"""Logging setup for the budget dashboard package."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

from . import config

LOG_FORMAT = '[%(asctime)s] <%(module)s> %(levelname)s:  %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'
PACKAGE_LOGGER = 'budget_dashboard'

_VALID_LEVELS = (
    logging.DEBUG,
    logging.INFO,
    logging.WARNING,
    logging.ERROR,
    logging.CRITICAL,
)


def set_logging_level(level: int) -> None:
    """
    Sets the logging level for the package logger.

    Args:
        level (int): One of the standard logging levels.
    """
    if not isinstance(level, int) or isinstance(level, bool):
        raise ValueError("Logging level must be an integer.")
    if level not in _VALID_LEVELS:
        raise ValueError('Invalid logging level. Use one of the standard logging levels, e.g., logging.DEBUG.')

    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Configures the package logger with a single stream handler.

    Calling it again replaces the handler rather than stacking a new one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if getattr(handler, '_budget_dashboard', False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    handler._budget_dashboard = True
    logger.addHandler(handler)

    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = _level_from_name(level)
    set_logging_level(level)
    return logger
