"""Logging configuration helpers.

The library is silent by default (NullHandler on the package logger).
Callers opt in:

    from histosketch_lite import logging_config
    logging_config.enable_console_logging("DEBUG")

or set HISTOSKETCH_LOG_LEVEL and call configure_from_env().
"""
from __future__ import annotations

import logging
import os
from typing import Literal

LOGGER_NAME = "histosketch_lite"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ENV_LEVEL = "HISTOSKETCH_LOG_LEVEL"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _get_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    """Remove and close every handler except the default NullHandler."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Attach a stderr handler to the package logger.

    Calling it again replaces the previous handler instead of stacking
    a second one.
    """
    _clear_handlers()
    logger = _get_logger()
    logger.setLevel(_get_level(level))

    handler = logging.StreamHandler()
    handler.setLevel(_get_level(level))
    handler.setFormatter(logging.Formatter(format, date_format))
    logger.addHandler(handler)
    return handler


def disable_logging() -> None:
    """Drop all handlers and go back to silent."""
    _clear_handlers()
    _get_logger().setLevel(logging.NOTSET)


def configure_from_env() -> logging.StreamHandler | None:
    """Enable console logging if HISTOSKETCH_LOG_LEVEL is set."""
    level = os.environ.get(ENV_LEVEL)
    if not level:
        return None
    return enable_console_logging(level)
