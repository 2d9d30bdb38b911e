"""
Logging setup for command-line and server runs.

Library code only calls ``logging.getLogger(__name__)``; handlers are
attached here, to the ``bellowscfg`` namespace logger, by the entry
points.
"""

import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "bellowscfg"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _resolve_level(level: Union[int, str]) -> int:
    """Accept logging constants or names such as 'debug'; unknown names mean INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _handlers(log_file: Optional[str]) -> list[logging.Handler]:
    # stderr keeps JSON printed on stdout clean
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
    return handlers


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the package logger.

    Safe to call repeatedly: handlers from an earlier call are closed and
    replaced, so each CLI invocation in one process logs once.

    Args:
        level: Level constant or name, e.g. logging.DEBUG or "DEBUG"
        log_file: Path to append log records to

    Returns:
        The configured ``bellowscfg`` logger
    """
    level = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _handlers(log_file):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging configured at %s", logging.getLevelName(level))
    return logger
