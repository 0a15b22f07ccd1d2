"""
Logging configuration for the transitloom package.

Every module gets its logger from :func:`get_logger`, so all of them share
the same format and honor the same level switch.
"""

import logging
import os
import sys

# Default logging level - Debug messages are suppressed by default
DEFAULT_LOG_LEVEL = logging.WARNING

ROOT_LOGGER_NAME = "transitloom"

FORMATTER = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
)

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger for the given name.

    Args:
        name: Name for the logger, typically __name__ of the calling module

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure the logger if it hasn't been already
    if not logger.handlers:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        if root_logger.level != logging.NOTSET:
            log_level = root_logger.level
        else:
            log_level = _get_log_level()
        logger.setLevel(log_level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(FORMATTER)
        logger.addHandler(handler)
        # The handler above already prints; don't print twice via the root logger
        logger.propagate = False

    return logger


def _get_log_level() -> int:
    """
    Get the logging level from the TRANSITLOOM_LOG_LEVEL environment variable.

    Returns:
        The appropriate logging level as an int
    """
    log_level_str = os.environ.get("TRANSITLOOM_LOG_LEVEL", "").upper()
    return _LEVELS.get(log_level_str, DEFAULT_LOG_LEVEL)


def set_log_level(level: int) -> None:
    """
    Set the logging level for all transitloom loggers.

    Args:
        level: The logging level to set (e.g., logging.DEBUG)
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    prefix = ROOT_LOGGER_NAME + "."
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith(prefix) and isinstance(logger, logging.Logger):
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)
