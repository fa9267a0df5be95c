"""
Logging setup
Attaches a single stream handler to the package logger
"""

import logging

from isd.config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings: Settings) -> logging.Logger:
    """
    Configure the ``isd`` logger from settings

    Safe to call more than once: the handler is attached only the first
    time, later calls just update the level.
    """
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {settings.LOG_LEVEL}")

    logger = logging.getLogger("isd")

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(level)
    return logger
