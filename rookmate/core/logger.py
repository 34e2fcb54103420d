"""Logging setup. Modules just call logging.getLogger(__name__); the driver decides where it goes."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the package logger (stdout is reserved for the board / menu)."""
    logger = logging.getLogger("rookmate")
    logger.setLevel(getattr(logging, level.upper()))

    # avoid duplicate handlers when the menu starts several games in one process
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
