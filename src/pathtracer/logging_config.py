# logging_config.py
"""Logging configuration for the path tracer."""
import logging
from typing import Optional

from pathtracer.config import LOG_FORMAT, LOG_LEVEL

ROOT_LOGGER = "pathtracer"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Set up console logging for the pathtracer package.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        The configured package logger
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(numeric_level)

    # Calling this twice must not duplicate output.
    if not any(getattr(h, "_pathtracer", False) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler._pathtracer = True
        logger.addHandler(console_handler)

    for handler in logger.handlers:
        handler.setLevel(numeric_level)

    return logger
