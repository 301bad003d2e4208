"""Logging configuration for the path tracer."""

import logging
import sys
from typing import Optional

from pathtracer.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(name: str = "pathtracer", level: Optional[str] = None) -> logging.Logger:
    """
    Set up logging configuration.

    Records go to stderr only; stdout may be carrying the image stream.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    return logger


__all__ = ["setup_logging"]
