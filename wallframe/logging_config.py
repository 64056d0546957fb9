"""Logging setup for the wallframe package."""

from __future__ import annotations
import logging
import sys

LOGGER_NAME = "wallframe"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler: logging.Handler | None = None


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a stdout handler to the package logger once and set its level."""
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)

    return logger
