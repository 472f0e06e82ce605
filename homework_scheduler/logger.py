"""Logging setup for the service."""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "homework_scheduler"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stdout handler to the package logger (only once)."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper())

    # Prevent duplicate handlers if called multiple times
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    return logger
