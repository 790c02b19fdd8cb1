"""Logging setup for the notifier."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "ghreviews"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the `ghreviews` logger to write diagnostics to stderr."""
    log_level = getattr(logging, (level or "WARNING").upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    return logger
