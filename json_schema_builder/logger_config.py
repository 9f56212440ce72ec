from __future__ import annotations

import logging
import sys

from .config import LOG_LEVEL

LOGGER_NAME = "json_schema_builder"


def setup_logging() -> logging.Logger:
    """Configure the package logger once and return it."""
    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(LOG_LEVEL)

    # Re-running the app module must not stack handlers.
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    return root_logger
