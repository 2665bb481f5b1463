"""
Logging configuration for scoper-excludes.

Configures logging based on environment variables:
- SCOPER_EXCLUDES_DEBUG: Enable debug logging (default: false)
"""

import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "scoper_excludes"


def setup_logging(debug: Optional[bool] = None) -> logging.Logger:
    """
    Configure the scoper_excludes logger.

    Args:
        debug: Enable debug level. Defaults to SCOPER_EXCLUDES_DEBUG env var.

    Returns:
        Root logger for scoper_excludes
    """
    if debug is None:
        debug = os.environ.get("SCOPER_EXCLUDES_DEBUG", "").lower() in ("true", "1", "yes")

    level = logging.DEBUG if debug else logging.WARNING

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    # stdout carries the JSON result, so logs go to stderr only
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "categorize", "parsing", "cli")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"{LOGGER_NAME}.{component}")
