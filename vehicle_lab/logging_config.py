"""Centralized logging configuration."""

from __future__ import annotations

import logging
import os
import sys

from pythonjsonlogger import jsonlogger

LOGGER_NAME: str = "vehicle_lab"
_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str | None = None,
    format_type: str = "text",
    log_file: str | None = None,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Level name.  Falls back to the ``LOG_LEVEL`` environment
            variable, then ``WARNING``.
        format_type: ``"json"`` for structured output, anything else for
            plain text.
        log_file: Optional file to log to instead of stderr.

    Returns:
        The configured ``vehicle_lab`` logger.

    Raises:
        ValueError: If the level name is not a logging level.
    """
    level = level or os.getenv("LOG_LEVEL", "WARNING")
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    # Replace handlers from earlier calls
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(sys.stderr)

    if format_type == "json":
        formatter: logging.Formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt=_DATE_FORMAT,
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt=_DATE_FORMAT,
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
