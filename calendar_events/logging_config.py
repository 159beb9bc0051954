"""Logging setup for applications embedding calendar-events."""

import logging
from typing import Optional

from calendar_events.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the ``calendar_events`` logger tree.

    Args:
        level: Level name; defaults to Settings.log_level

    Returns:
        The package root logger
    """
    global _handler

    level = level or get_settings().log_level

    logger = logging.getLogger("calendar_events")
    logger.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Calling twice must not duplicate output
    if _handler not in logger.handlers:
        logger.addHandler(_handler)

    return logger
