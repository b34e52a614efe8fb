"""Logging setup for the selectorkit command line.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
are attached here, by the application entry point.
"""

from __future__ import annotations

import logging

from selectorkit.config import Settings

PROJECT_LOGGER = "selectorkit"


class _SelectorkitHandler(logging.StreamHandler):
    """Marker type so repeated configuration replaces our own handler."""


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach a stderr handler to the ``selectorkit`` logger.

    Raises ValueError for an unknown level name.
    """
    settings = settings or Settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.log_level!r}")

    logger = logging.getLogger(PROJECT_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, _SelectorkitHandler):
            logger.removeHandler(handler)

    handler = _SelectorkitHandler()
    handler.setFormatter(logging.Formatter(settings.log_format))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
