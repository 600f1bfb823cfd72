from __future__ import annotations

"""Logging helpers for densegraph."""

import logging
from typing import Optional

from .config import LoggingSettings, get_settings

ROOT_LOGGER_NAME = "densegraph"


def getLogger(name: str) -> logging.Logger:
    """Return a logger; module loggers live under the ``densegraph`` namespace."""
    return logging.getLogger(name)


def configure_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Apply LoggingSettings to the package logger.

    Installs a single stream handler; calling this repeatedly replaces the
    handler instead of stacking new ones.
    """
    if settings is None:
        settings = get_settings().logging

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(settings.level)

    for handler in list(logger.handlers):
        if getattr(handler, "_densegraph", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(settings.format))
    handler._densegraph = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
