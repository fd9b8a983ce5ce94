"""Logging setup for the chart core packages."""

from __future__ import annotations

import logging
import sys

from . import settings

PACKAGE_LOGGERS = ("analysis", "core")


def setup_logging(level: int | str | None = None) -> None:
    """Attach a single stdout handler to the package loggers.

    Args:
        level: Logging level name or number. Defaults to `settings.LOG_LEVEL`.

    Calling this more than once replaces the previous handlers instead of
    duplicating output. Records do not propagate to the root logger, so a
    host-configured root handler does not print them a second time.
    """

    resolved = level if level is not None else settings.LOG_LEVEL
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(resolved)
        if logger.hasHandlers():
            logger.handlers.clear()
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(resolved)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
