"""Package logging.

One `dataloader` logger owns the stderr handler and the level. Module loggers
(`dataloader.core.dispatcher`, `dataloader.libs.loader.base_loader`, ...) carry
no handlers of their own and inherit both, so `configure_logging` changes the
whole package at once. The level is process-wide.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "dataloader"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.propagate = False

    if logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)

    if not any(getattr(h, "_dataloader_stderr", False) for h in logger.handlers):
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
        handler._dataloader_stderr = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Set the package log level (e.g. "INFO") and return the package logger."""

    logger = _package_logger()
    if level is not None:
        logger.setLevel(level.upper())
    return logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Return a logger under the `dataloader` namespace.

    Names outside the package are nested under it, so every diagnostic goes
    through the package handler.
    """

    package = _package_logger()
    if name == PACKAGE_LOGGER:
        return package
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
