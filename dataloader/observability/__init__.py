"""Observability helpers (logging)."""

from dataloader.observability.logger import PACKAGE_LOGGER, configure_logging, get_logger

__all__ = ["PACKAGE_LOGGER", "configure_logging", "get_logger"]
