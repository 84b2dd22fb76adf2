"""Tests for the logger helper."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from dataloader.observability.logger import PACKAGE_LOGGER, configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_level() -> Iterator[None]:
    yield
    configure_logging("INFO")


def test_package_logger_owns_stderr_handler() -> None:
    package = get_logger()

    assert package.name == PACKAGE_LOGGER
    assert package.propagate is False
    assert package.level == logging.INFO
    assert sum(isinstance(h, logging.StreamHandler) for h in package.handlers) == 1


def test_module_loggers_inherit_from_package() -> None:
    logger = get_logger("dataloader.test.child")

    assert logger.handlers == []
    assert logger.propagate is True
    assert logger.level == logging.NOTSET
    assert logger.getEffectiveLevel() == logging.INFO


def test_get_logger_is_idempotent() -> None:
    first = get_logger("dataloader.test.idempotent")
    second = get_logger("dataloader.test.idempotent")

    assert first is second
    assert len(get_logger().handlers) == 1


def test_outside_names_are_nested_under_package() -> None:
    assert get_logger("scripts.report").name == "dataloader.scripts.report"


def test_configure_logging_sets_package_level() -> None:
    configure_logging("debug")

    assert get_logger().level == logging.DEBUG
    assert get_logger("dataloader.test.level").getEffectiveLevel() == logging.DEBUG


def test_configure_logging_without_level_keeps_current() -> None:
    configure_logging("WARNING")

    configure_logging()

    assert get_logger().level == logging.WARNING
