"""Tests for logging configuration."""

import logging

import pytest

from nutrition_label_parser.app_logging import configure_logging, resolve_level


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("nutrition_label_parser")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging(logging.DEBUG)
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_configure_logging_accepts_level_names() -> None:
    logger = logging.getLogger("nutrition_label_parser")

    configure_logging("warning")

    assert logger.level == logging.WARNING


def test_configure_logging_sets_module_overrides() -> None:
    module_logger = logging.getLogger("nutrition_label_parser.services.label_parser")

    configure_logging("INFO", {"services.label_parser": "debug"})

    assert logging.getLogger("nutrition_label_parser").level == logging.INFO
    assert module_logger.level == logging.DEBUG
    module_logger.setLevel(logging.NOTSET)


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="verbose"):
        configure_logging("verbose")


def test_resolve_level_passes_numbers_through() -> None:
    assert resolve_level(15) == 15
    assert resolve_level(" Error ") == logging.ERROR
