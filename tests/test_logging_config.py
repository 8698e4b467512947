"""Tests for the package logger setup."""

import logging

import pytest

from spacecurves.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("spacecurves")
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_setup_logging_writes_file(tmp_path, package_logger):
    log_file = tmp_path / "run.log"
    setup_logging(level=logging.INFO, log_file=str(log_file))

    assert package_logger.level == logging.INFO
    assert "spacecurves - INFO - Logging initialized." in log_file.read_text(encoding="utf-8")


def test_setup_logging_does_not_duplicate_handlers(package_logger):
    setup_logging()
    setup_logging()
    assert len(package_logger.handlers) == 1
