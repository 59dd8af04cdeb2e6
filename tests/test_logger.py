"""Tests for the logging setup."""

import logging

from mssql_to_ts.logger import logger, setup_logger


def test_setup_logger_applies_level_override():
    """The console handler takes the requested level."""
    assert setup_logger("debug") is logger

    assert logging.getHandlerByName("stderr").level == logging.DEBUG
    assert logger.propagate is False


def test_setup_logger_default_level():
    setup_logger()

    assert logging.getHandlerByName("stderr").level == logging.INFO
