"""Tests for the package logging setup."""

import logging

from econlab.log import LOGGER_NAME, configure_logging


def test_configure_logging_is_idempotent():
    logger = configure_logging("debug")
    n = len(logger.handlers)
    configure_logging(logging.WARNING)
    assert len(logger.handlers) == n
    assert logger.level == logging.WARNING
    assert logger is logging.getLogger(LOGGER_NAME)
