"""Tests for console logging setup."""

import logging
import sys

from subatomic_tokens.core.logging import LOGGER_NAME, ConsoleFormatter, setup_logging


def make_record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord(LOGGER_NAME, level, __file__, 1, message, None, None)


def test_setup_logging_levels():
    logger = setup_logging(verbose=False)
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert logger.propagate is False

    assert setup_logging(verbose=True).level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_handler_writes_to_stderr():
    handler = setup_logging().handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr


def test_info_has_no_level_name():
    output = ConsoleFormatter().format(make_record(logging.INFO, "Building VANILLA theme"))
    assert "[tokens]" in output
    assert output.endswith("Building VANILLA theme")
    assert "INFO" not in output


def test_warning_shows_level_name():
    output = ConsoleFormatter().format(make_record(logging.WARNING, "Empty settings file"))
    assert "WARNING" in output
    assert output.endswith("Empty settings file")
