# tests/utils_tests/test_logger.py
# This file is part of Lineage - A Data Lineage Library
#
# Test suite for the lineage logger

"""Test suite for the logger wrapper.

Covers level configuration for the command line, the message format and
the lineage-specific logging methods.
"""

import io
import logging

import pytest
from utils import LogLevel, configure_logging, get_logger, set_log_level
from utils.logger import LineageFormatter, LineageLogger


@pytest.fixture(autouse=True)
def restore_level():
    yield
    set_log_level(LogLevel.INFO)


def test_global_logger_is_shared():
    assert get_logger() is get_logger()


@pytest.mark.parametrize(
    "verbose, debug, expected",
    [
        (False, False, logging.WARNING),
        (True, False, logging.INFO),
        (False, True, logging.DEBUG),
        (True, True, logging.DEBUG),
    ],
)
def test_configure_logging(verbose, debug, expected):
    configure_logging(verbose=verbose, debug=debug)
    assert get_logger().logger.level == expected


def test_formatter_prefixes_all_but_info():
    """INFO lines are plain, other levels carry a prefix."""
    formatter = LineageFormatter()

    def record(level):
        return logging.LogRecord("lineage", level, __file__, 1, "message", None, None)

    assert formatter.format(record(logging.INFO)) == "message"
    assert formatter.format(record(logging.DEBUG)) == "[DEBUG] message"
    assert formatter.format(record(logging.ERROR)) == "[ERROR] message"


def test_logger_writes_to_given_stream():
    stream = io.StringIO()
    logger = LineageLogger("lineage.stream_test", stream=stream)
    logger.info("Condition 0: fulfilled")
    logger.debug("hidden at INFO level")
    assert stream.getvalue() == "Condition 0: fulfilled\n"


def test_specialized_methods_accept_rendered_arguments():
    set_log_level(LogLevel.DEBUG)
    logger = get_logger()
    logger.query_started("120", "width of !", "(1,)")
    logger.node_cached(3, "width of body[1]")
    logger.node_created("and", 4)
    logger.unresolved("120", "Nothing")
    logger.verdict(0, False)
