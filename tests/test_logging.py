"""Tests for logging utilities."""

import logging
import math
from io import StringIO

import pytest

from dfmin import brent_search, debug_context, golden_section_search, nelder_mead, trace
from dfmin.logging import configure_logging, get_logger, set_log_level


@pytest.fixture
def captured_log():
    """Route every dfmin logger into a buffer for the duration of a test."""
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    try:
        yield stream
    finally:
        configure_logging(level=logging.WARNING)


def test_get_logger_returns_logger():
    """Test that get_logger returns a namespaced logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "dfmin.test_module"


def test_get_logger_keeps_package_names():
    assert get_logger("dfmin.brent").name == "dfmin.brent"
    assert get_logger().name == "dfmin"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_different_modules():
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_logger_does_not_propagate():
    assert get_logger("test_module").propagate is False


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging_custom_format(captured_log):
    configure_logging(level=logging.INFO, format_string="%(levelname)s|%(message)s", stream=captured_log)
    get_logger("test_module").info("hello")
    assert "INFO|hello" in captured_log.getvalue()


def test_search_logs_convergence(captured_log):
    golden_section_search(math.cos, (0.01, 1.0))
    assert "golden_section_search converged" in captured_log.getvalue()


def test_search_logs_iteration_cap(captured_log):
    brent_search(math.cos, (0.01, 1.0), max_iter=2)
    assert "stopped at iteration cap 2" in captured_log.getvalue()


def test_per_iteration_trace_only_in_debug_mode(captured_log):
    with debug_context(False):
        brent_search(math.cos, (0.01, 1.0))
    assert "brent iter" not in captured_log.getvalue()

    with debug_context(True):
        brent_search(math.cos, (0.01, 1.0))
    assert "brent iter 1:" in captured_log.getvalue()


def test_trace_helper_respects_debug_mode(captured_log):
    logger = get_logger("dfmin.simplex")
    with debug_context(False):
        trace(logger, "step %d", 1)
    assert "step 1" not in captured_log.getvalue()

    with debug_context(True):
        trace(logger, "step %d", 2)
    assert "[DEBUG] dfmin.simplex: step 2" in captured_log.getvalue()


def test_simplex_restart_is_traced(captured_log):
    with debug_context(True):
        nelder_mead(lambda p: float(p @ p), [1.0, 1.0])
    assert "nelder_mead restart at iter" in captured_log.getvalue()
