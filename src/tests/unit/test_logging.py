"""Tests for logging configuration."""

import logging
import logging.handlers

from unittest.mock import MagicMock

import structlog

from site_search.config.logging import configure_logging, get_logger, log_performance


def test_configure_logging_basic():
    """Test basic logging configuration."""
    logger = configure_logging(level="DEBUG")
    assert logger is not None


def test_configure_logging_with_file(tmp_path):
    """Test logging configuration with file output."""
    log_file = tmp_path / "logs" / "search.log"

    logger = configure_logging(level="INFO", log_file=str(log_file), json_logs=True)
    try:
        logger.info("Test message", key="value")

        assert log_file.exists()
        assert "Test message" in log_file.read_text()
    finally:
        root = logging.getLogger()
        for handler in list(root.handlers):
            if isinstance(handler, logging.handlers.RotatingFileHandler):
                root.removeHandler(handler)
                handler.close()


def test_get_logger_with_context():
    """Test logger creation with initial context."""
    logger = get_logger(__name__, component="test")
    assert logger is not None


def test_log_performance():
    """Test performance logging function."""
    logger = get_logger(__name__)
    # Should not raise an exception
    log_performance(logger, "search", 1.5, query="epilepsy")


def test_log_performance_emits_debug_metric():
    """Test performance metrics are logged at debug level."""
    configure_logging(level="INFO")
    logger = MagicMock()

    log_performance(logger, "search", 2.0, query="epilepsy")

    logger.debug.assert_called_once_with(
        "Performance metric",
        operation="search",
        duration_ms=2.0,
        metric_type="performance",
        query="epilepsy",
    )


def test_log_performance_disabled():
    """Test performance logging can be switched off."""
    configure_logging(level="INFO", enable_performance_logging=False)
    try:
        logger = MagicMock()

        log_performance(logger, "search", 2.0)

        logger.debug.assert_not_called()
    finally:
        configure_logging(level="INFO", enable_performance_logging=True)


def teardown_module(module):
    structlog.reset_defaults()
