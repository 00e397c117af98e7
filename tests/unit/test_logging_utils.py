#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for logging configuration."""

import io
import logging

import pytest

from textiler.logging_utils import PACKAGE_LOGGER_NAME, configure_logging, resolve_log_level


@pytest.mark.unit
class TestResolveLogLevel:
    """Test translation of level names."""

    @pytest.mark.parametrize("name,level", [("debug", logging.DEBUG), ("INFO", logging.INFO), (40, 40)])
    def test_known_levels(self, name, level):
        """Names are case-insensitive and numbers pass through."""
        assert resolve_log_level(name) == level

    def test_unknown_name(self):
        """Unknown names fall back to WARNING."""
        assert resolve_log_level("chatty") == logging.WARNING

    def test_trace_mode(self):
        """Trace mode always means DEBUG."""
        assert resolve_log_level("ERROR", trace_mode=True) == logging.DEBUG


@pytest.mark.unit
class TestConfigureLogging:
    """Test handler setup on the package logger."""

    def test_console_handler(self):
        """Records from package modules reach the console stream."""
        stream = io.StringIO()
        configure_logging("INFO", stream=stream)

        logging.getLogger("textiler.parsers.textile").info("hello")
        logging.getLogger("textiler.parsers.textile").debug("hidden")

        assert stream.getvalue() == "INFO: hello\n"

    def test_trace_format(self):
        """Trace mode includes the logger name."""
        stream = io.StringIO()
        configure_logging("WARNING", trace_mode=True, stream=stream)

        logging.getLogger("textiler.api").debug("details")

        assert "[DEBUG] [textiler.api] details" in stream.getvalue()

    def test_reconfigure_replaces_handlers(self):
        """Configuring twice does not duplicate handlers."""
        configure_logging("INFO", stream=io.StringIO())
        package_logger = configure_logging("INFO", stream=io.StringIO())

        assert len(package_logger.handlers) == 1
        assert package_logger.name == PACKAGE_LOGGER_NAME

    def test_log_file(self, tmp_path):
        """A log file receives the same records."""
        log_file = tmp_path / "textiler.log"
        configure_logging("INFO", log_file=str(log_file), stream=io.StringIO())

        logging.getLogger("textiler").info("to file")
        for handler in logging.getLogger("textiler").handlers:
            handler.flush()

        assert "to file" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, tmp_path):
        """A log file that cannot be opened is reported, not raised."""
        stream = io.StringIO()
        package_logger = configure_logging("INFO", log_file=str(tmp_path / "missing" / "x.log"), stream=stream)

        assert len(package_logger.handlers) == 1
        assert "Could not create log file" in stream.getvalue()
