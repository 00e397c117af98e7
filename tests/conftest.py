"""Pytest configuration and shared fixtures for the textiler test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Generator

import pytest
from hypothesis import Phase, Verbosity, settings

from textiler.logging_utils import PACKAGE_LOGGER_NAME
from textiler.options import TextileOptions
from textiler.parsers.textile import TextileParser

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo handler changes made by ``configure_logging`` during a test."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test files.

    Returns
    -------
    Path
        Temporary directory path, removed by pytest after the session.

    """
    return tmp_path


@pytest.fixture
def textile() -> Callable[..., str]:
    """Return a helper converting markup text with a fresh parser.

    Keyword arguments are passed to :class:`TextileOptions`.
    """

    def _convert(markup: str, **option_values) -> str:
        return TextileParser(TextileOptions(**option_values)).parse_text(markup)

    return _convert
