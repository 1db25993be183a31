# tests/conftest.py
# This file is part of PropCalc - A Propositional Logic Calculator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for PropCalc tests.

This module provides pytest configuration, fixtures, and utilities for testing
the propositional formula parser. It ensures proper module path setup and
provides common test infrastructure for all test modules.
"""

import logging
import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Yields:
        None: Control to test execution
    """
    try:
        import proplogic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


class _RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


@pytest.fixture
def log_messages():
    """Collect messages emitted through the project logger.

    The project logger does not propagate to the root logger, so caplog
    never sees its records.

    Yields:
        List[str]: Messages logged while the test runs
    """
    from utils.logger import get_logger

    handler = _RecordingHandler()
    logger = get_logger().logger
    logger.addHandler(handler)
    try:
        yield handler.messages
    finally:
        logger.removeHandler(handler)


@pytest.fixture
def basic_formula():
    """Provide a basic formula for testing.

    Returns:
        str: Simple conjunction
    """
    return "A & B"


@pytest.fixture
def complex_formula():
    """Provide a formula using every operator.

    Returns:
        str: Formula mixing all connectives and grouping
    """
    return "-(A v B) & C > -D | (E & F)"
