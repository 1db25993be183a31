# utils/logger.py
# This file is part of PropCalc - A Propositional Logic Calculator
#
# Logging utility for formula processing with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for formula processing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class CalculatorLogger:
    """Centralized logger for the calculator with structured output."""

    def __init__(self, name: str = "proplogic", level: LogLevel = LogLevel.INFO):
        """Initialize the calculator logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(CalculatorFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for formula processing
    def formula_loaded(self, formula: str, source: Optional[str] = None):
        """Log the formula about to be parsed."""
        origin = f" (from {source})" if source else ""
        self.info(f"📋 Formula loaded{origin}: {formula}")

    def formula_rendered(self, rendered: str):
        """Log the canonical rendering of a parsed formula."""
        self.info(rendered)

    def subexpression_listed(self, index: int, rendered: str):
        """Log one entry of a sub-expression listing."""
        self.info(f"  [{index}] {rendered}")

    def validation_result(self, success: bool, message: str = ""):
        """Log validation results."""
        if success:
            self.info(f"✅ {message}" if message else "✅ Formula is well-formed")
        else:
            self.error(f"❌ {message}" if message else "❌ Formula is malformed")


class CalculatorFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[CalculatorLogger] = None


def get_logger(name: str = "proplogic") -> CalculatorLogger:
    """Get or create the global calculator logger instance.

    Args:
        name: Logger name (default: "proplogic")

    Returns:
        CalculatorLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = CalculatorLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)

