# utils/__init__.py
# This file is part of PropCalc - A Propositional Logic Calculator
#
# Utility module exports

from .logger import (
    LogLevel,
    CalculatorLogger,
    get_logger,
    set_log_level,
)

__all__ = [
    "LogLevel",
    "CalculatorLogger",
    "get_logger",
    "set_log_level",
]
