# proplogic/exceptions.py
# This file is part of PropCalc - A Propositional Logic Calculator
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for propositional formula processing.

This module defines the single error taxonomy of the parsing pipeline. Every
syntax violation detected while tokenizing or parsing a formula is reported
as a ParseError; there is no partial-success mode.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Covers empty input, missing operands, illegal characters, unbalanced
    parentheses, trailing input and excessive nesting or operator depth.

    Attributes:
        position: 0-based character offset of the offending token, or None
            when the error was detected at end of input
    """

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position
