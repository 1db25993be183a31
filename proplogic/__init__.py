# proplogic/__init__.py
# This file is part of PropCalc - A Propositional Logic Calculator
#
# Formula parsing and AST construction for propositional logic

"""Propositional formula parsing and AST construction.

This package converts textual propositional-logic formulas into immutable
abstract syntax trees and offers the helpers built on top of them: fluent
construction, canonical rendering and sub-expression enumeration.

Core Functions:
    parse: Converts formula strings into Abstract Syntax Trees
    parse_and_list: Parses a formula and enumerates its sub-expressions

Supported Syntax:
    - Variables: single uppercase letters (A-Z)
    - Conjunction: &
    - Disjunction: | or v
    - Negation: - (prefix)
    - Implication: >
    - Parenthetical grouping, whitespace ignored

Grammar Features:
    - Left-associative binary operators
    - Precedence IMPLIES < OR < AND < NOT
    - Bounded nesting depth and operator depth

Example:
    >>> from proplogic import parse
    >>> str(parse("-A & B > C"))
    '((~A & B) -> C)'
"""

from typing import List

from .exceptions import ParseError
from .expression import (
    Expr,
    Expression,
    Var,
    Not,
    And,
    Or,
    Implies,
    Visitor,
    var,
    not_,
    declare,
)
from .lexer import IllegalCharacterError
from .grammar import PropositionalParser, MAX_NESTING_DEPTH, MAX_TREE_DEPTH
from utils.logger import get_logger


def parse(
    source: str,
    max_depth: int = MAX_NESTING_DEPTH,
    max_tree_depth: int = MAX_TREE_DEPTH,
) -> Expr:
    """Parse formula string into Abstract Syntax Tree representation.

    Uses a fresh parser instance for each invocation, so calls are stateless
    and may run concurrently.

    Args:
        source: Propositional formula string to parse
        max_depth: Maximum parenthesis nesting accepted
        max_tree_depth: Maximum operator depth of the resulting tree

    Returns:
        Root AST node representing the parsed formula structure

    Raises:
        ParseError: Formula syntax is malformed

    Example:
        >>> parse("AvB")
        Or(left=Var(name='A'), right=Var(name='B'))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = PropositionalParser(max_depth=max_depth, max_tree_depth=max_tree_depth)

    try:
        result = parser.parse(source)
        logger.debug(
            f"Formula parsed successfully into AST with type: {type(result).__name__}"
        )
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse_and_list(source: str) -> List[Expr]:
    """Parse formula string and enumerate its sub-expressions.

    Args:
        source: Propositional formula string to parse

    Returns:
        Pre-order sub-expression list of the parsed formula, adjacent
        duplicates collapsed

    Raises:
        ParseError: Formula parsing fails
    """
    logger = get_logger()
    logger.debug(f"Parsing and listing sub-expressions of: {source}")

    return parse(source).list_expressions()


__all__ = [
    "parse",
    "parse_and_list",
    "ParseError",
    "PropositionalParser",
    "MAX_NESTING_DEPTH",
    "MAX_TREE_DEPTH",
    "IllegalCharacterError",
    "Expr",
    "Expression",
    "Var",
    "Not",
    "And",
    "Or",
    "Implies",
    "Visitor",
    "var",
    "not_",
    "declare",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing and AST construction"
