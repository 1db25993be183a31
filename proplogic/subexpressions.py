# proplogic/subexpressions.py
# This file is part of PropCalc - A Propositional Logic Calculator
#
# Pre-order enumeration of sub-expressions

"""Enumerates the sub-expressions of a propositional formula.

The collector walks the AST with the visitor pattern and produces, for every
node, the node itself followed by the expansion of each child from left to
right. At every level the partial result is collapsed by removing entries that
are structurally equal to the entry immediately before them. Duplicates that
are not adjacent survive, so callers must not treat the result as a set.

Example:
    >>> from proplogic.expression import And, Var
    >>> SubexpressionCollector().collect(And(Var("A"), Var("A")))
    [And(left=Var(name='A'), right=Var(name='A')), Var(name='A')]
"""

from __future__ import annotations
from itertools import groupby
from typing import Iterable, List
from . import expression as ast
from utils.logger import get_logger


class SubexpressionCollector(ast.Visitor):
    """Visitor returning the pre-order list of sub-expressions of a node."""

    def collect(self, root: ast.Expr) -> List[ast.Expr]:
        """Enumerate ``root`` and its descendants.

        Args:
            root: Expression to expand

        Returns:
            Pre-order list with adjacent duplicates collapsed
        """
        logger = get_logger()
        logger.debug(f"Listing sub-expressions of {type(root).__name__} node")

        expressions = root.accept(self)

        logger.debug(f"Collected {len(expressions)} sub-expressions")
        return expressions

    def visit_var(self, n: ast.Var) -> List[ast.Expr]:
        return [n]

    def visit_not(self, n: ast.Not) -> List[ast.Expr]:
        return _dedup_adjacent([n, *n.operand.accept(self)])

    # Binary visits recurse directly, two frames per tree level
    def visit_and(self, n: ast.And) -> List[ast.Expr]:
        return _dedup_adjacent([n, *n.left.accept(self), *n.right.accept(self)])

    def visit_or(self, n: ast.Or) -> List[ast.Expr]:
        return _dedup_adjacent([n, *n.left.accept(self), *n.right.accept(self)])

    def visit_implies(self, n: ast.Implies) -> List[ast.Expr]:
        return _dedup_adjacent([n, *n.left.accept(self), *n.right.accept(self)])


def _dedup_adjacent(expressions: Iterable[ast.Expr]) -> List[ast.Expr]:
    """Drop every entry equal to the one right before it."""
    return [expr for expr, _ in groupby(expressions)]
