# proplogic/expression.py
# This file is part of PropCalc - A Propositional Logic Calculator
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional logic formulas. The variant set is closed:

Node Types:
    Var: Atomic proposition identified by its name
    Not: Negation
    And, Or, Implies: Binary connectives

Nodes compare and hash structurally, so subtrees can be freely shared between
parents without affecting equality. All nodes support the visitor design
pattern for traversal.

Example:
    >>> a, b = declare("A", "B")
    >>> str(a.or_(not_(b)).implies(b))
    '((A v ~B) -> B)'
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Protocol, Tuple, Union


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_var(self, n: Var): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_implies(self, n: Implies): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Holds no data of its own. It hosts the fluent builders and traversal
    helpers shared by the five concrete variants, and declares the accept
    and __str__ hooks every variant implements.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        """Return the canonical, fully parenthesized rendering of the node.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def and_(self, other: Expr) -> And:
        """Build the conjunction of this expression and ``other``."""
        return And(self, _checked(other))

    def or_(self, other: Expr) -> Or:
        """Build the disjunction of this expression and ``other``."""
        return Or(self, _checked(other))

    def implies(self, other: Expr) -> Implies:
        """Build the implication with this expression as antecedent."""
        return Implies(self, _checked(other))

    def list_expressions(self) -> List[Expr]:
        """List this expression and all of its sub-expressions in pre-order.

        Consecutive structurally equal entries are collapsed into one, but
        duplicates separated by other entries are kept, so the result is not
        a set of unique sub-expressions.

        Returns:
            List starting with this node, followed by the expansion of each
            child from left to right

        Example:
            >>> expr = And(Var("A"), Or(Var("B"), Var("C")))
            >>> len(expr.list_expressions())
            5
        """
        from .subexpressions import SubexpressionCollector

        return SubexpressionCollector().collect(self)


@dataclass(frozen=True, slots=True)
class Var(Expr):
    """Atomic proposition.

    Attributes:
        name: Non-empty identifier of the proposition, without whitespace
    """

    name: str

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError(
                f"Variable name must be a string, got {type(self.name).__name__}"
            )
        if not self.name or any(ch.isspace() for ch in self.name):
            raise ValueError(
                f"Variable name must be a non-empty string without whitespace, "
                f"got {self.name!r}"
            )

    def accept(self, v: Visitor):
        return v.visit_var(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"~{self.operand}"


@dataclass(frozen=True, slots=True)
class And(Expr):
    """Logical conjunction.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_and(self)

    def __str__(self) -> str:
        return f"({self.left} & {self.right})"


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """Logical disjunction.

    Rendered with ``v`` as the operator symbol.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_or(self)

    def __str__(self) -> str:
        return f"({self.left} v {self.right})"


@dataclass(frozen=True, slots=True)
class Implies(Expr):
    """Material implication.

    Attributes:
        left: Antecedent
        right: Consequent
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_implies(self)

    def __str__(self) -> str:
        return f"({self.left} -> {self.right})"


Expression = Union[Var, Not, And, Or, Implies]


def _checked(node: object) -> Expr:
    if not isinstance(node, Expr):
        raise TypeError(
            f"Expected an expression node, got {type(node).__name__}"
        )
    return node


def var(name: str) -> Var:
    """Shorthand for a variable node: ``var("A")``."""
    return Var(name)


def not_(expr: Expr) -> Not:
    """Shorthand for negating an existing expression."""
    return Not(_checked(expr))


def declare(*names: str) -> Tuple[Var, ...]:
    """Declare several variables at once.

    Accepts either one name per argument or a single whitespace-separated
    string of names.

    Args:
        names: Variable names

    Returns:
        Tuple of Var nodes in the order the names were given

    Example:
        >>> a, b, c = declare("A B C")
        >>> str(a.and_(b).or_(c))
        '((A & B) v C)'
    """
    if len(names) == 1 and isinstance(names[0], str):
        names = tuple(names[0].split())
    return tuple(Var(name) for name in names)
