# proplogic/grammar.py
# This file is part of PropCalc - A Propositional Logic Calculator
#
# Recursive-descent parser for propositional formulas

"""Propositional grammar implementation using precedence climbing.

This module turns the token stream produced by PropLexer into an Abstract
Syntax Tree. There is one parsing method per precedence level; each one asks
the next tighter level for its operands and loops while the lookahead token
is its own operator, which makes all binary operators left-associative.

Grammar:
    formula     ::= implication EOF
    implication ::= disjunction ( '>' disjunction )*
    disjunction ::= conjunction ( ('|' | 'v') conjunction )*
    conjunction ::= negation ( '&' negation )*
    negation    ::= '-'* primary
    primary     ::= VAR | '(' implication ')'

Operator Precedence (lowest to highest):
- IMPLIES ('>'): left-associative
- OR ('|', 'v'): left-associative
- AND ('&'): left-associative
- NOT ('-'): prefix, applies to the following primary

Two bounds keep every later recursive walk (rendering, enumeration, equality,
hashing) inside the interpreter's recursion limit:
- parenthesis nesting, limited by max_depth
- operator depth of the resulting tree (a variable has depth 0, each
  operator adds one above its deepest operand), limited by max_tree_depth
"""

from typing import List, Optional, Tuple
from sly.lex import Token
from .lexer import PropLexer, IllegalCharacterError
from .expression import Expr, Var, Not, And, Or, Implies
from .exceptions import ParseError
from utils.logger import get_logger

# Each parenthesis level costs six Python frames.
MAX_NESTING_DEPTH = 100

# Enumeration walks two frames per tree level.
MAX_TREE_DEPTH = 200

# A parsed sub-formula together with its operator depth
_Parsed = Tuple[Expr, int]


class PropositionalParser:
    """Recursive-descent parser for propositional formulas.

    State (tokens, cursor, nesting depth) is reset by every call to parse, but
    a single instance must not be used by concurrent callers.

    Attributes:
        max_depth: Maximum number of nested parenthesis groups accepted
        max_tree_depth: Maximum operator depth of the resulting tree
    """

    def __init__(
        self,
        max_depth: int = MAX_NESTING_DEPTH,
        max_tree_depth: int = MAX_TREE_DEPTH,
    ):
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        if max_tree_depth < 1:
            raise ValueError("max_tree_depth must be at least 1")
        self.max_depth = max_depth
        self.max_tree_depth = max_tree_depth
        self._tokens: List[Token] = []
        self._pos = 0
        self._depth = 0

    def parse(self, text: str) -> Expr:
        """Parse formula text into AST.

        The whole input must form exactly one formula.

        Args:
            text: Formula string to parse

        Returns:
            Root AST node representing the parsed formula

        Raises:
            ParseError: If formula is empty, contains syntax errors or
                exceeds one of the depth bounds
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        self._tokens = self._tokenize(text)
        self._pos = 0
        self._depth = 0

        if not self._tokens:
            raise ParseError("Input formula is empty.")

        result, tree_depth = self._implication()

        trailing = self._peek()
        if trailing is not None:
            if trailing.type == "RPAREN":
                raise ParseError(
                    f"Unmatched ')' at position {trailing.index}",
                    position=trailing.index,
                )
            raise ParseError(
                f"Unexpected '{trailing.value}' at position {trailing.index} "
                "after end of formula",
                position=trailing.index,
            )

        logger.debug(
            f"Successfully parsed formula into {type(result).__name__} "
            f"of depth {tree_depth}"
        )
        return result

    def _tokenize(self, text: str) -> List[Token]:
        try:
            return list(PropLexer().tokenize(text))
        except IllegalCharacterError as e:
            raise ParseError(str(e), position=e.position) from e

    # Token cursor helpers
    def _peek(self) -> Optional[Token]:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _match(self, token_type: str) -> Optional[Token]:
        token = self._peek()
        if token is not None and token.type == token_type:
            self._pos += 1
            return token
        return None

    def _bounded(self, tree_depth: int, operator: Token) -> int:
        if tree_depth > self.max_tree_depth:
            raise ParseError(
                f"Operators nested deeper than {self.max_tree_depth} levels "
                f"at position {operator.index}",
                position=operator.index,
            )
        return tree_depth

    # Precedence levels, lowest first
    def _implication(self) -> _Parsed:
        left, left_depth = self._disjunction()
        while (operator := self._match("IMPLIES")) is not None:
            right, right_depth = self._disjunction()
            left = Implies(left, right)
            left_depth = self._bounded(1 + max(left_depth, right_depth), operator)
        return left, left_depth

    def _disjunction(self) -> _Parsed:
        left, left_depth = self._conjunction()
        while (operator := self._match("OR")) is not None:
            right, right_depth = self._conjunction()
            left = Or(left, right)
            left_depth = self._bounded(1 + max(left_depth, right_depth), operator)
        return left, left_depth

    def _conjunction(self) -> _Parsed:
        left, left_depth = self._negation()
        while (operator := self._match("AND")) is not None:
            right, right_depth = self._negation()
            left = And(left, right)
            left_depth = self._bounded(1 + max(left_depth, right_depth), operator)
        return left, left_depth

    def _negation(self) -> _Parsed:
        negations = []
        while (operator := self._match("NOT")) is not None:
            negations.append(operator)

        expr, tree_depth = self._primary()
        if negations:
            self._bounded(tree_depth + len(negations), negations[0])
        for _ in negations:
            expr = Not(expr)
        return expr, tree_depth + len(negations)

    def _primary(self) -> _Parsed:
        token = self._peek()

        if token is None:
            raise ParseError(
                "Syntax error: Unexpected end of formula, expected a variable or '('"
            )

        if token.type == "VAR":
            self._pos += 1
            return Var(token.value), 0

        if token.type == "LPAREN":
            self._pos += 1
            return self._group(token)

        raise ParseError(
            f"Syntax error near '{token.value}' (type: {token.type}) "
            f"at position {token.index}, expected a variable or '('",
            position=token.index,
        )

    def _group(self, opening: Token) -> _Parsed:
        self._depth += 1
        if self._depth > self.max_depth:
            raise ParseError(
                f"Parentheses nested deeper than {self.max_depth} levels",
                position=opening.index,
            )

        parsed = self._implication()

        if self._match("RPAREN") is None:
            found = self._peek()
            if found is None:
                raise ParseError(
                    f"Unmatched '(' at position {opening.index}",
                    position=opening.index,
                )
            raise ParseError(
                f"Expected ')' but found '{found.value}' at position {found.index}",
                position=found.index,
            )

        self._depth -= 1
        return parsed
