# proplogic/lexer.py
# This file is part of PropCalc - A Propositional Logic Calculator
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module classifies the characters of a formula into tokens for the
recursive-descent parser. Every token is a single character:

Supported Tokens:
- Variables: one uppercase ASCII letter each (``AB`` is two variables)
- Operators: & (AND), | or lowercase v (OR), - (NOT), > (IMPLIES)
- Grouping: ( and )
- Whitespace: ignored during tokenization

Lowercase ``v`` is reserved for OR, so ``AvB`` lexes as A, OR, B. Any other
character is illegal.
"""

from sly import Lexer
from utils.logger import get_logger


class IllegalCharacterError(ValueError):
    """Raised by PropLexer for a character outside the formula alphabet.

    Attributes:
        character: The offending character
        position: 0-based offset of the character in the source text
    """

    def __init__(self, character: str, position: int):
        super().__init__(
            f"Illegal character '{character}' encountered at position {position}"
        )
        self.character = character
        self.position = position


class PropLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "VAR",
        "AND",
        "OR",
        "NOT",
        "IMPLIES",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n\f\v"

    VAR = r"[A-Z]"
    AND = r"&"
    OR = r"\||v"
    NOT = r"-"
    IMPLIES = r">"
    LPAREN = r"\("
    RPAREN = r"\)"

    def error(self, t):
        """Reject the character at the start of the unmatched input.

        Args:
            t: SLY error token; its value holds the rest of the input

        Raises:
            IllegalCharacterError: Always, positioned at the token index
        """
        get_logger().debug(f"Illegal character '{t.value[0]}' at position {t.index}")
        raise IllegalCharacterError(t.value[0], t.index)
