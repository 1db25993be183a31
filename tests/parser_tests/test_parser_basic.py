# tests/parser_tests/test_parser_basic.py
# This file is part of PropCalc - A Propositional Logic Calculator
#
# Test suite for basic parser functionality and round-trip integrity

"""Test suite for basic parser functionality and AST integrity.

This module tests the parser's ability to build the expected trees for valid
formulas, to ignore whitespace and redundant grouping, and to produce
canonical renderings that parse back into the same tree.
"""

import string

import pytest
from proplogic import parse, parse_and_list, PropositionalParser
from proplogic.expression import And, Or, Not, Implies, Var, var, not_
from utils.logger import get_logger


class TestParserBasic:
    """Test cases for basic parser functionality."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    @pytest.mark.parametrize("letter", list(string.ascii_uppercase))
    def test_single_variable(self, letter):
        """Every uppercase letter parses to its variable node."""
        assert parse(letter) == Var(letter)

    EQUIVALENT_SPELLINGS = [
        (["A&B", "A & B", "(A & B)", "  ((A)&(B)) "], And(Var("A"), Var("B"))),
        (["A|B", "AvB", "A v B", "(A|B)"], Or(Var("A"), Var("B"))),
        (["A>B", "A > B", "((A) > (B))"], Implies(Var("A"), Var("B"))),
        (["-A", "- A", "(-A)", "-(A)"], Not(Var("A"))),
        (["-(A&B)", "-( A & B )"], Not(And(Var("A"), Var("B")))),
        (["(((((A))))&B)", "A&(((((B)))))"], And(Var("A"), Var("B"))),
    ]

    @pytest.mark.parametrize("formulas, expected_ast", EQUIVALENT_SPELLINGS)
    def test_equivalent_spellings(self, formulas, expected_ast):
        """Whitespace and redundant grouping do not change the tree.

        Args:
            formulas: Different spellings of the same formula
            expected_ast: Tree every spelling must produce
        """
        for formula in formulas:
            self.logger.debug(f"Parsing spelling: {formula}")
            assert parse(formula) == expected_ast, f"Unexpected tree for: {formula}"

    def test_matches_builder_construction(self):
        """Parsed trees equal trees built with the helper functions."""
        assert parse("A&B") == var("A").and_(var("B"))
        assert parse("AvB") == var("A").or_(var("B"))
        assert parse("-(A&B)") == not_(var("A").and_(var("B")))

    def test_complex_formula(self, complex_formula):
        """All operators combine into the expected tree."""
        expected = Implies(
            And(Not(Or(Var("A"), Var("B"))), Var("C")),
            Or(Not(Var("D")), And(Var("E"), Var("F"))),
        )
        assert parse(complex_formula) == expected

    CANONICAL_FORMULAS = [
        "A",
        "A & B",
        "A v B",
        "A | B & C",
        "(A | B) & C",
        "A & B & C",
        "A v B v C",
        "(A & (B v (C & (D v E))))",
        "((A v B) & (C v D)) v (E & F)",
    ]

    @pytest.mark.parametrize("formula", CANONICAL_FORMULAS)
    def test_round_trip_ast_integrity(self, formula):
        """Canonical rendering of conjunctions and disjunctions re-parses.

        Args:
            formula: Formula built only from variables, AND and OR
        """
        original_ast = parse(formula)
        stringified = str(original_ast)
        reparsed_ast = parse(stringified)

        self.logger.debug(f"Original: {formula}")
        self.logger.debug(f"Stringified: {stringified}")

        assert original_ast == reparsed_ast, (
            f"Round-trip parsing failed:\n"
            f"Original: {formula}\n"
            f"Stringified: {stringified}"
        )

    def test_parse_and_list(self):
        """The pipeline helper parses then enumerates."""
        expressions = parse_and_list("A & (B | C)")

        assert expressions == [
            And(Var("A"), Or(Var("B"), Var("C"))),
            Var("A"),
            Or(Var("B"), Var("C")),
            Var("B"),
            Var("C"),
        ]

    def test_parser_instance_is_reusable(self):
        """State from one parse does not leak into the next."""
        parser = PropositionalParser()

        assert parser.parse("(A & B)") == And(Var("A"), Var("B"))
        assert parser.parse("C") == Var("C")
        assert parser.parse("-D v E") == Or(Not(Var("D")), Var("E"))

    def test_independent_trees(self):
        """Each parse produces its own tree."""
        first = parse("A & B")
        second = parse("A & B")

        assert first == second
        assert first is not second
