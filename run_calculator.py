#!/usr/bin/env python3
# run_calculator.py
# This file is part of PropCalc - A Propositional Logic Calculator
#
# Command-line interface for formula parsing with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from proplogic import parse, MAX_NESTING_DEPTH, MAX_TREE_DEPTH
from proplogic.exceptions import ParseError
from utils.logger import LogLevel, get_logger, set_log_level


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula as string, surrounding whitespace removed

    Raises:
        FileNotFoundError: If formula file doesn't exist
        ValueError: If formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Error reading formula file: {e}") from e

    if not content:
        raise ValueError("Formula file is empty")

    return content


def configure_logging_for_calculator(debug: bool = False) -> None:
    """Configure logging levels for the calculator.

    Results are logged at INFO, so INFO stays the floor.

    Args:
        debug: Enable DEBUG level logging
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    else:
        set_log_level(LogLevel.INFO)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="PropCalc propositional formula parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_calculator.py "A & -B > C"
  python run_calculator.py -f formula.txt --list
  python run_calculator.py "(A v B) & C" --validate-only
  python run_calculator.py -- "-A & B"

Formula syntax:
  A-Z      variables (one letter each)
  &        conjunction
  | or v   disjunction
  -        negation (prefix)
  >        implication
  ( )      grouping
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("formula", nargs="?", help="Formula text to parse")
    source.add_argument(
        "-f", "--file", type=Path, help="Path to a file containing the formula"
    )

    parser.add_argument(
        "-l", "--list", action="store_true", help="Also list the sub-expressions"
    )

    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Only report whether the formula is well-formed",
    )

    parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_NESTING_DEPTH,
        help=f"Maximum parenthesis nesting (default: {MAX_NESTING_DEPTH})",
    )

    parser.add_argument(
        "--max-tree-depth",
        type=int,
        default=MAX_TREE_DEPTH,
        help=f"Maximum operator depth of the formula (default: {MAX_TREE_DEPTH})",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the calculator.

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    if args.max_depth < 1:
        parser.error("--max-depth must be at least 1")
    if args.max_tree_depth < 1:
        parser.error("--max-tree-depth must be at least 1")

    configure_logging_for_calculator(debug=args.debug)
    logger = get_logger()

    try:
        if args.file is not None:
            formula = read_formula_file(args.file)
        else:
            formula = args.formula

        if args.verbose:
            logger.formula_loaded(formula, str(args.file) if args.file else None)

        expr = parse(
            formula,
            max_depth=args.max_depth,
            max_tree_depth=args.max_tree_depth,
        )

        if args.validate_only:
            logger.validation_result(True)
            return 0

        logger.formula_rendered(str(expr))

        if args.list:
            for index, sub in enumerate(expr.list_expressions()):
                logger.subexpression_listed(index, str(sub))

        return 0

    except ParseError as e:
        if args.validate_only:
            logger.validation_result(False, f"Formula is malformed: {e}")
        else:
            logger.error(f"Formula parsing error: {e}")
        return 2

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
