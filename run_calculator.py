#!/usr/bin/env python3
# run_calculator.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Command-line interface for the formula analyses with configurable logging levels

import sys
import json
import argparse
from typing import List

from core import (
    AlgorithmKind,
    CalculationConfig,
    FormatError,
    PositionError,
    calculate,
)
from core.results import CalculationResult
from parser import parse
from parser.exceptions import ParseError
from utils.logger import configure_logging, get_logger


def describe_result(kind: AlgorithmKind, result: CalculationResult) -> List[str]:
    """Human-readable summary lines of a calculation result.

    Args:
        kind: Algorithm that produced ``result``
        result: Result record

    Returns:
        Lines to print
    """
    data = result.to_dict()

    if kind is AlgorithmKind.TRUTH_TABLE:
        variables = data["variables"]
        lines = [" ".join(variables + ["│", data["formula"]])]
        for row in data["rows"]:
            values = ["T" if row["assignment"][v] else "F" for v in variables]
            lines.append(" ".join(values + ["│", "T" if row["result"] else "F"]))
        return lines

    if kind is AlgorithmKind.SATISFIABILITY:
        lines = [f"Status: {data['status']} ({data['true_count']}/{data['total']})"]
        if data["model"] is not None:
            model = ", ".join(f"{k}={'T' if v else 'F'}" for k, v in data["model"].items())
            lines.append(f"First model: {model}")
        return lines

    if kind is AlgorithmKind.SUBFORMULA:
        return [f"Subformula at {data['position']}: {data['subformula']}"]

    if kind is AlgorithmKind.UNIT_PROPAGATION:
        lines = [
            f"Propagate {step['literal']}: {' ; '.join(step['before_clauses'])}"
            f" → {' ; '.join(step['after_clauses'])}"
            for step in data["steps"]
        ]
        lines.append(f"Result: {data['formatted_result']}")
        return lines

    if kind is AlgorithmKind.INTERPRETATION:
        return [
            f"Formula under {data['interpretation']}: {data['simplified_formula']}",
            f"Statement body: {data['statement_formula']}",
            f"Statement {'holds' if data['is_valid'] else 'does not hold'}",
        ]

    if kind is AlgorithmKind.POLARITY:
        return [
            f"Polarity of {data['subformula']}: {data['polarity']}",
            result.formatted_tree,
        ]

    if kind in (AlgorithmKind.CNF_DETERMINISM, AlgorithmKind.GENERAL_DETERMINISM):
        lines = [data["explanation"]]
        for number, statement in enumerate(data["statements"], start=1):
            marker = "✅" if number == data["correct_statement"] else "  "
            lines.append(f"{marker} {number}. {statement}")
        return lines

    if kind is AlgorithmKind.PURE_ATOM:
        return [
            f"Pure atoms: {', '.join(data['pure_atoms']) or '(none)'}",
            f"Simplified: {data['simplified_formula']}",
        ]

    lines = [f"{aux['variable']} := {aux['represents']}" for aux in data["aux_variables"]]
    lines.append(f"Result: {data['formatted_result']}")
    return lines


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Lumen propositional formula engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_calculator.py -a truth-table -f "a→b"
  python run_calculator.py -a polarity -f "¬(a→b)" -p 1.1
  python run_calculator.py -a unit-propagation -f "(a∨b)∧(¬a)"
  python run_calculator.py -a interpretation -f "p∧q" -i "I⊨¬p" -s "I⊭A"
  python run_calculator.py -a tseytin -f "(a∧b)→c" --json
        """,
    )

    parser.add_argument(
        "-a",
        "--algorithm",
        choices=[kind.value for kind in AlgorithmKind],
        help="Analysis to run",
    )

    parser.add_argument("-f", "--formula", help="Formula to analyse")

    parser.add_argument("-p", "--position", help="Position such as 1.2.1 (root when omitted)")

    parser.add_argument("-i", "--interpretation", help="Interpretation such as I⊨¬p")

    parser.add_argument("-s", "--statement", help="Statement such as I⊭A")

    parser.add_argument(
        "--type",
        choices=["cnf", "general"],
        default="cnf",
        help="Variant of the cnf-determinism check",
    )

    parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    parser.add_argument(
        "--visualize",
        metavar="NAME",
        help="Render the formula tree with graphviz to tree_visualizations/NAME",
    )

    parser.add_argument("--list", action="store_true", help="List the available analyses")

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main() -> int:
    """Main entry point for the formula engine CLI.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args()

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    if args.list:
        for kind in AlgorithmKind:
            print(kind.value)
        return 0

    if not args.algorithm or args.formula is None:
        parser.error("--algorithm and --formula are required")

    try:
        kind = AlgorithmKind(args.algorithm)
        config = CalculationConfig(
            formula=args.formula,
            position=args.position,
            interpretation=args.interpretation,
            statement=args.statement,
            type=args.type,
        )
        logger.info(f"Running {kind.value} on {args.formula}")
        result = calculate(kind, config)

        if args.json:
            print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        else:
            for line in describe_result(kind, result):
                print(line)

        if args.visualize:
            from utils.tree_visualizer import visualize_formula_tree

            visualize_formula_tree(parse(args.formula), args.visualize)

        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except (PositionError, FormatError) as e:
        logger.error(f"Input error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Calculation interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
