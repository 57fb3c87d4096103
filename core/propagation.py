# core/propagation.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Unit propagation over formulas in clause form

"""Unit propagation over CNF formulas.

A CNF formula is read as a list of clauses, each a list of literal strings
(``"a"`` or ``"¬a"``), in the left-to-right order of the input. Propagation
repeatedly takes the leftmost unit clause, drops every clause satisfied by its
literal and removes the complementary literal from the rest.

Two callers use the engine differently:

* the determinism classifier stops at the first emptied clause and reports a
  contradiction;
* the standalone unit-propagation analysis silently drops emptied clauses and
  reports whatever remains.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List

from parser import parse
from parser import ast_nodes as ast
from utils.logger import get_logger
from .exceptions import ClauseFormatError
from .results import CalculationResult

Clause = List[str]


def is_negative(literal: str) -> bool:
    return literal.startswith(ast.NEGATION)


def literal_variable(literal: str) -> str:
    """Variable name of a literal."""
    return literal[1:] if is_negative(literal) else literal


def negate_literal(literal: str) -> str:
    """Complementary literal."""
    return literal[1:] if is_negative(literal) else f"{ast.NEGATION}{literal}"


def _flatten(node: ast.Expr, kind) -> List[ast.Expr]:
    """Operands of a left-to-right chain of ``kind`` nodes."""
    if isinstance(node, kind):
        return _flatten(node.left, kind) + _flatten(node.right, kind)
    return [node]


def parse_clauses(formula: str) -> List[Clause]:
    """Read a CNF formula string into clauses.

    Args:
        formula: Formula of the shape ``(l∨l∨…)∧(l)∧…``

    Returns:
        Clauses in input order, literals in input order

    Raises:
        ParseError: The formula does not parse
        ClauseFormatError: The formula is not a conjunction of disjunctions
            of literals
    """
    tree = parse(formula)
    clauses = []
    for conjunct in _flatten(tree, ast.And):
        clause = []
        for literal in _flatten(conjunct, ast.Or):
            if not ast.is_literal(literal):
                raise ClauseFormatError(
                    f"'{literal}' in clause '{conjunct}' is not a literal"
                )
            clause.append(str(literal))
        clauses.append(clause)
    return clauses


def clause_variables(clauses: List[Clause]) -> List[str]:
    """Variables of ``clauses`` in first-occurrence order."""
    seen: Dict[str, None] = {}
    for clause in clauses:
        for literal in clause:
            seen.setdefault(literal_variable(literal), None)
    return list(seen)


def format_literal(literal: str) -> str:
    """Render a literal for clause output, negation as ``-``."""
    return f"-{literal_variable(literal)}" if is_negative(literal) else literal


def format_propagation(clauses: List[Clause], literals: List[str]) -> str:
    """Canonical ``(l);(l,l)`` rendering of a propagation result.

    Propagated literals come first as unit clauses, followed by the remaining
    clauses with their literals sorted by variable name.
    """
    parts = [f"({format_literal(literal)})" for literal in literals]
    for clause in clauses:
        if clause:
            ordered = sorted(clause, key=literal_variable)
            parts.append(f"({','.join(format_literal(l) for l in ordered)})")
    return ";".join(parts)


class PropagationOutcome(Enum):
    """Terminal state of a propagation run."""

    EMPTY = auto()  # every clause satisfied
    CONTRADICTION = auto()  # an empty clause was produced
    STALLED = auto()  # no unit clause left, clauses remain

    def __str__(self) -> str:
        return self.name.lower()


@dataclass
class PropagationStep(CalculationResult):
    literal: str
    before: List[Clause]
    after: List[Clause]


@dataclass
class PropagationResult(CalculationResult):
    outcome: PropagationOutcome
    clauses: List[Clause]
    literals: List[str] = field(default_factory=list)
    assignments: Dict[str, bool] = field(default_factory=dict)
    steps: List[PropagationStep] = field(default_factory=list)


class UnitPropagator:
    """Runs unit propagation to completion.

    Attributes:
        stop_on_contradiction: Report an emptied clause as a contradiction
            instead of dropping it
    """

    def __init__(self, stop_on_contradiction: bool = True):
        self.stop_on_contradiction = stop_on_contradiction

    def run(self, clauses: List[Clause]) -> PropagationResult:
        logger = get_logger()
        current = [list(clause) for clause in clauses]
        literals: List[str] = []
        assignments: Dict[str, bool] = {}
        steps: List[PropagationStep] = []

        while True:
            unit = next((clause for clause in current if len(clause) == 1), None)
            if unit is None:
                break

            literal = unit[0]
            variable = literal_variable(literal)
            value = not is_negative(literal)
            literals.append(literal)
            assignments[variable] = value

            before = [list(clause) for clause in current]
            current, emptied = self._propagate(current, literal)
            steps.append(PropagationStep(literal, before, [list(c) for c in current]))
            logger.propagation_step(literal, _render(before), _render(current))

            if emptied and self.stop_on_contradiction:
                logger.debug(f"    💥 propagating {literal} produced an empty clause")
                return PropagationResult(
                    PropagationOutcome.CONTRADICTION, current, literals, assignments, steps
                )

            if not current:
                return PropagationResult(
                    PropagationOutcome.EMPTY, current, literals, assignments, steps
                )

        return PropagationResult(
            PropagationOutcome.STALLED, current, literals, assignments, steps
        )

    @staticmethod
    def _propagate(clauses: List[Clause], literal: str):
        """Apply ``literal`` to ``clauses``.

        Returns:
            Tuple of the surviving clauses and whether a clause was emptied
        """
        complement = negate_literal(literal)
        remaining = []
        emptied = False
        for clause in clauses:
            if literal in clause:
                continue
            reduced = [lit for lit in clause if lit != complement]
            if not reduced:
                emptied = True
                continue
            remaining.append(reduced)
        return remaining, emptied


def _render(clauses: List[Clause]) -> str:
    return "[" + "; ".join(",".join(clause) for clause in clauses) + "]"


@dataclass
class UnitPropagationStep(CalculationResult):
    literal: str
    before_clauses: List[str]
    after_clauses: List[str]


@dataclass
class UnitPropagationResult(CalculationResult):
    formula: str
    steps: List[UnitPropagationStep]
    final_clauses: List[str]
    literals: List[str]
    formatted_result: str
    outcome: PropagationOutcome


class UnitPropagation:
    """Standalone unit propagation trace with canonical clause output."""

    def calculate(self, config) -> UnitPropagationResult:
        logger = get_logger()
        logger.calculation_start("unit-propagation", config.formula)

        clauses = parse_clauses(config.formula)
        logger.debug(f"Initial clauses: {_render(clauses)}")

        result = UnitPropagator(stop_on_contradiction=False).run(clauses)
        formatted = format_propagation(result.clauses, result.literals)

        logger.calculation_result("unit-propagation", formatted)
        return UnitPropagationResult(
            formula=config.formula,
            steps=[
                UnitPropagationStep(
                    step.literal,
                    [",".join(c) for c in step.before],
                    [",".join(c) for c in step.after],
                )
                for step in result.steps
            ],
            final_clauses=[",".join(c) for c in result.clauses],
            literals=result.literals,
            formatted_result=formatted,
            outcome=result.outcome,
        )
