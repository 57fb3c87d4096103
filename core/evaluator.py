# core/evaluator.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Truth evaluation, truth tables and brute-force satisfiability

"""Truth evaluation of formulas under total assignments.

Variables are enumerated in sorted order and assignments are produced from the
bits of a counter: bit ``j`` of counter ``i`` is the value of variable ``j``.
The truth table and the satisfiability checker share this enumeration, so the
first model reported by the checker is the first true row of the table.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional

from parser import parse
from parser import ast_nodes as ast
from utils.logger import get_logger
from .exceptions import UnassignedVariableError
from .results import CalculationResult

Assignment = Dict[str, bool]


def extract_variables(tree: ast.Expr) -> List[str]:
    """Sorted unique variable names occurring in ``tree``."""
    names = set()
    stack = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, ast.Variable):
            names.add(node.name)
        stack.extend(node.children())
    return sorted(names)


def generate_assignments(variables: List[str]) -> Iterator[Assignment]:
    """Yield all 2**n assignments of ``variables`` in counter order."""
    for i in range(2 ** len(variables)):
        yield {name: bool((i >> j) & 1) for j, name in enumerate(variables)}


class Evaluator(ast.Visitor):
    """Visitor computing the truth value of a formula.

    Attributes:
        assignment: Truth value of every variable that may be reached
    """

    def __init__(self, assignment: Mapping[str, bool]):
        self.assignment = assignment

    def visit_variable(self, n: ast.Variable) -> bool:
        try:
            return self.assignment[n.name]
        except KeyError:
            raise UnassignedVariableError(n.name) from None

    def visit_constant(self, n: ast.Constant) -> bool:
        return n.truth

    def visit_not(self, n: ast.Not) -> bool:
        return not n.operand.accept(self)

    def visit_and(self, n: ast.And) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return left and right

    def visit_or(self, n: ast.Or) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return left or right

    def visit_implies(self, n: ast.Implies) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return (not left) or right

    def visit_iff(self, n: ast.Iff) -> bool:
        return n.left.accept(self) == n.right.accept(self)


def evaluate(tree: ast.Expr, assignment: Mapping[str, bool]) -> bool:
    """Truth value of ``tree`` under ``assignment``.

    Raises:
        UnassignedVariableError: A variable of the formula has no value
    """
    return tree.accept(Evaluator(assignment))


@dataclass
class TruthTableRow(CalculationResult):
    assignment: Assignment
    result: bool


@dataclass
class TruthTableResult(CalculationResult):
    formula: str
    variables: List[str]
    rows: List[TruthTableRow]


class TruthTableGenerator:
    """Evaluates a formula under every assignment of its variables."""

    def calculate(self, config) -> TruthTableResult:
        logger = get_logger()
        logger.calculation_start("truth-table", config.formula)

        tree = parse(config.formula)
        variables = extract_variables(tree)
        logger.debug(f"Variables found: {variables}")

        rows = []
        for assignment in generate_assignments(variables):
            result = evaluate(tree, assignment)
            logger.debug(f"    {assignment} → {result}")
            rows.append(TruthTableRow(assignment, result))

        logger.calculation_result("truth-table", f"{len(rows)} rows")
        return TruthTableResult(formula=config.formula, variables=variables, rows=rows)


class SatisfiabilityStatus(Enum):
    """Classification of a formula by its number of true rows."""

    UNSATISFIABLE = "unsatisfiable"
    SATISFIABLE = "satisfiable"
    VALID = "valid"

    def __str__(self) -> str:
        return self.value


@dataclass
class SatisfiabilityResult(CalculationResult):
    formula: str
    status: SatisfiabilityStatus
    model: Optional[Assignment]
    true_count: int
    total: int


class SatisfiabilityChecker:
    """Brute-force satisfiability and validity check."""

    def calculate(self, config) -> SatisfiabilityResult:
        logger = get_logger()
        logger.calculation_start("satisfiability", config.formula)

        tree = parse(config.formula)
        variables = extract_variables(tree)

        true_count = 0
        total = 0
        model: Optional[Assignment] = None
        for assignment in generate_assignments(variables):
            total += 1
            if evaluate(tree, assignment):
                true_count += 1
                if model is None:
                    model = assignment

        if true_count == 0:
            status = SatisfiabilityStatus.UNSATISFIABLE
        elif true_count == total:
            status = SatisfiabilityStatus.VALID
        else:
            status = SatisfiabilityStatus.SATISFIABLE

        logger.calculation_result(
            "satisfiability", f"{status} ({true_count}/{total} true assignments)"
        )
        return SatisfiabilityResult(
            formula=config.formula,
            status=status,
            model=model,
            true_count=true_count,
            total=total,
        )
