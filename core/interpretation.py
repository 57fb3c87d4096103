# core/interpretation.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Partial interpretations and equivalence-preserving simplification

"""Interpretation testing.

An interpretation ``I⊨p`` / ``I⊨¬p`` / ``I⊭p`` / ``I⊭¬p`` fixes the value of a
single variable. The formula is simplified under that partial assignment, and
the result is plugged into a statement ``I⊨…`` or ``I⊭…`` through the
placeholder ``A``. The statement holds when, under the same assignment, its
body simplifies to ⊤ (for ``⊨``) or ⊥ (for ``⊭``).

    formula      p∧q
    interpretation I⊨¬p
    statement    I⊭A
    → A simplifies to ⊥, the statement body to ⊥, so the statement holds.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

from parser import parse
from parser import ast_nodes as ast
from utils.logger import get_logger
from .exceptions import FormatError, InterpretationFormatError
from .results import CalculationResult

MAX_SIMPLIFY_ITERATIONS = 20
PLACEHOLDER = "A"
MODELS = "⊨"
NOT_MODELS = "⊭"

_ASSERTION = re.compile(r"^\s*I\s*([⊨⊭])\s*(.+?)\s*$")
_LITERAL = re.compile(r"^(¬?)\s*([a-z])$")


def parse_assertion(text: Optional[str]) -> Tuple[bool, str]:
    """Split ``I⊨body`` / ``I⊭body``.

    Returns:
        Tuple of whether the relation is ⊨ and the body text

    Raises:
        InterpretationFormatError: ``text`` is not of that shape
    """
    match = _ASSERTION.match(text or "")
    if match is None:
        raise InterpretationFormatError(
            f"Expected 'I{MODELS}…' or 'I{NOT_MODELS}…', got '{text}'"
        )
    return match.group(1) == MODELS, match.group(2)


def parse_interpretation(text: Optional[str]) -> Dict[str, bool]:
    """Single-variable assignment described by an interpretation literal.

    Raises:
        InterpretationFormatError: Not ``I⊨l`` / ``I⊭l`` with ``l`` a literal
    """
    holds, body = parse_assertion(text)
    match = _LITERAL.match(body)
    if match is None:
        raise InterpretationFormatError(f"'{body}' is not a literal")
    negated = bool(match.group(1))
    return {match.group(2): holds != negated}


def substitute(node: ast.Expr, assignment: Mapping[str, bool]) -> ast.Expr:
    """Replace assigned variables by constants, keep the others symbolic."""
    if isinstance(node, ast.Variable):
        if node.name in assignment:
            return ast.Constant.of(assignment[node.name])
        return node
    if isinstance(node, ast.Not):
        return ast.Not(substitute(node.operand, assignment))
    if isinstance(node, ast.Binary):
        return type(node)(
            substitute(node.left, assignment), substitute(node.right, assignment)
        )
    return node


def _complementary(left: ast.Expr, right: ast.Expr) -> bool:
    return left == ast.Not(right) or right == ast.Not(left)


class AlgebraicSimplifier:
    """Equivalence-preserving rewriting to a fixed point.

    Each pass rewrites bottom-up; passes repeat until the tree stops changing
    or ``max_iterations`` is reached.

    Attributes:
        max_iterations: Upper bound on the number of passes
    """

    def __init__(self, max_iterations: int = MAX_SIMPLIFY_ITERATIONS):
        self.max_iterations = max_iterations
        self.iterations = 0
        self.converged = False

    def simplify(self, node: ast.Expr) -> ast.Expr:
        logger = get_logger()
        self.iterations = 0
        self.converged = False

        current = node
        while self.iterations < self.max_iterations:
            self.iterations += 1
            rewritten = self.rewrite(current)
            logger.simplification_pass(self.iterations, str(rewritten))
            if rewritten == current:
                self.converged = True
                return current
            current = rewritten

        logger.warning(
            f"Simplification of {node} did not converge after "
            f"{self.max_iterations} passes; stopping at {current}"
        )
        return current

    def rewrite(self, node: ast.Expr) -> ast.Expr:
        """One bottom-up rewriting pass."""
        if isinstance(node, ast.Not):
            return self._rewrite_not(self.rewrite(node.operand))
        if isinstance(node, ast.Binary):
            left = self.rewrite(node.left)
            right = self.rewrite(node.right)
            if isinstance(node, ast.And):
                return self._rewrite_and(left, right)
            if isinstance(node, ast.Or):
                return self._rewrite_or(left, right)
            if isinstance(node, ast.Implies):
                return self._rewrite_implies(left, right)
            return self._rewrite_iff(left, right)
        return node

    @staticmethod
    def _rewrite_not(operand: ast.Expr) -> ast.Expr:
        if isinstance(operand, ast.Constant):
            return operand.negated()
        if isinstance(operand, ast.Not):
            return operand.operand
        if isinstance(operand, ast.And):
            return ast.Or(ast.Not(operand.left), ast.Not(operand.right))
        if isinstance(operand, ast.Or):
            return ast.And(ast.Not(operand.left), ast.Not(operand.right))
        if isinstance(operand, ast.Implies):
            return ast.And(operand.left, ast.Not(operand.right))
        if isinstance(operand, ast.Iff):
            return ast.Or(
                ast.And(operand.left, ast.Not(operand.right)),
                ast.And(ast.Not(operand.left), operand.right),
            )
        return ast.Not(operand)

    @staticmethod
    def _rewrite_and(left: ast.Expr, right: ast.Expr) -> ast.Expr:
        for const, other in ((left, right), (right, left)):
            if isinstance(const, ast.Constant):
                return other if const.truth else const
        if left == right:
            return left
        if _complementary(left, right):
            return ast.Constant(ast.BOTTOM)
        return ast.And(left, right)

    @staticmethod
    def _rewrite_or(left: ast.Expr, right: ast.Expr) -> ast.Expr:
        for const, other in ((left, right), (right, left)):
            if isinstance(const, ast.Constant):
                return const if const.truth else other
        if left == right:
            return left
        if _complementary(left, right):
            return ast.Constant(ast.TOP)
        return ast.Or(left, right)

    @staticmethod
    def _rewrite_implies(left: ast.Expr, right: ast.Expr) -> ast.Expr:
        if isinstance(left, ast.Constant):
            return right if left.truth else ast.Constant(ast.TOP)
        if isinstance(right, ast.Constant):
            return right if right.truth else ast.Not(left)
        if left == right:
            return ast.Constant(ast.TOP)
        return ast.Or(ast.Not(left), right)

    @staticmethod
    def _rewrite_iff(left: ast.Expr, right: ast.Expr) -> ast.Expr:
        for const, other in ((left, right), (right, left)):
            if isinstance(const, ast.Constant):
                return other if const.truth else ast.Not(other)
        if left == right:
            return ast.Constant(ast.TOP)
        if _complementary(left, right):
            return ast.Constant(ast.BOTTOM)
        return ast.Or(ast.And(left, right), ast.And(ast.Not(left), ast.Not(right)))


@dataclass
class InterpretationResult(CalculationResult):
    formula: str
    interpretation: str
    statement: str
    assignment: Dict[str, bool]
    simplified_formula: str
    statement_formula: str
    statement_value: Optional[bool]
    is_valid: bool


class InterpretationTester:
    """Checks a statement about a formula under a partial interpretation."""

    def calculate(self, config) -> InterpretationResult:
        logger = get_logger()
        logger.calculation_start(
            "interpretation",
            config.formula,
            interpretation=config.interpretation,
            statement=config.statement,
        )

        assignment = parse_interpretation(config.interpretation)
        expects_true, body = parse_assertion(config.statement)
        if not body:
            raise FormatError(f"Statement '{config.statement}' has no formula")

        simplifier = AlgebraicSimplifier()
        simplified = simplifier.simplify(substitute(parse(config.formula), assignment))
        logger.debug(f"Formula under {assignment}: {simplified}")

        statement_text = body.replace(PLACEHOLDER, f"({simplified})")
        value_node = simplifier.simplify(substitute(parse(statement_text), assignment))

        statement_value = value_node.truth if isinstance(value_node, ast.Constant) else None
        is_valid = statement_value is not None and statement_value == expects_true

        logger.calculation_result(
            "interpretation", f"{statement_text} ↦ {value_node}, valid={is_valid}"
        )
        return InterpretationResult(
            formula=config.formula,
            interpretation=config.interpretation,
            statement=config.statement,
            assignment=assignment,
            simplified_formula=str(simplified),
            statement_formula=statement_text,
            statement_value=statement_value,
            is_valid=is_valid,
        )
