# core/pure_atom.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Pure atom detection and elimination

"""Pure atom elimination.

An atom is pure when every occurrence has the same polarity. Replacing a
positive pure atom by ⊤ (a negative one by ⊥) preserves satisfiability, after
which constants are folded away.

Simplification runs as two bottom-up passes: the substitution pass folds
constants while it rebuilds the tree, then one more recursive pass also cancels
double negations. No further passes are made, so deeply nested constants may
survive in the output.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Set

from parser import parse
from parser import ast_nodes as ast
from utils.logger import get_logger
from .results import CalculationResult

Polarities = Dict[str, Set[bool]]


def collect_polarities(tree: ast.Expr) -> Polarities:
    """Polarities with which each variable occurs, in first-occurrence order.

    Conjunction and disjunction keep the polarity, negation and the antecedent
    of an implication flip it, and everything below a biconditional is
    recorded with both polarities.
    """
    polarities: Polarities = {}

    def traverse(node: ast.Expr, polarity: bool):
        if isinstance(node, ast.Variable):
            polarities.setdefault(node.name, set()).add(polarity)
        elif isinstance(node, ast.Not):
            traverse(node.operand, not polarity)
        elif isinstance(node, ast.Implies):
            traverse(node.left, not polarity)
            traverse(node.right, polarity)
        elif isinstance(node, ast.Iff):
            for side in (node.left, node.right):
                traverse(side, True)
                traverse(side, False)
        elif isinstance(node, ast.Binary):
            traverse(node.left, polarity)
            traverse(node.right, polarity)

    traverse(tree, True)
    return polarities


def find_pure_atoms(polarities: Polarities) -> Dict[str, bool]:
    """Map each pure variable to its only polarity."""
    return {
        name: next(iter(signs))
        for name, signs in polarities.items()
        if len(signs) == 1
    }


def fold_binary(node: ast.Binary, left: ast.Expr, right: ast.Expr) -> ast.Expr:
    """Rebuild ``node`` over ``left``/``right`` applying constant rules."""
    left_const = isinstance(left, ast.Constant)
    right_const = isinstance(right, ast.Constant)

    if left_const and right_const:
        return _evaluate_constants(node, left.truth, right.truth)

    if isinstance(node, ast.And):
        for const, other in ((left, right), (right, left)):
            if isinstance(const, ast.Constant):
                return other if const.truth else const
    elif isinstance(node, ast.Or):
        for const, other in ((left, right), (right, left)):
            if isinstance(const, ast.Constant):
                return const if const.truth else other
    elif isinstance(node, ast.Implies):
        if left_const:
            return right if left.truth else ast.Constant(ast.TOP)
        if right_const:
            return right if right.truth else ast.Not(left)
    elif isinstance(node, ast.Iff):
        for const, other in ((left, right), (right, left)):
            if isinstance(const, ast.Constant):
                return other if const.truth else ast.Not(other)

    return type(node)(left, right)


def _evaluate_constants(node: ast.Binary, left: bool, right: bool) -> ast.Constant:
    if isinstance(node, ast.And):
        return ast.Constant.of(left and right)
    if isinstance(node, ast.Or):
        return ast.Constant.of(left or right)
    if isinstance(node, ast.Implies):
        return ast.Constant.of((not left) or right)
    return ast.Constant.of(left == right)


def substitute_pure_atoms(node: ast.Expr, pure_atoms: Mapping[str, bool]) -> ast.Expr:
    """Replace pure atoms by constants, folding constants on the way up."""
    if isinstance(node, ast.Variable):
        if node.name in pure_atoms:
            return ast.Constant.of(pure_atoms[node.name])
        return node
    if isinstance(node, ast.Not):
        operand = substitute_pure_atoms(node.operand, pure_atoms)
        if isinstance(operand, ast.Constant):
            return operand.negated()
        return ast.Not(operand)
    if isinstance(node, ast.Binary):
        return fold_binary(
            node,
            substitute_pure_atoms(node.left, pure_atoms),
            substitute_pure_atoms(node.right, pure_atoms),
        )
    return node


def simplify_once(node: ast.Expr) -> ast.Expr:
    """One recursive bottom-up constant folding pass with ¬¬P = P."""
    if isinstance(node, ast.Not):
        operand = simplify_once(node.operand)
        if isinstance(operand, ast.Constant):
            return operand.negated()
        if isinstance(operand, ast.Not):
            return operand.operand
        return ast.Not(operand)
    if isinstance(node, ast.Binary):
        return fold_binary(node, simplify_once(node.left), simplify_once(node.right))
    return node


def substitute_and_simplify(tree: ast.Expr, pure_atoms: Mapping[str, bool]) -> ast.Expr:
    return simplify_once(substitute_pure_atoms(tree, pure_atoms))


@dataclass
class PureAtomResult(CalculationResult):
    formula: str
    pure_atoms: List[str]
    simplified_formula: str
    polarities: Dict[str, List[bool]] = field(default_factory=dict)


class PureAtomSimplifier:
    """Finds pure atoms and eliminates them."""

    def calculate(self, config) -> PureAtomResult:
        logger = get_logger()
        logger.calculation_start("pure-atom", config.formula)

        tree = parse(config.formula)
        polarities = collect_polarities(tree)
        logger.debug(f"Variable polarities: {polarities}")

        pure_atoms = find_pure_atoms(polarities)
        logger.debug(f"Pure atoms: {pure_atoms}")

        simplified = substitute_and_simplify(tree, pure_atoms)

        logger.calculation_result("pure-atom", str(simplified))
        return PureAtomResult(
            formula=config.formula,
            pure_atoms=list(pure_atoms),
            simplified_formula=str(simplified),
            polarities={
                name: sorted(signs, reverse=True) for name, signs in polarities.items()
            },
        )
