# core/positions.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Position addressing of subformulas and subformula extraction

"""Position addressing for formula trees.

A position is a dot-separated path of steps from the root: ``1`` selects the
operand of a negation or the left child of a binary node, ``2`` the right
child of a binary node. The empty string addresses the root.

    >>> tree = parse("¬a∧(b∨c)")
    >>> str(subformula_at(tree, "2.1"))
    'b'
    >>> all_positions(tree)
    ['', '1', '2', '1.1', '2.1', '2.2']
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from parser import parse
from parser.ast_nodes import Expr, Not, Binary
from utils.logger import get_logger
from .exceptions import PositionError
from .results import CalculationResult

ROOT_LABEL = "ε"


def child_position(position: str, step: int) -> str:
    """Position of the ``step``-th child of the node at ``position``."""
    return f"{position}.{step}" if position else str(step)


def parse_position(position: Optional[str]) -> Optional[Tuple[int, ...]]:
    """Split a position string into steps.

    Returns:
        Tuple of steps (empty for the root), or None when the string is not
        a dot-separated sequence of 1s and 2s
    """
    if not position:
        return ()
    steps = []
    for part in position.split("."):
        if part not in ("1", "2"):
            return None
        steps.append(int(part))
    return tuple(steps)


def step_into(node: Expr, step: int) -> Optional[Expr]:
    """Return the child selected by ``step`` or None if there is none."""
    if isinstance(node, Not) and step == 1:
        return node.operand
    if isinstance(node, Binary):
        return node.left if step == 1 else node.right
    return None


def subformula_at(tree: Expr, position: Optional[str]) -> Optional[Expr]:
    """Locate the subtree addressed by ``position``.

    Args:
        tree: Root of the formula
        position: Position string; empty or None addresses the root

    Returns:
        The addressed node, or None when any step is invalid
    """
    steps = parse_position(position)
    if steps is None:
        return None

    current = tree
    for step in steps:
        current = step_into(current, step)
        if current is None:
            return None
    return current


def all_positions(tree: Expr) -> List[str]:
    """Every valid position of ``tree``, root included.

    Ordered by length, then lexicographically; callers enumerate positions in
    exactly this order.
    """
    positions = [""]

    def traverse(node: Expr, position: str):
        for step, child in enumerate(node.children(), start=1):
            child_pos = child_position(position, step)
            positions.append(child_pos)
            traverse(child, child_pos)

    traverse(tree, "")
    return sorted(positions, key=lambda p: (len(p), p))


@dataclass
class SubformulaResult(CalculationResult):
    formula: str
    position: str
    subformula: str
    tree: Expr
    positions: List[str] = field(default_factory=list)


class SubformulaExtractor:
    """Extracts the subformula at a given position."""

    def calculate(self, config) -> SubformulaResult:
        """Return the subformula addressed by ``config.position``.

        Raises:
            ParseError: The formula does not parse
            PositionError: The position does not address a node
        """
        logger = get_logger()
        position = config.position or ""
        logger.calculation_start("subformula", config.formula, position=position)

        tree = parse(config.formula)
        subformula = subformula_at(tree, position)
        if subformula is None:
            raise PositionError(position)

        logger.calculation_result("subformula", str(subformula))
        return SubformulaResult(
            formula=config.formula,
            position=position or ROOT_LABEL,
            subformula=str(subformula),
            tree=tree,
            positions=all_positions(tree),
        )
