# core/polarity.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Polarity of subformula occurrences

"""Polarity of subformula occurrences.

The root occurs positively. Descending into the operand of a negation or into
the antecedent of an implication flips the sign; every other descent keeps it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from parser import parse
from parser import ast_nodes as ast
from utils.logger import get_logger
from .exceptions import PositionError
from .positions import child_position, parse_position, step_into
from .results import CalculationResult


class Polarity(Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    MIXED = "mixed"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_sign(cls, sign: int) -> Polarity:
        if sign == 1:
            return cls.POSITIVE
        if sign == -1:
            return cls.NEGATIVE
        return cls.MIXED


def flips_polarity(node: ast.Expr, step: int) -> bool:
    """True when descending from ``node`` by ``step`` flips the sign."""
    return isinstance(node, ast.Not) or (isinstance(node, ast.Implies) and step == 1)


def polarity_at(tree: ast.Expr, position: Optional[str]) -> int:
    """Sign (+1/-1) of the occurrence at ``position``.

    Raises:
        PositionError: ``position`` does not address a node of ``tree``
    """
    steps = parse_position(position)
    if steps is None:
        raise PositionError(position)

    sign = 1
    node = tree
    for step in steps:
        child = step_into(node, step)
        if child is None:
            raise PositionError(position)
        if flips_polarity(node, step):
            sign = -sign
        node = child
    return sign


@dataclass
class AnnotatedNode(CalculationResult):
    """A formula node tagged with its position and polarity sign."""

    node: ast.Expr
    position: str
    polarity: int
    children: Tuple[AnnotatedNode, ...] = field(default_factory=tuple)

    @property
    def polarity_name(self) -> Polarity:
        return Polarity.from_sign(self.polarity)


def annotate_polarity(node: ast.Expr, polarity: int = 1, position: str = "") -> AnnotatedNode:
    """Tag every node of ``node`` with its position and polarity."""
    children = tuple(
        annotate_polarity(
            child,
            -polarity if flips_polarity(node, step) else polarity,
            child_position(position, step),
        )
        for step, child in enumerate(node.children(), start=1)
    )
    return AnnotatedNode(node, position, polarity, children)


def format_annotated_tree(tree: AnnotatedNode) -> str:
    """Render an annotated tree with branch drawing, one node per line.

    The root line is ``formula [polarity]``; every other line carries the
    node's position before the formula.
    """
    lines = [f"{tree.node} [{tree.polarity_name}]"]

    def format_node(annotated: AnnotatedNode, prefix: str, is_last: bool):
        branch = "└── " if is_last else "├── "
        lines.append(
            f"{prefix}{branch}{annotated.position}: {annotated.node} "
            f"[{annotated.polarity_name}]"
        )
        child_prefix = prefix + ("    " if is_last else "│   ")
        for i, child in enumerate(annotated.children):
            format_node(child, child_prefix, i == len(annotated.children) - 1)

    for i, child in enumerate(tree.children):
        format_node(child, "", i == len(tree.children) - 1)
    return "\n".join(lines)


@dataclass
class PolarityResult(CalculationResult):
    formula: str
    position: str
    polarity: Polarity
    polarity_value: int
    subformula: str
    tree: AnnotatedNode
    formatted_tree: str


class PolarityCalculator:
    """Polarity of the subformula at a position, plus the annotated tree."""

    def calculate(self, config) -> PolarityResult:
        logger = get_logger()
        position = config.position or ""
        logger.calculation_start("polarity", config.formula, position=position)

        tree = parse(config.formula)
        value = polarity_at(tree, position)
        polarity = Polarity.from_sign(value)

        annotated = annotate_polarity(tree)
        subformula = str(subformula_of(annotated, position))

        logger.calculation_result("polarity", f"{subformula} is {polarity}")
        return PolarityResult(
            formula=config.formula,
            position=position,
            polarity=polarity,
            polarity_value=value,
            subformula=subformula,
            tree=annotated,
            formatted_tree=format_annotated_tree(annotated),
        )


def subformula_of(annotated: AnnotatedNode, position: str) -> ast.Expr:
    """Node at ``position`` of an annotated tree (position already validated)."""
    for step in parse_position(position) or ():
        annotated = annotated.children[step - 1]
    return annotated.node


def annotated_nodes(tree: AnnotatedNode) -> List[AnnotatedNode]:
    """All annotated nodes in left-then-right pre-order."""
    nodes = [tree]
    for child in tree.children:
        nodes.extend(annotated_nodes(child))
    return nodes
