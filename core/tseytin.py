# core/tseytin.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Tseytin transformation into definitional CNF

"""Tseytin transformation with one-directional definitions.

Every binary subformula, and every negation of a non-leaf, is given a fresh
name ``n0, n1, …``. Names are handed out while visiting the tree children
right-to-left and then the node itself, so the deepest rightmost subformula is
named first. Structurally equal subformulas share one name.

Each definition is emitted in one direction only (both directions for ``↔``
and ``¬``):

======== ==========================================
N = L∧R  (-L,-R,N)
N = L∨R  (L,R,-N)
N = L→R  (R,-L,-N)
N = L↔R  (-L,R,-N) (L,-R,-N) (L,R,N) (-L,-R,N)
N = ¬X   (-N,-X) (N,X)
======== ==========================================

followed by the unit clause asserting the top-level name. Literals in each
clause are ordered with plain variables first (alphabetically), then the
auxiliary names (numerically), a positive literal before its negation.
Duplicate clauses are dropped.

Giving every name the value of its subformula turns a model of the formula
into a model of the clauses. The converse does not hold: ``a∧¬a`` yields
``(a,-a,n0);(n0)``, which ``n0`` true satisfies.

    >>> TseytinTransformer().calculate(CalculationConfig("a∧b")).formatted_result
    '(-a,-b,n0);(n0)'
"""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from parser import parse
from parser import ast_nodes as ast
from utils.logger import get_logger
from .positions import child_position
from .results import CalculationResult

AUX_NAME = re.compile(r"^n(\d+)$")

TseytinClause = List[str]


@dataclass
class TseytinContext:
    """Per-transformation naming state."""

    counter: int = 0
    names: Dict[ast.Expr, str] = field(default_factory=dict)

    def fresh_name(self) -> str:
        name = f"n{self.counter}"
        self.counter += 1
        return name


@dataclass
class PositionedNode:
    """Mirror of the formula tree carrying each node's position."""

    node: ast.Expr
    position: str
    children: List[PositionedNode] = field(default_factory=list)


def build_tree(node: ast.Expr, position: str = "") -> PositionedNode:
    return PositionedNode(
        node,
        position,
        [
            build_tree(child, child_position(position, step))
            for step, child in enumerate(node.children(), start=1)
        ],
    )


def needs_name(node: ast.Expr) -> bool:
    """Binary nodes and negations of non-leaves get an auxiliary name."""
    if isinstance(node, ast.Binary):
        return True
    return isinstance(node, ast.Not) and not ast.is_leaf(node.operand)


def naming_order(tree: ast.Expr) -> List[ast.Expr]:
    """Distinct subformulas needing a name, in right-to-left post-order."""
    ordered: Dict[ast.Expr, None] = {}

    def traverse(positioned: PositionedNode):
        for child in reversed(positioned.children):
            traverse(child)
        ordered.setdefault(positioned.node, None)

    traverse(build_tree(tree))
    return [node for node in ordered if needs_name(node)]


def negate(literal: str) -> str:
    if literal == ast.TOP:
        return ast.BOTTOM
    if literal == ast.BOTTOM:
        return ast.TOP
    return literal[1:] if literal.startswith("-") else f"-{literal}"


def literal_text(node: ast.Expr, names: Dict[ast.Expr, str]) -> str:
    """Clause literal standing for ``node``: its name or its literal text."""
    if node in names:
        return names[node]
    if isinstance(node, ast.Variable):
        return node.name
    if isinstance(node, ast.Constant):
        return node.value
    if isinstance(node, ast.Not):
        return negate(literal_text(node.operand, names))
    raise ValueError(f"Subformula {node} has no name")


def define(name: str, node: ast.Expr, names: Dict[ast.Expr, str]) -> List[TseytinClause]:
    """Defining clauses of ``name`` for ``node``."""
    if isinstance(node, ast.Not):
        operand = literal_text(node.operand, names)
        return [[negate(name), negate(operand)], [name, operand]]

    left = literal_text(node.left, names)
    right = literal_text(node.right, names)
    if isinstance(node, ast.And):
        return [[negate(left), negate(right), name]]
    if isinstance(node, ast.Or):
        return [[left, right, negate(name)]]
    if isinstance(node, ast.Implies):
        return [[right, negate(left), negate(name)]]
    return [
        [negate(left), right, negate(name)],
        [left, negate(right), negate(name)],
        [left, right, name],
        [negate(left), negate(right), name],
    ]


def literal_sort_key(literal: str) -> Tuple[int, int, str, bool]:
    base = literal[1:] if literal.startswith("-") else literal
    aux = AUX_NAME.match(base)
    if aux:
        return (1, int(aux.group(1)), "", literal.startswith("-"))
    return (0, 0, base, literal.startswith("-"))


def sort_clause(clause: TseytinClause) -> TseytinClause:
    return sorted(clause, key=literal_sort_key)


def deduplicate(clauses: List[TseytinClause]) -> List[TseytinClause]:
    """Sorted clauses with duplicates removed, first occurrence kept."""
    unique: Dict[str, TseytinClause] = {}
    for clause in clauses:
        ordered = sort_clause(clause)
        unique.setdefault(",".join(ordered), ordered)
    return list(unique.values())


def format_clauses(clauses: List[TseytinClause]) -> str:
    return ";".join(f"({','.join(clause)})" for clause in clauses)


@dataclass
class AuxVariable(CalculationResult):
    variable: str
    represents: str


@dataclass
class TseytinResult(CalculationResult):
    original_formula: str
    cnf_formula: str
    aux_variables: List[AuxVariable]
    clauses: List[str]
    formatted_result: str


def transform(tree: ast.Expr) -> Tuple[List[TseytinClause], List[AuxVariable]]:
    """Definitional clauses of ``tree`` and the names introduced."""
    logger = get_logger()
    context = TseytinContext()
    clauses: List[TseytinClause] = []
    aux_variables: List[AuxVariable] = []

    for subformula in naming_order(tree):
        name = context.fresh_name()
        context.names[subformula] = name
        aux_variables.append(AuxVariable(name, str(subformula)))
        definition = define(name, subformula, context.names)
        logger.debug(f"    {name} := {subformula} → {format_clauses(definition)}")
        clauses.extend(definition)

    clauses.append([literal_text(tree, context.names)])
    return deduplicate(clauses), aux_variables


class TseytinTransformer:
    """Definitional CNF in the canonical ``(l,l);(l)`` format."""

    def calculate(self, config) -> TseytinResult:
        logger = get_logger()
        logger.calculation_start("tseytin", config.formula)

        tree = parse(config.formula)
        clauses, aux_variables = transform(tree)
        formatted = format_clauses(clauses)

        logger.calculation_result("tseytin", formatted)
        return TseytinResult(
            original_formula=config.formula,
            cnf_formula="∧".join(f"({'∨'.join(clause)})" for clause in clauses),
            aux_variables=aux_variables,
            clauses=[f"({','.join(clause)})" for clause in clauses],
            formatted_result=formatted,
        )
