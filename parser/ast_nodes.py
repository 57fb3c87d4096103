# parser/ast_nodes.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional formulas. Because every node is a frozen
dataclass, transformations always build new trees and two structurally equal
subtrees compare (and hash) equal, which the Tseytin transformer relies on to
name repeated subformulas once.

Node Types:
    Variable: Propositional variable (a single lowercase letter)
    Constant: Boolean constants ⊤ and ⊥
    Not: Negation
    And, Or, Implies, Iff: Binary connectives sharing the Binary base

All nodes support the visitor design pattern for traversal and transformation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Dict, Protocol, Tuple, Type

TOP = "⊤"
BOTTOM = "⊥"
NEGATION = "¬"


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern."""

    def visit_variable(self, n: Variable): ...

    def visit_constant(self, n: Constant): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_implies(self, n: Implies): ...

    def visit_iff(self, n: Iff): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. Concrete node types implement ``accept`` for visitor dispatch,
    ``children`` for generic traversal and ``__str__`` for the text rendering.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def children(self) -> Tuple[Expr, ...]:
        """Return the direct subformulas in left-to-right order."""
        return ()

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Propositional variable.

    Attributes:
        name: Single lowercase letter naming the variable
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Constant(Expr):
    """Boolean constant ⊤ (verum) or ⊥ (falsum).

    Attributes:
        value: The constant glyph, either TOP or BOTTOM
    """

    value: str

    @classmethod
    def of(cls, truth: bool) -> Constant:
        """Build the constant denoting ``truth``."""
        return cls(TOP if truth else BOTTOM)

    @property
    def truth(self) -> bool:
        """Truth value denoted by this constant."""
        return self.value == TOP

    def negated(self) -> Constant:
        """Return the opposite constant."""
        return Constant.of(not self.truth)

    def accept(self, v: Visitor):
        return v.visit_constant(self)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation.

    Attributes:
        operand: The expression being negated
    """

    operator: ClassVar[str] = NEGATION

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def children(self) -> Tuple[Expr, ...]:
        return (self.operand,)

    def __str__(self) -> str:
        """Return ``¬`` followed by the operand.

        A binary operand already renders inside its own parentheses, so no
        extra grouping is added here.
        """
        return f"{NEGATION}{self.operand}"


@dataclass(frozen=True, slots=True)
class Binary(Expr):
    """Common base for the four binary connectives.

    Attributes:
        left: Left operand
        right: Right operand
        operator: Class-level connective glyph
    """

    operator: ClassVar[str] = ""

    left: Expr
    right: Expr

    @staticmethod
    def make(operator: str, left: Expr, right: Expr) -> Binary:
        """Build the binary node class registered for ``operator``.

        Raises:
            KeyError: If ``operator`` is not a binary connective glyph
        """
        return BINARY_OPERATORS[operator](left, right)

    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        """Fully parenthesised ``(left OP right)`` without spaces."""
        return f"({self.left}{self.operator}{self.right})"


@dataclass(frozen=True, slots=True)
class And(Binary):
    """Conjunction, true when both operands are true."""

    operator: ClassVar[str] = "∧"

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(Binary):
    """Disjunction, true when at least one operand is true."""

    operator: ClassVar[str] = "∨"

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Implies(Binary):
    """Material implication ``left → right``."""

    operator: ClassVar[str] = "→"

    def accept(self, v: Visitor):
        return v.visit_implies(self)


@dataclass(frozen=True, slots=True)
class Iff(Binary):
    """Biconditional ``left ↔ right``."""

    operator: ClassVar[str] = "↔"

    def accept(self, v: Visitor):
        return v.visit_iff(self)


BINARY_OPERATORS: Dict[str, Type[Binary]] = {
    And.operator: And,
    Or.operator: Or,
    Implies.operator: Implies,
    Iff.operator: Iff,
}


def is_literal(node: Expr) -> bool:
    """True for a variable or a negated variable."""
    return isinstance(node, Variable) or (
        isinstance(node, Not) and isinstance(node.operand, Variable)
    )


def is_leaf(node: Expr) -> bool:
    """True for variables and constants."""
    return isinstance(node, (Variable, Constant))
