# parser/formatter.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Text and LaTeX rendering of formula ASTs

"""Renders formula ASTs as plain text or LaTeX.

The text form is the one produced by ``str(node)``: binary nodes are always
fully parenthesised and never elided by precedence, so re-parsing the output
yields a structurally equal tree. The LaTeX form maps every glyph to its macro.
"""

from __future__ import annotations
from . import ast_nodes as ast

LATEX_SYMBOLS = {
    ast.NEGATION: "\\neg",
    ast.And.operator: "\\land",
    ast.Or.operator: "\\lor",
    ast.Implies.operator: "\\rightarrow",
    ast.Iff.operator: "\\leftrightarrow",
    ast.TOP: "\\top",
    ast.BOTTOM: "\\bot",
}


class LatexFormatter(ast.Visitor):
    """Visitor producing the LaTeX rendering of a formula."""

    def visit_variable(self, n: ast.Variable) -> str:
        return n.name

    def visit_constant(self, n: ast.Constant) -> str:
        return LATEX_SYMBOLS[n.value]

    def visit_not(self, n: ast.Not) -> str:
        return f"{LATEX_SYMBOLS[ast.NEGATION]}{{{n.operand.accept(self)}}}"

    def _binary(self, n: ast.Binary) -> str:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return f"({left} {LATEX_SYMBOLS[n.operator]} {right})"

    visit_and = _binary
    visit_or = _binary
    visit_implies = _binary
    visit_iff = _binary


def format_formula(node: ast.Expr, style: str = "text") -> str:
    """Render ``node`` in the requested style.

    Args:
        node: Formula to render
        style: ``"text"`` (default) or ``"latex"``; unknown styles fall back
            to text

    Returns:
        Rendered formula string
    """
    if style == "latex":
        return node.accept(LatexFormatter())
    return str(node)
