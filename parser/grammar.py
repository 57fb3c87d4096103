# parser/grammar.py
# This file is part of Lumen - A Propositional Formula Engine
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional grammar implementation using SLY parser generator.

This module defines the grammar rules and parsing logic for propositional
formulas. The parser constructs Abstract Syntax Trees from token streams
provided by the lexer, handling operator precedence and associativity.

Operator Precedence (lowest to highest):
- IFF ('↔'): left-associative
- IMPLIES ('→'): left-associative
- OR ('∨'): left-associative
- AND ('∧'): left-associative
- NOT ('¬'): right-associative prefix
"""

from typing import List

from sly import Parser
from .lexer import FormulaLexer
from .ast_nodes import Expr, Variable, Constant, Not, Binary
from .exceptions import (
    ParseError,
    UnexpectedEndError,
    MissingParenthesisError,
    UnexpectedTokenError,
    TrailingTokensError,
)
from utils.logger import get_logger

# Token types that complete an operand; a syntax error right after one of
# these means the formula (or a parenthesised group) was already complete.
_OPERAND_END = {"VAR", "TOP", "BOTTOM", "RPAREN"}
_BINARY_TOKENS = {"AND", "OR", "IMPLIES", "IFF"}


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    Attributes:
        tokens: Token types from FormulaLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = FormulaLexer.tokens

    precedence = (
        ("left", "IFF"),
        ("left", "IMPLIES"),
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: complete formula is a single expression."""
        return p.expr

    @_("expr IFF expr", "expr IMPLIES expr", "expr OR expr", "expr AND expr")
    def expr(self, p) -> Expr:
        """Binary connective, built from the operator glyph."""
        return Binary.make(p[1], p.expr0, p.expr1)

    @_("NOT expr")
    def expr(self, p) -> Expr:
        """Negation operator."""
        return Not(p.expr)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("VAR")
    def expr(self, p) -> Expr:
        """Single-letter propositional variable."""
        return Variable(p.VAR)

    @_("TOP", "BOTTOM")
    def expr(self, p) -> Expr:
        """Boolean constant."""
        return Constant(p[0])

    def parse(self, text: str) -> Expr:
        """Parse formula text into AST.

        The token stream is materialised first so that lexical errors surface
        before parsing starts and so that syntax errors can be classified
        against the tokens already consumed.

        Args:
            text: Formula string to parse

        Returns:
            Root AST node representing the parsed formula

        Raises:
            ParseError: If the formula is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        self._tokens = list(FormulaLexer().tokenize(text))
        ast_result = super().parse(iter(self._tokens))

        if ast_result is None:
            raise UnexpectedEndError()

        logger.debug(f"Successfully parsed formula into {type(ast_result).__name__}")
        return ast_result

    def error(self, token):
        """Classify a syntax error and raise the matching ParseError.

        Args:
            token: Problematic token or None for end of input

        Raises:
            ParseError: Always raised
        """
        consumed = self._consumed_before(token)
        previous = consumed[-1].type if consumed else None
        depth = _open_parentheses(consumed)

        if token is None:
            if previous in _OPERAND_END and depth > 0:
                raise MissingParenthesisError()
            raise UnexpectedEndError()

        if previous in _OPERAND_END and token.type not in _BINARY_TOKENS:
            if depth > 0:
                raise MissingParenthesisError()
            raise TrailingTokensError(token.value, token.index)

        raise UnexpectedTokenError(token.value, token.index)

    def _consumed_before(self, token) -> List:
        if token is None:
            return self._tokens
        for i, candidate in enumerate(self._tokens):
            if candidate is token:
                return self._tokens[:i]
        raise ParseError(f"Syntax error near '{token.value}'")


def _open_parentheses(tokens) -> int:
    depth = 0
    for token in tokens:
        if token.type == "LPAREN":
            depth += 1
        elif token.type == "RPAREN":
            depth -= 1
    return depth

