# parser/lexer.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module implements tokenization of propositional logic formulas written
with the usual Unicode glyphs, breaking input strings into tokens for parser
consumption. Variables are single lowercase letters, so ``ab`` yields two
variable tokens and it is left to the parser to reject the juxtaposition.

Supported Tokens:
- Operators: ¬, ∧, ∨, →, ↔
- Constants: ⊤, ⊥
- Grouping: (, )
- Variables: a single character in a-z
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from .exceptions import InvalidCharacterError
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "VAR",
        "TOP",
        "BOTTOM",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "IFF",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    NOT = r"¬"
    AND = r"∧"
    OR = r"∨"
    IMPLIES = r"→"
    IFF = r"↔"
    TOP = r"⊤"
    BOTTOM = r"⊥"
    LPAREN = r"\("
    RPAREN = r"\)"

    VAR = r"[a-z]"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            InvalidCharacterError: Always raised naming the character and position
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise InvalidCharacterError(illegal_char, error_pos)
