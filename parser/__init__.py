# parser/__init__.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Formula parsing and rendering components for propositional logic

"""Propositional formula parsing and rendering.

This package turns formula strings written with the glyphs ``¬ ∧ ∨ → ↔ ⊤ ⊥``
and single-letter variables into immutable abstract syntax trees, and renders
those trees back to text or LaTeX.

Core Functions:
    parse: Converts formula strings into Abstract Syntax Trees
    format_formula: Renders an AST as text or LaTeX

Grammar Features:
    - Left-associative binary operators
    - Precedence ↔ < → < ∨ < ∧ < ¬
    - Parenthetical grouping support
    - Distinct error types for each kind of syntax failure

Example:
    >>> from parser import parse
    >>> str(parse("¬a∧b→c"))
    '((¬a∧b)→c)'
"""

from .exceptions import (
    ParseError,
    InvalidCharacterError,
    UnexpectedEndError,
    MissingParenthesisError,
    UnexpectedTokenError,
    TrailingTokensError,
)
from .grammar import _FormulaParser
from .formatter import format_formula
from utils.logger import get_logger


def parse(source: str):
    """Parse formula string into Abstract Syntax Tree representation.

    Uses a fresh parser instance for each invocation so that no state is
    shared between calls.

    Args:
        source: Formula string to parse

    Returns:
        Root AST node representing the parsed formula structure

    Raises:
        ParseError: Formula syntax is malformed or contains unsupported characters

    Example:
        >>> parse("a∧¬b")
        And(left=Variable(name='a'), right=Not(operand=Variable(name='b')))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = _FormulaParser()

    try:
        result = parser.parse(source)
        logger.debug(
            f"Formula parsed successfully into AST with type: {type(result).__name__}"
        )
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "parse",
    "format_formula",
    "ParseError",
    "InvalidCharacterError",
    "UnexpectedEndError",
    "MissingParenthesisError",
    "UnexpectedTokenError",
    "TrailingTokensError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing and rendering components"
