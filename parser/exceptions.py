# parser/exceptions.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Custom exceptions for formula tokenization and parsing

"""Domain-specific exceptions for propositional formula parsing.

All syntax problems derive from :class:`ParseError` so callers can catch a
single type, while the subclasses let tests and the CLI tell the failure
kinds apart. Every parse error is fatal: the parser never recovers.
"""


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Indicates that the input formula does not conform to the propositional
    grammar. Used throughout the parsing pipeline to provide consistent
    error handling.
    """

    pass


class InvalidCharacterError(ParseError):
    """The lexer met a character outside the formula alphabet."""

    def __init__(self, character: str, position: int):
        super().__init__(f"Invalid character: {character} (at position {position})")
        self.character = character
        self.position = position


class UnexpectedEndError(ParseError):
    """Input ran out where an operand was still expected."""

    def __init__(self):
        super().__init__("Unexpected end of formula")


class MissingParenthesisError(ParseError):
    """A parenthesised group was never closed."""

    def __init__(self):
        super().__init__("Missing closing parenthesis")


class UnexpectedTokenError(ParseError):
    """An operator or ')' appeared where an operand was expected."""

    def __init__(self, token: str, position: int):
        super().__init__(f"Unexpected token: {token} (at position {position})")
        self.token = token
        self.position = position


class TrailingTokensError(ParseError):
    """A complete formula was followed by further tokens."""

    def __init__(self, token: str, position: int):
        super().__init__(
            f"Unexpected tokens after formula end: '{token}' at position {position}"
        )
        self.token = token
        self.position = position
