# tests/parser_tests/test_parse_errors.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Test suite for formula parser syntax validation and error handling

"""Test suite for parser error handling.

Every syntax failure raises a subclass of ParseError naming what went wrong:
an illegal character, input ending too early, a group left open, an operator
where an operand belongs, or tokens following a complete formula.
"""

import pytest
from parser import (
    parse,
    ParseError,
    InvalidCharacterError,
    UnexpectedEndError,
    MissingParenthesisError,
    UnexpectedTokenError,
    TrailingTokensError,
)
from utils.logger import get_logger


class TestParseErrors:
    """Test cases for the classification of syntax errors."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    ERROR_CASES = [
        # Empty input
        ("", UnexpectedEndError, "Empty input string"),
        ("   ", UnexpectedEndError, "Whitespace only input"),
        # Input ends while an operand is expected
        ("a∧", UnexpectedEndError, "Trailing operator"),
        ("¬", UnexpectedEndError, "Negation without operand"),
        ("(a∨", UnexpectedEndError, "Operator before end inside group"),
        ("(", UnexpectedEndError, "Lone parenthesis"),
        # Unclosed groups
        ("(a∧b", MissingParenthesisError, "Unclosed parenthesis"),
        ("((a)", MissingParenthesisError, "Nested unclosed parenthesis"),
        ("¬(a→⊤", MissingParenthesisError, "Unclosed negated group"),
        # Operators where an operand belongs
        ("∧a", UnexpectedTokenError, "Leading operator"),
        ("a∧∧b", UnexpectedTokenError, "Double operator"),
        ("()", UnexpectedTokenError, "Empty group"),
        ("a∨)", UnexpectedTokenError, "Closing parenthesis after operator"),
        # Tokens after a complete formula
        ("ab", TrailingTokensError, "Juxtaposed variables"),
        ("a)", TrailingTokensError, "Unopened parenthesis"),
        ("(a∧b))", TrailingTokensError, "Unbalanced right parenthesis"),
        ("a¬b", TrailingTokensError, "Infix negation"),
        # Illegal characters
        ("a & b", InvalidCharacterError, "ASCII connective"),
        ("p1", InvalidCharacterError, "Digit"),
        ("P", InvalidCharacterError, "Uppercase variable"),
    ]

    @pytest.mark.parametrize("invalid_input, error_type, description", ERROR_CASES)
    def test_parse_error_classification(self, invalid_input, error_type, description):
        """Test that invalid syntax raises the matching ParseError subclass.

        Args:
            invalid_input: Invalid formula string
            error_type: Expected exception class
            description: Description of the syntax error
        """
        self.logger.debug(f"Testing parse error for: '{invalid_input}' ({description})")

        with pytest.raises(error_type) as exc_info:
            parse(invalid_input)

        assert isinstance(exc_info.value, ParseError)
        assert len(str(exc_info.value)) > 0, "ParseError should have non-empty message"

    def test_specific_error_messages(self):
        """Test that syntax errors produce informative messages."""
        error_cases = [
            ("a∧", "Unexpected end of formula"),
            ("(a∧b", "Missing closing parenthesis"),
            ("a∧∧b", "Unexpected token: ∧ (at position 2)"),
            ("a)", "Unexpected tokens after formula end: ')' at position 1"),
            ("a#b", "Invalid character: # (at position 1)"),
        ]

        for invalid_input, expected_message in error_cases:
            with pytest.raises(ParseError) as exc_info:
                parse(invalid_input)

            assert str(exc_info.value) == expected_message

    def test_error_attributes(self):
        """Test that positional errors expose the offending token."""
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse("a∨→b")
        assert exc_info.value.token == "→"
        assert exc_info.value.position == 2

        with pytest.raises(TrailingTokensError) as exc_info:
            parse("a b")
        assert exc_info.value.token == "b"
        assert exc_info.value.position == 2

    def test_parser_has_no_state_between_calls(self):
        """Test that a failed parse does not affect the next one."""
        with pytest.raises(ParseError):
            parse("(a∧")

        assert str(parse("a∧b")) == "(a∧b)"
