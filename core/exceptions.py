# core/exceptions.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Exceptions raised by the analyses built on top of the parser

"""Exceptions raised by the formula analyses.

Syntax problems in the formula itself are reported by ``parser.ParseError``;
the classes here cover inputs that parse but do not have the shape an analysis
requires. A contradiction found by unit propagation is a result, not an error,
and is reported through ``PropagationOutcome``.
"""


class PositionError(LookupError):
    """A position string does not address a node of the formula."""

    def __init__(self, position: str):
        super().__init__(f'Invalid position: "{position}"')
        self.position = position


class FormatError(ValueError):
    """An auxiliary input string does not have the expected shape."""

    pass


class InterpretationFormatError(FormatError):
    """Malformed ``I⊨…`` / ``I⊭…`` interpretation or statement."""

    pass


class ClauseFormatError(FormatError):
    """Formula is not a conjunction of clauses of literals."""

    pass


class UnassignedVariableError(KeyError):
    """Evaluation reached a variable missing from the assignment."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Variable '{self.name}' has no value in the assignment"
