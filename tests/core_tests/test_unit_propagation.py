# tests/core_tests/test_unit_propagation.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Test suite for clause parsing and unit propagation

"""Test suite for unit propagation.

This module covers reading CNF formulas into clause lists, the propagation
engine in both of its modes, and the canonical ``(l);(l,l)`` rendering of the
standalone analysis.
"""

import pytest
from parser import ParseError
from core import CalculationConfig, ClauseFormatError, PropagationOutcome, UnitPropagation
from core.propagation import (
    UnitPropagator,
    clause_variables,
    format_literal,
    format_propagation,
    negate_literal,
    parse_clauses,
)
from utils.logger import get_logger


class TestClauseParsing:
    """Test cases for reading formulas in clause form."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    CLAUSE_CASES = [
        ("a", [["a"]]),
        ("¬a", [["¬a"]]),
        ("(a∨b)∧(¬a)", [["a", "b"], ["¬a"]]),
        ("(a∨¬b∨c)∧d", [["a", "¬b", "c"], ["d"]]),
        ("a∨b", [["a", "b"]]),
        ("(a)∧(b)∧(c)", [["a"], ["b"], ["c"]]),
    ]

    @pytest.mark.parametrize("formula, expected", CLAUSE_CASES)
    def test_parse_clauses(self, formula, expected):
        """Test that clauses keep the input order of clauses and literals.

        Args:
            formula: CNF formula text
            expected: Expected clause list
        """
        assert parse_clauses(formula) == expected

    NON_CNF_CASES = ["(a∧b)∨c", "¬¬a", "a→b", "a∨⊤", "¬(a∨b)", "a↔b"]

    @pytest.mark.parametrize("formula", NON_CNF_CASES)
    def test_non_cnf_rejected(self, formula):
        """Test that formulas outside clause form raise ClauseFormatError.

        Args:
            formula: Formula that is not a conjunction of clauses
        """
        with pytest.raises(ClauseFormatError):
            parse_clauses(formula)

    def test_syntax_error_is_parse_error(self):
        """Test that malformed input is reported by the parser."""
        with pytest.raises(ParseError):
            parse_clauses("(a∨b")

    def test_literal_helpers(self):
        """Test literal negation, rendering and variable order."""
        assert negate_literal("a") == "¬a"
        assert negate_literal("¬a") == "a"
        assert format_literal("¬a") == "-a"
        assert format_literal("a") == "a"
        assert clause_variables([["b", "¬a"], ["a", "c"]]) == ["b", "a", "c"]


class TestUnitPropagator:
    """Test cases for the propagation engine."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_all_clauses_satisfied(self):
        """Test propagation that satisfies every clause."""
        result = UnitPropagator().run([["a", "b"], ["¬a"]])

        assert result.outcome is PropagationOutcome.EMPTY
        assert result.literals == ["¬a", "b"]
        assert result.assignments == {"a": False, "b": True}
        assert result.clauses == []

    def test_contradiction_stops(self):
        """Test that an emptied clause is a contradiction when requested."""
        result = UnitPropagator(stop_on_contradiction=True).run(
            [["a"], ["¬a", "b"], ["¬b"]]
        )

        assert result.outcome is PropagationOutcome.CONTRADICTION
        assert result.literals == ["a", "b"]

    def test_emptied_clause_dropped(self):
        """Test that emptied clauses are dropped when not stopping."""
        result = UnitPropagator(stop_on_contradiction=False).run([["a"], ["¬a"]])

        assert result.outcome is PropagationOutcome.EMPTY
        assert result.literals == ["a"]

    def test_stalls_without_unit_clause(self):
        """Test that propagation stops when no unit clause remains."""
        result = UnitPropagator().run([["a", "b"], ["c"], ["¬c", "d", "e"]])

        assert result.outcome is PropagationOutcome.STALLED
        assert result.literals == ["c"]
        assert result.clauses == [["a", "b"], ["d", "e"]]

    def test_leftmost_unit_clause_first(self):
        """Test that the leftmost unit clause is propagated first."""
        result = UnitPropagator().run([["b"], ["a"]])
        assert result.literals == ["b", "a"]

    def test_input_not_mutated(self):
        """Test that the caller's clause list is left untouched."""
        clauses = [["a", "b"], ["¬a"]]
        UnitPropagator().run(clauses)
        assert clauses == [["a", "b"], ["¬a"]]

    def test_steps_recorded(self):
        """Test that each propagated literal records its before/after clauses."""
        result = UnitPropagator().run([["a", "b"], ["¬a"]])

        assert [step.literal for step in result.steps] == ["¬a", "b"]
        assert result.steps[0].before == [["a", "b"], ["¬a"]]
        assert result.steps[0].after == [["b"]]
        assert result.steps[1].after == []

    def test_variable_assigned_once(self):
        """Test that a propagated variable never reappears in a later unit clause."""
        result = UnitPropagator().run([["a"], ["a"], ["¬a", "c"], ["a", "¬c"], ["¬a"]])

        assert result.outcome is PropagationOutcome.CONTRADICTION
        assert result.literals == ["a"]
        assert result.assignments == {"a": True}

    def test_assignments_follow_literal_sign(self):
        """Test that each propagated literal is recorded as one assignment."""
        result = UnitPropagator().run([["¬a"], ["a", "b"], ["¬b", "¬c"], ["c", "d"]])

        assert result.outcome is PropagationOutcome.EMPTY
        assert result.literals == ["¬a", "b", "¬c", "d"]
        assert result.assignments == {"a": False, "b": True, "c": False, "d": True}


class TestUnitPropagationAnalysis:
    """Test cases for the standalone unit propagation analysis."""

    def setup_method(self):
        """Initialize analysis for each test method."""
        self.analysis = UnitPropagation()
        self.logger = get_logger()

    FORMATTED_CASES = [
        ("(a∨b)∧(¬a)", "(-a);(b)"),
        ("(a∨b)∧(c)∧(¬c∨d∨e)", "(c);(a,b);(d,e)"),
        ("(c∨¬b∨a)∧(d)", "(d);(a,-b,c)"),
        ("(a∨b)∧(¬a∨b)", "(a,b);(-a,b)"),
        ("a∧¬a", "(a)"),
        ("¬p", "(-p)"),
    ]

    @pytest.mark.parametrize("formula, expected", FORMATTED_CASES)
    def test_formatted_result(self, formula, expected):
        """Test the canonical rendering of propagation results.

        Args:
            formula: CNF formula text
            expected: Expected formatted result
        """
        result = self.analysis.calculate(CalculationConfig(formula))
        self.logger.debug(f"{formula} → {result.formatted_result}")
        assert result.formatted_result == expected

    def test_result_fields(self):
        """Test the trace reported for the reference formula."""
        result = self.analysis.calculate(CalculationConfig("(a∨b)∧(¬a)"))

        assert result.literals == ["¬a", "b"]
        assert result.final_clauses == []
        assert result.outcome is PropagationOutcome.EMPTY
        assert result.steps[0].before_clauses == ["a,b", "¬a"]
        assert result.steps[0].after_clauses == ["b"]

    def test_format_propagation_sorts_literals(self):
        """Test that clause literals are sorted by variable name."""
        assert format_propagation([["c", "¬a", "b"]], ["¬d"]) == "(-d);(-a,b,c)"

    @pytest.mark.parametrize(
        "formula", ["(a∨b)∧(¬a)", "(a∨b)∧(c)∧(¬c∨d∨e)", "(a∨b)∧(¬a∨b)", "(p)∧(¬p∨q∨r)"]
    )
    def test_propagation_is_idempotent(self, formula):
        """Test that propagating the remaining clauses again does nothing.

        Args:
            formula: CNF formula without contradiction
        """
        first = UnitPropagator().run(parse_clauses(formula))
        second = UnitPropagator().run(first.clauses)

        assert second.steps == []
        assert second.clauses == first.clauses

    def test_shared_fixture_formula(self, cnf_formula):
        """Test the analysis on the shared CNF fixture."""
        result = self.analysis.calculate(CalculationConfig(cnf_formula))
        assert result.formatted_result == "(-a);(b)"
