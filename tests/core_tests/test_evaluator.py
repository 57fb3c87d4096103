# tests/core_tests/test_evaluator.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Test suite for evaluation, truth tables and satisfiability

"""Test suite for truth evaluation.

Covers the variable ordering and assignment enumeration shared by the truth
table and the satisfiability checker, the evaluation visitor, and the
classification of formulas as unsatisfiable, satisfiable or valid.
"""

import pytest
from parser import parse
from core import (
    CalculationConfig,
    SatisfiabilityChecker,
    SatisfiabilityStatus,
    TruthTableGenerator,
    UnassignedVariableError,
)
from core.evaluator import evaluate, extract_variables, generate_assignments
from utils.logger import get_logger


class TestEvaluation:
    """Test cases for evaluation helpers."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_variables_sorted_and_unique(self):
        """Test that variables are collected once, in sorted order."""
        assert extract_variables(parse("(c∨a)∧¬(b→a)")) == ["a", "b", "c"]
        assert extract_variables(parse("⊤∨⊥")) == []

    def test_assignment_counter_order(self):
        """Test that bit j of counter i gives the value of variable j."""
        assignments = list(generate_assignments(["a", "b"]))

        assert assignments == [
            {"a": False, "b": False},
            {"a": True, "b": False},
            {"a": False, "b": True},
            {"a": True, "b": True},
        ]

    def test_no_variables_single_assignment(self):
        """Test that a closed formula has exactly one empty assignment."""
        assert list(generate_assignments([])) == [{}]

    EVALUATION_CASES = [
        ("a∧b", {"a": True, "b": False}, False),
        ("a∨b", {"a": False, "b": True}, True),
        ("a→b", {"a": True, "b": False}, False),
        ("a→b", {"a": False, "b": False}, True),
        ("a↔b", {"a": False, "b": False}, True),
        ("¬a", {"a": True}, False),
        ("⊤∧¬⊥", {}, True),
    ]

    @pytest.mark.parametrize("formula, assignment, expected", EVALUATION_CASES)
    def test_evaluate(self, formula, assignment, expected):
        """Test the truth value of formulas under total assignments.

        Args:
            formula: Formula text
            assignment: Variable values
            expected: Expected truth value
        """
        assert evaluate(parse(formula), assignment) is expected

    def test_unassigned_variable(self):
        """Test that evaluating with a missing variable raises."""
        with pytest.raises(UnassignedVariableError) as exc_info:
            evaluate(parse("a∧b"), {"a": True})

        assert exc_info.value.name == "b"
        assert isinstance(exc_info.value, KeyError)


class TestTruthTable:
    """Test cases for the truth table analysis."""

    def setup_method(self):
        """Initialize generator for each test method."""
        self.generator = TruthTableGenerator()
        self.logger = get_logger()

    def test_implication_table(self):
        """Test the rows of a→b."""
        result = self.generator.calculate(CalculationConfig("a→b"))

        assert result.variables == ["a", "b"]
        assert [row.result for row in result.rows] == [True, False, True, True]
        assert result.rows[1].assignment == {"a": True, "b": False}

    def test_row_count(self):
        """Test that n variables give 2**n rows."""
        result = self.generator.calculate(CalculationConfig("(a∨b)∧(c∨d)"))
        assert len(result.rows) == 16

    def test_to_dict(self):
        """Test the plain-data view of a truth table."""
        data = self.generator.calculate(CalculationConfig("¬p")).to_dict()

        assert data == {
            "formula": "¬p",
            "variables": ["p"],
            "rows": [
                {"assignment": {"p": False}, "result": True},
                {"assignment": {"p": True}, "result": False},
            ],
        }


class TestSatisfiability:
    """Test cases for the satisfiability analysis."""

    def setup_method(self):
        """Initialize checker for each test method."""
        self.checker = SatisfiabilityChecker()
        self.logger = get_logger()

    STATUS_CASES = [
        ("a→a", SatisfiabilityStatus.VALID, 2, 2),
        ("a∨¬a", SatisfiabilityStatus.VALID, 2, 2),
        ("a∧¬a", SatisfiabilityStatus.UNSATISFIABLE, 0, 2),
        ("a∧b", SatisfiabilityStatus.SATISFIABLE, 1, 4),
        ("⊤", SatisfiabilityStatus.VALID, 1, 1),
        ("⊥", SatisfiabilityStatus.UNSATISFIABLE, 0, 1),
    ]

    @pytest.mark.parametrize("formula, status, true_count, total", STATUS_CASES)
    def test_status(self, formula, status, true_count, total):
        """Test classification by number of true rows.

        Args:
            formula: Formula text
            status: Expected classification
            true_count: Expected number of true assignments
            total: Expected number of assignments
        """
        result = self.checker.calculate(CalculationConfig(formula))

        assert result.status is status
        assert result.true_count == true_count
        assert result.total == total

    def test_first_model_matches_truth_table(self):
        """Test that the model is the first true row of the truth table."""
        formula = "(a∨b)∧¬a"
        result = self.checker.calculate(CalculationConfig(formula))
        table = TruthTableGenerator().calculate(CalculationConfig(formula))

        first_true = next(row.assignment for row in table.rows if row.result)
        assert result.model == first_true == {"a": False, "b": True}

    def test_unsatisfiable_has_no_model(self):
        """Test that unsatisfiable formulas report no model."""
        result = self.checker.calculate(CalculationConfig("a∧¬a"))
        assert result.model is None
        assert result.to_dict()["status"] == "unsatisfiable"
