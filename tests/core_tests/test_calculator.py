# tests/core_tests/test_calculator.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Test suite for algorithm dispatch and the reference scenarios

"""Test suite for the calculate() registry.

Every algorithm kind must be dispatchable by its kebab-case name, return a
result whose plain-data view serializes to JSON, and reproduce the reference
scenarios end to end.
"""

import json

import pytest
from core import AlgorithmKind, CALCULATORS, CalculationConfig, calculate, get_calculator
from core.results import CalculationResult
from utils.logger import get_logger


CONFIGS = {
    AlgorithmKind.TRUTH_TABLE: CalculationConfig("a→b"),
    AlgorithmKind.SATISFIABILITY: CalculationConfig("a∧¬b"),
    AlgorithmKind.SUBFORMULA: CalculationConfig("¬(a∨b)", position="1.2"),
    AlgorithmKind.UNIT_PROPAGATION: CalculationConfig("(a∨b)∧(¬a)"),
    AlgorithmKind.INTERPRETATION: CalculationConfig(
        "p∧q", interpretation="I⊨¬p", statement="I⊭A"
    ),
    AlgorithmKind.POLARITY: CalculationConfig("¬(a→b)", position="1.1"),
    AlgorithmKind.CNF_DETERMINISM: CalculationConfig("a∧¬a"),
    AlgorithmKind.PURE_ATOM: CalculationConfig("(a∨b)∧(a∨c)"),
    AlgorithmKind.GENERAL_DETERMINISM: CalculationConfig("(a∨b)∧(¬a∨b)"),
    AlgorithmKind.TSEYTIN: CalculationConfig("a∧b"),
}


class TestCalculatorRegistry:
    """Test cases for dispatch by algorithm kind."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_every_kind_registered(self):
        """Test that every algorithm kind has a calculator."""
        assert set(CALCULATORS) == set(AlgorithmKind)

    @pytest.mark.parametrize("kind", list(AlgorithmKind))
    def test_dispatch_by_name(self, kind):
        """Test that every kind runs by name and serializes to JSON.

        Args:
            kind: Algorithm kind
        """
        result = calculate(kind.value, CONFIGS[kind])

        assert isinstance(result, CalculationResult)
        encoded = json.dumps(result.to_dict(), ensure_ascii=False)
        self.logger.debug(f"{kind}: {encoded}")
        assert json.loads(encoded) == result.to_dict()

    def test_unknown_kind(self):
        """Test that an unknown algorithm name raises ValueError."""
        with pytest.raises(ValueError):
            get_calculator("resolution")

    def test_fresh_calculator_per_call(self):
        """Test that get_calculator returns independent instances."""
        assert get_calculator("tseytin") is not get_calculator("tseytin")


class TestReferenceScenarios:
    """End-to-end reference results."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_unit_propagation(self):
        result = calculate("unit-propagation", CalculationConfig("(a∨b)∧(¬a)"))
        assert result.literals == ["¬a", "b"]
        assert result.formatted_result == "(-a);(b)"

    def test_cnf_determinism(self):
        result = calculate("cnf-determinism", CalculationConfig("a∧¬a"))
        assert str(result.determinism_result) == "unsatisfiable"

    def test_validity(self):
        table = calculate("truth-table", CalculationConfig("a→a"))
        assert all(row.result for row in table.rows)
        assert str(calculate("satisfiability", CalculationConfig("a→a")).status) == "valid"

    def test_tseytin(self):
        result = calculate("tseytin", CalculationConfig("a∧b"))
        assert result.formatted_result == "(-a,-b,n0);(n0)"

    def test_pure_atom(self):
        result = calculate("pure-atom", CalculationConfig("(a∨b)∧(a∨c)"))
        assert result.simplified_formula == "⊤"
