# core/__init__.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Core module public API for the formula analyses

"""Symbolic analyses over propositional formulas.

Every analysis takes a :class:`CalculationConfig` through ``calculate`` and
returns a structured result record. Analyses never share state between calls:
each one parses its formula afresh and builds new trees.

Primary Components:
    TruthTableGenerator, SatisfiabilityChecker: brute-force evaluation
    SubformulaExtractor: position addressing
    UnitPropagation: standalone unit propagation trace
    DeterminismChecker, GeneralDeterminismChecker: can propagation decide SAT?
    PureAtomSimplifier: pure atom elimination
    PolarityCalculator: polarity of subformula occurrences
    TseytinTransformer: definitional CNF
    InterpretationTester: statements under a partial interpretation
    calculate: dispatch by AlgorithmKind

Example:
    >>> from core import calculate, CalculationConfig
    >>> calculate("tseytin", CalculationConfig("a∨b")).formatted_result
    '(a,b,-n0);(n0)'
"""

from .calculator import (
    AlgorithmKind,
    CalculationConfig,
    Calculator,
    CALCULATORS,
    calculate,
    get_calculator,
)
from .determinism import DeterminismChecker, GeneralDeterminismChecker, DeterminismVerdict
from .evaluator import SatisfiabilityChecker, SatisfiabilityStatus, TruthTableGenerator
from .exceptions import (
    ClauseFormatError,
    FormatError,
    InterpretationFormatError,
    PositionError,
    UnassignedVariableError,
)
from .interpretation import InterpretationTester
from .polarity import Polarity, PolarityCalculator
from .positions import SubformulaExtractor, all_positions, subformula_at
from .propagation import PropagationOutcome, UnitPropagation
from .pure_atom import PureAtomSimplifier
from .tseytin import TseytinTransformer

__all__ = [
    "AlgorithmKind",
    "CalculationConfig",
    "Calculator",
    "CALCULATORS",
    "calculate",
    "get_calculator",
    "DeterminismChecker",
    "GeneralDeterminismChecker",
    "DeterminismVerdict",
    "SatisfiabilityChecker",
    "SatisfiabilityStatus",
    "TruthTableGenerator",
    "ClauseFormatError",
    "FormatError",
    "InterpretationFormatError",
    "PositionError",
    "UnassignedVariableError",
    "InterpretationTester",
    "Polarity",
    "PolarityCalculator",
    "SubformulaExtractor",
    "all_positions",
    "subformula_at",
    "PropagationOutcome",
    "UnitPropagation",
    "PureAtomSimplifier",
    "TseytinTransformer",
]

__version__ = "1.0.0"
__description__ = "Symbolic analyses over propositional formulas"
