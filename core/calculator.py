# core/calculator.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Static registry of the analyses behind a single calculate() contract

"""Algorithm registry and dispatch.

Every analysis exposes ``calculate(config)``; this module maps the algorithm
kinds onto their calculator classes so front ends select an analysis by kind
instead of by class name.

Example:
    >>> result = calculate("satisfiability", CalculationConfig("a∨¬a"))
    >>> str(result.status)
    'valid'
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Protocol, Union

from utils.logger import get_logger
from .determinism import DeterminismChecker, GeneralDeterminismChecker
from .evaluator import SatisfiabilityChecker, TruthTableGenerator
from .interpretation import InterpretationTester
from .polarity import PolarityCalculator
from .positions import SubformulaExtractor
from .propagation import UnitPropagation
from .pure_atom import PureAtomSimplifier
from .results import CalculationResult
from .tseytin import TseytinTransformer


class AlgorithmKind(Enum):
    TRUTH_TABLE = "truth-table"
    SATISFIABILITY = "satisfiability"
    SUBFORMULA = "subformula"
    UNIT_PROPAGATION = "unit-propagation"
    INTERPRETATION = "interpretation"
    POLARITY = "polarity"
    CNF_DETERMINISM = "cnf-determinism"
    PURE_ATOM = "pure-atom"
    GENERAL_DETERMINISM = "general-determinism"
    TSEYTIN = "tseytin"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CalculationConfig:
    """Inputs of a calculate() call; each analysis reads the fields it needs.

    Attributes:
        formula: Formula text
        position: Position string (subformula, polarity)
        interpretation: ``I⊨l`` / ``I⊭l`` (interpretation)
        statement: ``I⊨…`` / ``I⊭…`` possibly mentioning ``A`` (interpretation)
        type: ``"cnf"`` or ``"general"`` (cnf-determinism)
    """

    formula: str
    position: Optional[str] = None
    interpretation: Optional[str] = None
    statement: Optional[str] = None
    type: str = "cnf"


class Calculator(Protocol):
    def calculate(self, config: CalculationConfig) -> CalculationResult: ...


CALCULATORS: Dict[AlgorithmKind, Callable[[], Calculator]] = {
    AlgorithmKind.TRUTH_TABLE: TruthTableGenerator,
    AlgorithmKind.SATISFIABILITY: SatisfiabilityChecker,
    AlgorithmKind.SUBFORMULA: SubformulaExtractor,
    AlgorithmKind.UNIT_PROPAGATION: UnitPropagation,
    AlgorithmKind.INTERPRETATION: InterpretationTester,
    AlgorithmKind.POLARITY: PolarityCalculator,
    AlgorithmKind.CNF_DETERMINISM: DeterminismChecker,
    AlgorithmKind.PURE_ATOM: PureAtomSimplifier,
    AlgorithmKind.GENERAL_DETERMINISM: GeneralDeterminismChecker,
    AlgorithmKind.TSEYTIN: TseytinTransformer,
}


def get_calculator(kind: Union[AlgorithmKind, str]) -> Calculator:
    """Fresh calculator instance for ``kind``.

    Raises:
        ValueError: ``kind`` names no known algorithm
    """
    return CALCULATORS[AlgorithmKind(kind)]()


def calculate(kind: Union[AlgorithmKind, str], config: CalculationConfig) -> CalculationResult:
    """Run the analysis ``kind`` on ``config``."""
    algorithm = AlgorithmKind(kind)
    get_logger().debug(f"Dispatching {algorithm} calculation")
    return get_calculator(algorithm).calculate(config)
