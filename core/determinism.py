# core/determinism.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Classifies whether unit propagation alone decides satisfiability

"""Unit-propagation determinism check.

Given a formula in clause form, decides whether exhaustive unit propagation
alone settles its satisfiability. The verdict is one of:

* ``noUnitClauses``: propagation cannot even start;
* ``satisfiable``: every clause was satisfied, or every variable received a
  value;
* ``unsatisfiable``: an empty clause was produced;
* ``undetermined``: propagation stalled with open clauses.

The CNF variant maps these onto four multiple-choice statements about "the
formula". The other two variants merge ``satisfiable``/``unsatisfiable`` into a
single "can be determined" statement: the formula-set variant is what the CNF
check answers for ``type="general"``, the general variant speaks about a set of
formulas S.

Clauses are read as sets of literals, so ``(a∨a)`` is a unit clause.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from utils.logger import get_logger
from .propagation import (
    Clause,
    PropagationOutcome,
    UnitPropagator,
    clause_variables,
    parse_clauses,
)
from .results import CalculationResult


class DeterminismVerdict(Enum):
    NO_UNIT_CLAUSES = "noUnitClauses"
    SATISFIABLE = "satisfiable"
    UNSATISFIABLE = "unsatisfiable"
    UNDETERMINED = "undetermined"

    def __str__(self) -> str:
        return self.value

    @property
    def is_deterministic(self) -> bool:
        return self in (DeterminismVerdict.SATISFIABLE, DeterminismVerdict.UNSATISFIABLE)


class DeterminismVariant(Enum):
    CNF = "cnf"
    FORMULA_SET = "formula-set"
    GENERAL = "general"

    @property
    def config_type(self) -> str:
        """Value reported in ``DeterminismResult.type``."""
        return "cnf" if self is DeterminismVariant.CNF else "general"


CNF_STATEMENTS = [
    "Unit propagation cannot be used within the formula",
    "Using only unit propagation exhaustively can determine that the formula is satisfiable",
    "Unit propagation can be used within the formula, but the satisfiability cannot be "
    "determined using only unit propagation",
    "Using only unit propagation exhaustively can determine that the formula is unsatisfiable",
]

FORMULA_SET_STATEMENTS = [
    "Satisfiability can be determined using only unit propagation",
    "Satisfiability cannot be determined using only unit propagation",
    "Unit propagation cannot be used within the formula",
]

GENERAL_STATEMENTS = [
    "Satisfiability of S can be determined using only unit propagation",
    "Satisfiability of S cannot be determined using only unit propagation",
    "Unit propagation cannot be used within S",
]

_CORRECT_STATEMENT: Dict[DeterminismVariant, Dict[DeterminismVerdict, int]] = {
    DeterminismVariant.CNF: {
        DeterminismVerdict.NO_UNIT_CLAUSES: 1,
        DeterminismVerdict.SATISFIABLE: 2,
        DeterminismVerdict.UNDETERMINED: 3,
        DeterminismVerdict.UNSATISFIABLE: 4,
    },
    DeterminismVariant.GENERAL: {
        DeterminismVerdict.SATISFIABLE: 1,
        DeterminismVerdict.UNSATISFIABLE: 1,
        DeterminismVerdict.UNDETERMINED: 2,
        DeterminismVerdict.NO_UNIT_CLAUSES: 3,
    },
    DeterminismVariant.FORMULA_SET: {
        DeterminismVerdict.SATISFIABLE: 1,
        DeterminismVerdict.UNSATISFIABLE: 1,
        DeterminismVerdict.UNDETERMINED: 2,
        DeterminismVerdict.NO_UNIT_CLAUSES: 3,
    },
}

_SUBJECT: Dict[DeterminismVariant, str] = {
    DeterminismVariant.CNF: "the formula",
    DeterminismVariant.GENERAL: "the set of formulas",
    DeterminismVariant.FORMULA_SET: "this set of formulas",
}

_STATEMENTS = {
    DeterminismVariant.CNF: CNF_STATEMENTS,
    DeterminismVariant.FORMULA_SET: FORMULA_SET_STATEMENTS,
    DeterminismVariant.GENERAL: GENERAL_STATEMENTS,
}


def classify_clauses(clauses: List[Clause]) -> DeterminismVerdict:
    """Run contradiction-aware propagation and classify its terminal state."""
    clauses = [list(dict.fromkeys(clause)) for clause in clauses]
    if not any(len(clause) == 1 for clause in clauses):
        return DeterminismVerdict.NO_UNIT_CLAUSES

    result = UnitPropagator(stop_on_contradiction=True).run(clauses)

    if result.outcome is PropagationOutcome.EMPTY:
        return DeterminismVerdict.SATISFIABLE
    if result.outcome is PropagationOutcome.CONTRADICTION:
        return DeterminismVerdict.UNSATISFIABLE
    if all(var in result.assignments for var in clause_variables(clauses)):
        return DeterminismVerdict.SATISFIABLE
    return DeterminismVerdict.UNDETERMINED


def explain(verdict: DeterminismVerdict, variant: DeterminismVariant) -> str:
    """Human-readable explanation of ``verdict``."""
    subject = _SUBJECT[variant]
    if verdict is DeterminismVerdict.NO_UNIT_CLAUSES:
        return f"Unit propagation cannot be used within {subject}"
    if verdict is DeterminismVerdict.UNDETERMINED:
        return (
            "Unit propagation can be used but cannot determine satisfiability "
            f"of {subject}"
        )
    return f"Unit propagation determines that {subject} is {verdict.value}"


def statements_for(variant: DeterminismVariant) -> List[str]:
    return list(_STATEMENTS[variant])


def correct_statement(verdict: DeterminismVerdict, variant: DeterminismVariant) -> int:
    """1-based number of the statement matching ``verdict``."""
    return _CORRECT_STATEMENT[variant][verdict]


@dataclass
class DeterminismResult(CalculationResult):
    formula: str
    type: str
    is_deterministic: bool
    explanation: str
    statements: List[str]
    correct_statement: int
    determinism_result: DeterminismVerdict


class DeterminismChecker:
    """Determinism check with a fixed or config-selected variant.

    Attributes:
        variant: Forced variant, or None to read ``config.type``
    """

    def __init__(self, variant: Optional[DeterminismVariant] = None):
        self.variant = variant

    @staticmethod
    def _variant_for(type_name: str) -> DeterminismVariant:
        if type_name == "cnf":
            return DeterminismVariant.CNF
        if type_name == "general":
            return DeterminismVariant.FORMULA_SET
        raise ValueError(f"Unknown determinism type: {type_name}")

    def calculate(self, config) -> DeterminismResult:
        logger = get_logger()
        variant = self.variant or self._variant_for(config.type or "cnf")
        logger.calculation_start(f"{variant.value}-determinism", config.formula)

        clauses = parse_clauses(config.formula)
        verdict = classify_clauses(clauses)

        logger.calculation_result(f"{variant.value}-determinism", str(verdict))
        return DeterminismResult(
            formula=config.formula,
            type=variant.config_type,
            is_deterministic=verdict.is_deterministic,
            explanation=explain(verdict, variant),
            statements=statements_for(variant),
            correct_statement=correct_statement(verdict, variant),
            determinism_result=verdict,
        )


class GeneralDeterminismChecker(DeterminismChecker):
    """Determinism check phrased for a set of formulas S."""

    def __init__(self):
        super().__init__(DeterminismVariant.GENERAL)
