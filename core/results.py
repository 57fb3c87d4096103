# core/results.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Shared behaviour of the structured records returned by calculate()

"""Base class for calculation results.

Every analysis returns a dataclass deriving from :class:`CalculationResult`.
``to_dict`` turns it into plain JSON-compatible data: formula trees become
their text rendering and enumerations their value.
"""

from dataclasses import dataclass, fields, is_dataclass
from enum import Enum
from typing import Any, Dict

from parser.ast_nodes import Expr


def to_plain(value: Any) -> Any:
    """Convert ``value`` recursively into JSON-compatible data."""
    if isinstance(value, Expr):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        items = sorted(value) if isinstance(value, (set, frozenset)) else value
        return [to_plain(item) for item in items]
    return value


@dataclass
class CalculationResult:
    """Mixin giving results a ``to_dict`` view."""

    def to_dict(self) -> Dict[str, Any]:
        return to_plain(self)
