# tests/conftest.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the formula engine tests.

This module ensures the project packages are importable from the repository
root and provides small formula fixtures shared by several suites.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the project packages import before any test runs.

    Yields:
        None: Control to test execution
    """
    try:
        import core
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def cnf_formula():
    """Small CNF formula on which unit propagation succeeds.

    Returns:
        str: Formula in clause form
    """
    return "(a∨b)∧(¬a)"


@pytest.fixture
def nested_formula():
    """Formula mixing every connective.

    Returns:
        str: Formula text
    """
    return "¬(a→b)∨(c↔¬d)∧⊤"
