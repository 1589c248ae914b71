"""Pytest configuration and fixtures for macrolint tests."""

import pytest

from macrolint import DiagnosticCollector, Linter, UndeclaredVariableInMacro
from macrolint.analysis import NodeTraverser


@pytest.fixture
def collector():
    """Create an empty in-memory diagnostic sink."""
    return DiagnosticCollector()


@pytest.fixture
def linter():
    """Create a Linter with the default configuration."""
    return Linter()


@pytest.fixture
def run_visitor(collector):
    """Traverse an AST with a fresh UndeclaredVariableInMacro.

    Returns the collected diagnostics as (macro, variable) pairs.
    """

    def run(ast):
        NodeTraverser([UndeclaredVariableInMacro(collector)]).traverse(ast)
        return [(d.macro_name, d.variable_name) for d in collector]

    return run
