"""Static analysis for template ASTs.

Provides the enter/leave traversal machinery and the macro scope check.

Components:
- NodeVisitor / NodeTraverser: priority-ordered enter/leave traversal
- UndeclaredVariableInMacro: flags undeclared names inside macros
- Linter: per-template driver with configurable sinks
- LintConfig: always-declared names, loop bindings, strict mode

Example:
    >>> from macrolint.analysis import Linter
    >>> for diagnostic in Linter().check(ast, name="forms.html"):
    ...     print(diagnostic.format())
"""

from __future__ import annotations

from macrolint.analysis.config import DEFAULT_CONFIG, TEMPLATE_GLOBALS, LintConfig
from macrolint.analysis.linter import DEFAULT_VISITORS, Linter
from macrolint.analysis.undeclared import UndeclaredVariableInMacro
from macrolint.analysis.visitor import NodeTraverser, NodeVisitor, iter_child_nodes

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_VISITORS",
    "LintConfig",
    "Linter",
    "NodeTraverser",
    "NodeVisitor",
    "TEMPLATE_GLOBALS",
    "UndeclaredVariableInMacro",
    "iter_child_nodes",
]
