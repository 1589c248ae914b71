"""macrolint — scope checks for template macros.

Template languages with dynamic scoping let a macro read any name; a
name that was never passed in or bound silently renders as undefined.
macrolint walks a parsed template AST and reports every such reference
made inside a macro body.

Quickstart:
    >>> from macrolint import Linter, nodes
    >>> ast = nodes.Template(1, 0, body=[...], name="forms.html")
    >>> for diagnostic in Linter().check(ast):
    ...     print(diagnostic.format())
    ML-SCOPE-001: The macro "input" uses an undeclared variable named "lable".
      --> forms.html:3:14

Architecture:
Template AST → NodeTraverser → visitors (enter/leave) → DiagnosticSink

Scoping rules:
- A macro sees only its parameters, ``varargs`` and any opted-in host globals
- Loop and lambda bindings end with the loop or lambda
- {% set %}/{% let %} bindings last for the rest of the macro
- Template-level references are never reported
- The subject of ``is defined`` is never reported
"""

from __future__ import annotations

from macrolint import nodes
from macrolint.analysis import (
    DEFAULT_CONFIG,
    TEMPLATE_GLOBALS,
    LintConfig,
    Linter,
    NodeTraverser,
    NodeVisitor,
    UndeclaredVariableInMacro,
)
from macrolint.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticSink,
    LoggingSink,
    Severity,
    UndeclaredVariableWarning,
    WarningsSink,
)
from macrolint.exceptions import (
    DiagnosticsFoundError,
    ErrorCode,
    InvalidVisitorError,
    LintError,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticSink",
    "DiagnosticsFoundError",
    "ErrorCode",
    "InvalidVisitorError",
    "LintConfig",
    "LintError",
    "Linter",
    "LoggingSink",
    "NodeTraverser",
    "NodeVisitor",
    "Severity",
    "TEMPLATE_GLOBALS",
    "UndeclaredVariableInMacro",
    "UndeclaredVariableWarning",
    "WarningsSink",
    "__version__",
    "nodes",
]
