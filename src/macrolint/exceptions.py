"""Exceptions for macrolint.

Exception Hierarchy:
LintError (base)
├── DiagnosticsFoundError     # Strict mode: findings were reported
└── InvalidVisitorError       # A visitor broke the traversal contract

The visitors themselves never raise: an undeclared variable is a
warning-level finding, not a failure. Exceptions only surface when the
host asks for them (strict mode) or misuses the traversal API.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING

from macrolint import terminal

if TYPE_CHECKING:
    from macrolint.diagnostics import Diagnostic


class ErrorCode(Enum):
    """Searchable codes for macrolint findings and errors.

    Format: ML-{CATEGORY}-{NUMBER}
    Categories: SCOPE (scope analysis), LINT (linter/traversal)
    """

    # Scope findings (ML-SCOPE-xxx)
    UNDECLARED_VARIABLE = "ML-SCOPE-001"

    # Linter errors (ML-LINT-xxx)
    DIAGNOSTICS_FOUND = "ML-LINT-001"
    INVALID_VISITOR = "ML-LINT-002"

    @property
    def category(self) -> str:
        """Code category (e.g., 'scope', 'lint')."""
        prefix = self.value.split("-")[1]
        return {
            "SCOPE": "scope",
            "LINT": "lint",
        }.get(prefix, "unknown")


class LintError(Exception):
    """Base exception for all macrolint errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a human-readable summary without traceback noise.

        Format::

            ML-LINT-001: 2 undeclared variable(s) found
        """
        header = str(self)
        if self.code and self.code.value not in header:
            header = terminal.format_header(self.code.value, header)
        return header


class DiagnosticsFoundError(LintError):
    """Raised by a strict Linter after traversal when findings were reported.

    Example:
        >>> Linter(config=LintConfig(strict=True)).check(ast)
        DiagnosticsFoundError: 1 undeclared variable(s) found in forms.html
    """

    code: ErrorCode | None = ErrorCode.DIAGNOSTICS_FOUND

    def __init__(self, diagnostics: Sequence[Diagnostic], template_name: str | None = None):
        self.diagnostics = tuple(diagnostics)
        self.template_name = template_name
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        message = f"{len(self.diagnostics)} undeclared variable(s) found"
        if self.template_name:
            message += f" in {self.template_name}"
        return message

    def format_compact(self) -> str:
        """Format the summary followed by every finding."""
        parts = [super().format_compact()]
        parts.extend(diagnostic.format() for diagnostic in self.diagnostics)
        return "\n".join(parts)


class InvalidVisitorError(LintError):
    """A visitor returned something other than a node from enter/leave."""

    code: ErrorCode | None = ErrorCode.INVALID_VISITOR

    def __init__(self, visitor: object, hook: str, result: object):
        self.visitor = visitor
        self.hook = hook
        self.result = result
        super().__init__(
            f"{type(visitor).__name__}.{hook}() must return a Node, "
            f"got {type(result).__name__}"
        )
