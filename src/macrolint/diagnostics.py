"""Diagnostic records and sinks.

A Diagnostic is a non-fatal finding produced by an analysis visitor.
Visitors hand findings to a DiagnosticSink; where they end up (a list,
the warnings machinery, a log) is the host's choice.

Example:
    ```
    ML-SCOPE-001: The macro "card" uses an undeclared variable named "titel".
      --> components/card.html:4:12
    ```
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from macrolint import terminal
from macrolint.exceptions import ErrorCode

logger = logging.getLogger(__name__)


class Severity(Enum):
    """Severity of a diagnostic."""

    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single finding with its source location.

    Attributes:
        macro_name: Macro whose body contains the finding.
        template_name: Template file path (or "<template>").
        lineno: 1-based line of the offending node.
        variable_name: The undeclared name.
        col_offset: Column of the offending node.
        severity: Always WARNING for scope findings.
        code: Searchable code for the finding kind.
    """

    macro_name: str
    template_name: str
    lineno: int
    variable_name: str
    col_offset: int = 0
    severity: Severity = Severity.WARNING
    code: ErrorCode = ErrorCode.UNDECLARED_VARIABLE

    @property
    def message(self) -> str:
        return (
            f'The macro "{self.macro_name}" uses an undeclared variable '
            f'named "{self.variable_name}".'
        )

    @property
    def location(self) -> str:
        return f"{self.template_name}:{self.lineno}:{self.col_offset}"

    def format(self) -> str:
        """Format as a two-line terminal diagnostic (colored when supported)."""
        header = terminal.format_header(
            self.code.value,
            self.message,
            warning=self.severity is Severity.WARNING,
        )
        return f"{header}\n  {terminal.dim_text('-->')} {terminal.location(self.location)}"

    def __str__(self) -> str:
        return f"{self.location}: {self.code.value} {self.message}"


class DiagnosticSink(Protocol):
    """Anything that accepts diagnostics."""

    def emit(self, diagnostic: Diagnostic) -> None: ...


class DiagnosticCollector:
    """In-memory sink; keeps findings in emission order.

    Example:
        >>> sink = DiagnosticCollector()
        >>> Linter(sink=sink).check(ast)
        >>> [d.variable_name for d in sink]
        ['titel']
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def emit(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    def clear(self) -> None:
        self._diagnostics.clear()

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __bool__(self) -> bool:
        return bool(self._diagnostics)


class UndeclaredVariableWarning(UserWarning):
    """Warning category for undeclared variables used inside a macro."""


class WarningsSink:
    """Report each finding through ``warnings.warn``.

    Lets hosts filter or escalate findings with the standard warnings
    filters (``-W error::macrolint.UndeclaredVariableWarning``).
    """

    def __init__(self, category: type[Warning] = UndeclaredVariableWarning) -> None:
        self.category = category

    def emit(self, diagnostic: Diagnostic) -> None:
        warnings.warn(str(diagnostic), self.category, stacklevel=2)


class LoggingSink:
    """Log each finding at WARNING level."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def emit(self, diagnostic: Diagnostic) -> None:
        self._log.warning(
            "%s: %s %s",
            diagnostic.location,
            diagnostic.code.value,
            diagnostic.message,
        )
