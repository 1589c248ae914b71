"""Template structure nodes for the template AST."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from macrolint.nodes.base import Node
from macrolint.nodes.expressions import Expr


@dataclass(frozen=True, slots=True)
class Import(Node):
    """Import macros from template: {% import "forms.html" as forms %}"""

    template: Expr
    target: str


@dataclass(frozen=True, slots=True)
class FromImport(Node):
    """Import specific macros: {% from "forms.html" import input, label as lbl %}"""

    template: Expr
    names: Sequence[tuple[str, str | None]]


@dataclass(frozen=True, slots=True)
class Template(Node):
    """Root node representing a complete template.

    ``name`` is the template's file path when known; diagnostics report it.
    """

    body: Sequence[Node]
    name: str | None = None
