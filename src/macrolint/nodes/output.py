"""Output nodes for the template AST."""

from __future__ import annotations

from dataclasses import dataclass

from macrolint.nodes.base import Node
from macrolint.nodes.expressions import Expr


@dataclass(frozen=True, slots=True)
class Output(Node):
    """Output expression: {{ expr }}"""

    expr: Expr
    escape: bool = True


@dataclass(frozen=True, slots=True)
class Data(Node):
    """Raw text data between template constructs."""

    value: str
