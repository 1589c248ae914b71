"""Macro definition and call nodes for the template AST."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from macrolint.nodes.base import Node
from macrolint.nodes.expressions import Expr


@dataclass(frozen=True, slots=True)
class DefParam(Node):
    """A single parameter in a {% def %} with optional type annotation."""

    name: str
    annotation: str | None = None


@dataclass(frozen=True, slots=True)
class Def(Node):
    """Macro definition: {% def name(params) %}...{% end %}"""

    name: str
    params: Sequence[DefParam]
    body: Sequence[Node]
    defaults: Sequence[Expr] = ()
    vararg: str | None = None
    kwarg: str | None = None

    @property
    def args(self) -> tuple[str, ...]:
        """Parameter names in declaration order."""
        return tuple(p.name for p in self.params)


@dataclass(frozen=True, slots=True)
class CallBlock(Node):
    """Call macro with slot content: {% call name(args) %}...{% end %}"""

    call: Expr
    slots: dict[str, Sequence[Node]]
    args: Sequence[Expr] = ()
