"""Control flow nodes for the template AST."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from macrolint.nodes.base import Node
from macrolint.nodes.expressions import Expr


@dataclass(frozen=True, slots=True)
class If(Node):
    """Conditional: {% if cond %}...{% elif cond %}...{% else %}...{% end %}"""

    test: Expr
    body: Sequence[Node]
    elif_: Sequence[tuple[Expr, Sequence[Node]]] = ()
    else_: Sequence[Node] = ()


@dataclass(frozen=True, slots=True)
class For(Node):
    """For loop: {% for x in items %}...{% empty %}...{% end %}

    ``target`` is a store-context Name (``x``) or Tuple (``k, v``).
    """

    target: Expr
    iter: Expr
    body: Sequence[Node]
    empty: Sequence[Node] = ()
    test: Expr | None = None


@dataclass(frozen=True, slots=True)
class AsyncFor(Node):
    """Async for loop: {% async for x in async_items %}...{% end %}"""

    target: Expr
    iter: Expr
    body: Sequence[Node]
    empty: Sequence[Node] = ()
    test: Expr | None = None


@dataclass(frozen=True, slots=True)
class Match(Node):
    """Pattern matching: {% match expr %}{% case pattern [if guard] %}...{% end %}"""

    subject: Expr | None
    cases: Sequence[tuple[Expr, Expr | None, Sequence[Node]]]
