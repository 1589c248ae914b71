"""Enter/leave traversal for template AST analysis.

Provides iter_child_nodes for generic child iteration, the NodeVisitor
base class, and NodeTraverser, which drives one depth-first pass per
visitor in priority order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import fields

from macrolint.exceptions import InvalidVisitorError
from macrolint.nodes import Node

logger = logging.getLogger(__name__)


def iter_child_nodes(node: Node) -> Iterator[Node]:
    """Yield the direct children of a node in source order.

    Fields are read in declaration order, which follows the order the
    constructs appear in the template. Handles plain node fields, node
    sequences, ``(test, body)`` elif pairs, ``(pattern, guard, body)``
    match cases and dict values (kwargs, call slots).
    """
    for f in fields(node):
        yield from _iter_nodes(getattr(node, f.name))


def _iter_nodes(value: object) -> Iterator[Node]:
    if isinstance(value, Node):
        yield value
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _iter_nodes(item)
    elif isinstance(value, dict):
        for item in value.values():
            yield from _iter_nodes(item)


class NodeVisitor:
    """Base class for enter/leave visitors.

    Subclasses override ``enter_node`` and ``leave_node``; both must
    return the node (visitors here never rewrite the tree). Visitors
    with a lower ``priority`` run first.
    """

    priority: int = 0

    def enter_node(self, node: Node) -> Node:
        return node

    def leave_node(self, node: Node) -> Node:
        return node


class NodeTraverser:
    """Drive registered visitors over a tree.

    Each visitor gets its own complete depth-first pass: ``enter_node``
    in pre-order, then the children left to right, then ``leave_node``
    in post-order. Visitors run in ascending priority; ties keep
    registration order.

    Example:
        >>> traverser = NodeTraverser([UndeclaredVariableInMacro(sink)])
        >>> traverser.traverse(template_ast)
    """

    def __init__(self, visitors: Iterable[NodeVisitor] = ()) -> None:
        self._visitors: list[NodeVisitor] = list(visitors)

    def add_visitor(self, visitor: NodeVisitor) -> None:
        self._visitors.append(visitor)

    @property
    def visitors(self) -> list[NodeVisitor]:
        """Registered visitors in run order."""
        return sorted(self._visitors, key=lambda v: v.priority)

    def traverse(self, node: Node) -> Node:
        """Run every visitor over ``node`` and return the resulting tree."""
        for visitor in self.visitors:
            logger.debug("Running %s over %s", type(visitor).__name__, type(node).__name__)
            node = self._traverse_for_visitor(visitor, node)
        return node

    def _traverse_for_visitor(self, visitor: NodeVisitor, node: Node) -> Node:
        node = _expect_node(visitor, "enter_node", visitor.enter_node(node))
        for child in iter_child_nodes(node):
            self._traverse_for_visitor(visitor, child)
        return _expect_node(visitor, "leave_node", visitor.leave_node(node))


def _expect_node(visitor: NodeVisitor, hook: str, result: object) -> Node:
    if not isinstance(result, Node):
        raise InvalidVisitorError(visitor, hook, result)
    return result
