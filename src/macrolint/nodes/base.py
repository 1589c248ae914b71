"""Base node class for the template AST."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track their source location for diagnostics.
    Nodes are immutable; visitors never rewrite them.

    """

    lineno: int
    col_offset: int
