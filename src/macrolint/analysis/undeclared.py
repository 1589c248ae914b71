"""Undeclared variable detection inside macros.

Macros in a dynamically scoped template language silently read an
undefined value when they reference a name that is neither a parameter
nor bound in their body. This visitor tracks the names in scope during
a single enter/leave traversal and reports every bare reference inside
a macro that resolves to nothing.

Scope Handling:
    - {% def m(a, b) %} starts a fresh scope holding only its parameters
    - Loop variables ({% for k, v in items %}) and ``loop`` live until the loop ends
    - Lambda parameters ((x) => x.id) live until the lambda ends
    - {% set %}, {% let %}, {% export %}, {% capture %} and imports persist
      for the rest of the enclosing macro
    - References outside a macro are never reported
    - The subject of an ``is defined`` test is never reported
"""

from __future__ import annotations

import logging

from macrolint.analysis.config import DEFAULT_CONFIG, LintConfig
from macrolint.analysis.visitor import NodeVisitor
from macrolint.diagnostics import Diagnostic, DiagnosticSink
from macrolint.nodes import (
    AsyncFor,
    Capture,
    Def,
    Export,
    For,
    FromImport,
    Import,
    Lambda,
    Let,
    List,
    Name,
    Node,
    Set,
    Template,
    Test,
    Tuple,
)

logger = logging.getLogger(__name__)

# Nodes whose bindings end with the node itself
_BLOCK_SCOPED = (For, AsyncFor, Lambda)


class UndeclaredVariableInMacro(NodeVisitor):
    """Report references to undeclared variables inside macro bodies.

    State is a flat stack of declared names plus the name of the macro
    being visited. Duplicates are kept: two nested loops may both bind
    ``item``, and leaving the inner one must not unbind the outer one.

    One instance may check several templates: state is cleared on every
    Template root and on every macro definition. Call ``reset()`` when
    driving it over bare sub-trees.

    Example:
        >>> sink = DiagnosticCollector()
        >>> NodeTraverser([UndeclaredVariableInMacro(sink)]).traverse(ast)
        >>> [(d.macro_name, d.variable_name) for d in sink]
        [('card', 'titel')]
    """

    priority = 0

    def __init__(
        self,
        sink: DiagnosticSink,
        config: LintConfig | None = None,
        template_name: str | None = None,
    ) -> None:
        self._sink = sink
        self._config = config or DEFAULT_CONFIG
        self._default_template_name = template_name or "<template>"
        self.current_macro: str | None = None
        self.scope_stack: list[str] = []
        # (start, count) of the names each open loop/lambda pushed
        self._frames: list[tuple[int, int]] = []
        # Names that are the subject of an `is defined` test
        self._guarded: set[int] = set()
        self._template_name = self._default_template_name

    @property
    def template_name(self) -> str:
        return self._template_name

    def reset(self) -> None:
        """Forget all scope state (between templates)."""
        self.current_macro = None
        self.scope_stack = []
        self._frames = []
        self._guarded = set()
        self._template_name = self._default_template_name

    def enter_node(self, node: Node) -> Node:
        if isinstance(node, Template):
            self.reset()
            if node.name:
                self._template_name = node.name
        elif isinstance(node, Def):
            # Macros only see their own inputs
            self.current_macro = node.name
            self.scope_stack = []
        elif _is_defined_test(node):
            # {% if title is defined %} guards an optional input
            self._guarded.add(id(node.value))

        declared = self.declared_by(node)
        if isinstance(node, _BLOCK_SCOPED):
            self._frames.append((len(self.scope_stack), len(declared)))
        self.scope_stack.extend(declared)

        if (
            self.current_macro is not None
            and isinstance(node, Name)
            and node.is_simple
            and id(node) not in self._guarded
        ):
            self._check(node)

        return node

    def leave_node(self, node: Node) -> Node:
        if isinstance(node, Def):
            # The next macro resets the stack, no need to unwind here
            self.current_macro = None
        elif isinstance(node, _BLOCK_SCOPED):
            # Only the node's own names; {% set %} inside the body persists
            start, count = self._frames.pop()
            del self.scope_stack[start : start + count]
        elif _is_defined_test(node):
            self._guarded.discard(id(node.value))

        return node

    def declared_by(self, node: Node) -> tuple[str, ...]:
        """Names introduced by ``node``, in the order they are pushed."""
        if isinstance(node, Def):
            names = list(node.args)
            if node.vararg:
                names.append(node.vararg)
            if node.kwarg:
                names.append(node.kwarg)
            return tuple(names)
        if isinstance(node, Set):
            return _target_names(node.target)
        if isinstance(node, (Let, Export)):
            return _target_names(node.name)
        if isinstance(node, Capture):
            return (node.name,)
        if isinstance(node, Import):
            return (node.target,)
        if isinstance(node, FromImport):
            return tuple(alias or name for name, alias in node.names)
        if isinstance(node, Lambda):
            return tuple(node.params)
        if isinstance(node, (For, AsyncFor)):
            return self._loop_names(node)
        return ()

    def _loop_names(self, node: For | AsyncFor) -> tuple[str, ...]:
        # A parsed target binds at least one name; an empty one declares only `loop`
        targets = _target_names(node.target)
        if len(targets) == 1:
            # {% for v in items %} still binds a key
            return (self._config.loop_name, self._config.implicit_loop_key, targets[0])
        return (self._config.loop_name, *targets)

    def _check(self, node: Name) -> None:
        name = node.name
        if name in self.scope_stack or name in self._config.always_declared:
            return

        logger.debug("Undeclared %r in macro %r", name, self.current_macro)
        self._sink.emit(
            Diagnostic(
                macro_name=self.current_macro or "",
                template_name=self._template_name,
                lineno=node.lineno,
                variable_name=name,
                col_offset=node.col_offset,
            )
        )


def _is_defined_test(node: Node) -> bool:
    return isinstance(node, Test) and node.name == "defined" and isinstance(node.value, Name)


def _target_names(node: Node) -> tuple[str, ...]:
    """Extract bound names from an assignment target, left to right."""
    if isinstance(node, Name):
        return (node.name,)
    if isinstance(node, (Tuple, List)):
        names: list[str] = []
        for item in node.items:
            names.extend(_target_names(item))
        return tuple(names)
    return ()
