"""Linter - entry point for checking templates.

Builds fresh visitors for every template, drives them with a
NodeTraverser and routes their findings to the configured sink.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from macrolint.analysis.config import DEFAULT_CONFIG, LintConfig
from macrolint.analysis.undeclared import UndeclaredVariableInMacro
from macrolint.analysis.visitor import NodeTraverser, NodeVisitor
from macrolint.diagnostics import Diagnostic, DiagnosticCollector, DiagnosticSink
from macrolint.exceptions import DiagnosticsFoundError
from macrolint.nodes import Template

logger = logging.getLogger(__name__)

VisitorFactory = Callable[[DiagnosticSink, LintConfig, str | None], NodeVisitor]

DEFAULT_VISITORS: tuple[VisitorFactory, ...] = (UndeclaredVariableInMacro,)


class _FanOutSink:
    """Forward each finding to several sinks."""

    def __init__(self, sinks: Sequence[DiagnosticSink]) -> None:
        self._sinks = sinks

    def emit(self, diagnostic: Diagnostic) -> None:
        for sink in self._sinks:
            sink.emit(diagnostic)


class Linter:
    """Check template ASTs for undeclared variables in macros.

    Thread-safe as long as the sink is: every ``check()`` call builds its
    own visitors and collector.

    Example:
        >>> linter = Linter()
        >>> for diagnostic in linter.check(ast, name="forms.html"):
        ...     print(diagnostic.format())

    Strict mode:
        >>> Linter(config=LintConfig(strict=True)).check(ast)
        DiagnosticsFoundError: 1 undeclared variable(s) found in forms.html
    """

    def __init__(
        self,
        config: LintConfig | None = None,
        sink: DiagnosticSink | None = None,
        visitors: Iterable[VisitorFactory] = DEFAULT_VISITORS,
    ) -> None:
        """Initialize linter.

        Args:
            config: Lint configuration. Uses DEFAULT_CONFIG if not provided.
            sink: Optional sink that receives every finding as it is made,
                in addition to the per-call results.
            visitors: Factories called as ``factory(sink, config, name)``
                once per checked template.
        """
        self._config = config or DEFAULT_CONFIG
        self._sink = sink
        self._visitors = tuple(visitors)

    @property
    def config(self) -> LintConfig:
        return self._config

    def check(self, ast: Template, name: str | None = None) -> tuple[Diagnostic, ...]:
        """Check one template and return its findings in traversal order.

        Args:
            ast: Parsed template root.
            name: Template path, used when ``ast.name`` is not set.

        Raises:
            DiagnosticsFoundError: In strict mode, after the full traversal,
                when at least one finding was reported.
        """
        collector = DiagnosticCollector()
        sinks: list[DiagnosticSink] = [collector]
        if self._sink is not None:
            sinks.append(self._sink)
        sink = _FanOutSink(sinks)

        template_name = ast.name or name
        traverser = NodeTraverser(
            factory(sink, self._config, template_name) for factory in self._visitors
        )
        logger.debug("Checking template %s", template_name or "<template>")
        traverser.traverse(ast)

        diagnostics = collector.diagnostics
        if diagnostics:
            logger.debug(
                "%d finding(s) in %s", len(diagnostics), template_name or "<template>"
            )
            if self._config.strict:
                raise DiagnosticsFoundError(diagnostics, template_name)
        return diagnostics

    def check_many(
        self, templates: Iterable[tuple[str, Template]]
    ) -> dict[str, tuple[Diagnostic, ...]]:
        """Check ``(name, ast)`` pairs independently.

        In strict mode the first template with findings raises.
        """
        return {name: self.check(ast, name=name) for name, ast in templates}
