"""Tests for diagnostic records, sinks and error formatting."""

from __future__ import annotations

import logging

import pytest

from macrolint import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticsFoundError,
    ErrorCode,
    LintError,
    Linter,
    LoggingSink,
    Severity,
    UndeclaredVariableWarning,
    WarningsSink,
    terminal,
)

from .builders import macro, out, ref, template


@pytest.fixture
def diagnostic():
    return Diagnostic(
        macro_name="card",
        template_name="components/card.html",
        lineno=4,
        variable_name="titel",
        col_offset=12,
    )


@pytest.fixture(autouse=True)
def no_colors(monkeypatch):
    monkeypatch.setattr(terminal, "_USE_COLORS", False)


class TestDiagnostic:
    """Diagnostic record formatting."""

    def test_defaults(self, diagnostic) -> None:
        assert diagnostic.severity is Severity.WARNING
        assert diagnostic.code is ErrorCode.UNDECLARED_VARIABLE

    def test_message(self, diagnostic) -> None:
        assert diagnostic.message == 'The macro "card" uses an undeclared variable named "titel".'

    def test_str(self, diagnostic) -> None:
        assert str(diagnostic) == (
            'components/card.html:4:12: ML-SCOPE-001 The macro "card" uses an '
            'undeclared variable named "titel".'
        )

    def test_format(self, diagnostic) -> None:
        assert diagnostic.format() == (
            'ML-SCOPE-001: The macro "card" uses an undeclared variable named "titel".\n'
            "  --> components/card.html:4:12"
        )

    def test_format_colored(self, diagnostic, monkeypatch) -> None:
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        formatted = diagnostic.format()
        assert "\033[93m" in formatted  # warning code in bright yellow
        assert "\033[36m" in formatted  # location in cyan
        assert terminal.strip_colors(formatted) == (
            'ML-SCOPE-001: The macro "card" uses an undeclared variable named "titel".\n'
            "  --> components/card.html:4:12"
        )

    def test_hashable(self, diagnostic) -> None:
        assert len({diagnostic, diagnostic}) == 1


class TestSinks:
    """Where findings end up."""

    def test_collector(self, diagnostic) -> None:
        sink = DiagnosticCollector()
        assert not sink
        sink.emit(diagnostic)
        sink.emit(diagnostic)
        assert len(sink) == 2
        assert list(sink) == [diagnostic, diagnostic]
        assert sink.diagnostics == (diagnostic, diagnostic)
        sink.clear()
        assert len(sink) == 0

    def test_warnings_sink(self, diagnostic) -> None:
        with pytest.warns(UndeclaredVariableWarning, match='undeclared variable named "titel"'):
            WarningsSink().emit(diagnostic)

    def test_warnings_sink_through_linter(self) -> None:
        ast = template(macro("card", [], [out(ref("titel"))]), name="card.html")
        with pytest.warns(UndeclaredVariableWarning) as record:
            Linter(sink=WarningsSink()).check(ast)
        assert len(record) == 1
        assert "card.html:1:0" in str(record[0].message)

    def test_warnings_sink_can_escalate(self, diagnostic) -> None:
        import warnings

        with warnings.catch_warnings():
            warnings.simplefilter("error", UndeclaredVariableWarning)
            with pytest.raises(UndeclaredVariableWarning):
                WarningsSink().emit(diagnostic)

    def test_logging_sink(self, diagnostic, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="macrolint"):
            LoggingSink().emit(diagnostic)
        (record,) = caplog.records
        assert record.levelno == logging.WARNING
        assert record.name == "macrolint.diagnostics"
        assert "components/card.html:4:12: ML-SCOPE-001" in record.getMessage()

    def test_logging_sink_custom_logger(self, diagnostic, caplog) -> None:
        log = logging.getLogger("myapp.templates")
        with caplog.at_level(logging.WARNING, logger="myapp.templates"):
            LoggingSink(log).emit(diagnostic)
        assert caplog.records[0].name == "myapp.templates"


class TestErrors:
    """Exception hierarchy and error codes."""

    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (ErrorCode.UNDECLARED_VARIABLE, "scope"),
            (ErrorCode.DIAGNOSTICS_FOUND, "lint"),
            (ErrorCode.INVALID_VISITOR, "lint"),
        ],
    )
    def test_error_code_category(self, code, category) -> None:
        assert code.category == category

    def test_diagnostics_found_is_lint_error(self, diagnostic) -> None:
        error = DiagnosticsFoundError([diagnostic])
        assert isinstance(error, LintError)
        assert str(error) == "1 undeclared variable(s) found"

    def test_format_compact_lists_findings(self, diagnostic) -> None:
        error = DiagnosticsFoundError([diagnostic], "components/card.html")
        assert error.format_compact() == (
            "ML-LINT-001: 1 undeclared variable(s) found in components/card.html\n"
            'ML-SCOPE-001: The macro "card" uses an undeclared variable named "titel".\n'
            "  --> components/card.html:4:12"
        )

    def test_base_format_compact_without_code(self) -> None:
        assert LintError("boom").format_compact() == "boom"
