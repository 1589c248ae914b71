"""Tests for terminal color utilities."""

import pytest

from macrolint import Diagnostic, terminal


class TestColorDetection:
    """Test terminal color detection logic."""

    def test_supports_color_respects_no_color(self, monkeypatch):
        """NO_COLOR disables colors."""
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        assert not terminal._should_use_colors()

    def test_force_color_overrides_no_color(self, monkeypatch):
        """FORCE_COLOR wins over NO_COLOR."""
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert terminal._should_use_colors()

    def test_supports_color_reads_cached_value(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        assert terminal.supports_color()
        monkeypatch.setattr(terminal, "_USE_COLORS", False)
        assert not terminal.supports_color()

    def test_colorize_returns_plain_when_disabled(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", False)
        result = terminal.colorize("Warning", "yellow", "bold")
        assert result == "Warning"
        assert "\033[" not in result

    def test_colorize_adds_codes_when_enabled(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        result = terminal.colorize("Warning", "yellow", "bold")
        assert "\033[33m" in result  # yellow
        assert "\033[1m" in result   # bold
        assert "\033[0m" in result   # reset

    def test_strip_colors_removes_ansi_codes(self):
        colored = "\033[93m\033[1mML-SCOPE-001\033[0m"
        assert terminal.strip_colors(colored) == "ML-SCOPE-001"


class TestSemanticHelpers:
    """Test semantic color helper functions."""

    def test_warning_code(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        result = terminal.warning_code("ML-SCOPE-001")
        assert "ML-SCOPE-001" in result
        assert "\033[93m" in result

    def test_error_code(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        result = terminal.error_code("ML-LINT-001")
        assert "\033[91m" in result

    def test_location(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        result = terminal.location("forms.html:3:7")
        assert "forms.html:3:7" in result
        assert "\033[36m" in result

    def test_format_header_with_code(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", False)
        assert terminal.format_header("ML-SCOPE-001", "Undeclared", warning=True) == (
            "ML-SCOPE-001: Undeclared"
        )

    def test_format_header_without_code(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        assert terminal.format_header(None, "Something went wrong") == "Something went wrong"

    def test_plain_text_mode(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", False)
        assert terminal.error_code("ML-LINT-001") == "ML-LINT-001"
        assert terminal.location("a.html") == "a.html"
        assert terminal.dim_text("-->") == "-->"


class TestColorization:
    """Test colorize function edge cases."""

    def test_colorize_empty_colors(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        assert terminal.colorize("text") == "text"

    def test_colorize_unknown_color(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        assert terminal.colorize("text", "unknown_color") == "text"

    def test_diagnostics_readable_without_colors(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", False)
        diagnostic = Diagnostic("card", "card.html", 2, "titel")
        assert "\033[" not in diagnostic.format()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
