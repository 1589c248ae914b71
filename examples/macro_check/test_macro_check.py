"""Tests for the macro scope check example."""


class TestMacroCheckApp:
    """Verify the example reports the two undeclared reads in card()."""

    def test_findings(self, example_app) -> None:
        found = [(d.macro_name, d.variable_name, d.lineno) for d in example_app.diagnostics]
        assert found == [("card", "titel", 2), ("card", "item", 4)]

    def test_badge_is_clean(self, example_app) -> None:
        assert all(d.macro_name != "badge" for d in example_app.diagnostics)

    def test_output_names_template(self, example_app) -> None:
        assert "components.html:2:9" in example_app.output
