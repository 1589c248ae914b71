"""Configuration for scope analysis."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

# Names that are always available inside a macro
_SPECIAL_NAMES = frozenset(
    {
        "varargs",  # Extra positional arguments passed to a macro
    }
)

# Globals a host engine typically provides; opt in with
# LintConfig(builtin_names=TEMPLATE_GLOBALS)
TEMPLATE_GLOBALS = frozenset(
    {
        "range",
        "len",
        "str",
        "int",
        "float",
        "bool",
        "list",
        "dict",
        "min",
        "max",
        "sum",
        "abs",
        "round",
        "sorted",
        "reversed",
        "enumerate",
        "zip",
        # Boolean/None literals
        "true",
        "false",
        "none",
        "True",
        "False",
        "None",
    }
)


@dataclass(frozen=True, slots=True)
class LintConfig:
    """Settings for the macro scope checks.

    Attributes:
        special_names: Names implicitly declared inside every macro.
        builtin_names: Host globals treated as declared. Empty by default,
            so an undeclared `max` or `list` is reported.
        loop_name: Iteration-metadata name bound by every loop.
        implicit_loop_key: Key name synthesized for loops without an
            explicit ``key, value`` target.
        strict: Raise DiagnosticsFoundError after a template with findings.

    Example:
        >>> config = LintConfig(strict=True).with_names("csrf_token")
        >>> "csrf_token" in config.always_declared
        True
    """

    special_names: frozenset[str] = _SPECIAL_NAMES
    builtin_names: frozenset[str] = frozenset()
    loop_name: str = "loop"
    implicit_loop_key: str = "_key"
    strict: bool = False
    always_declared: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "always_declared",
            frozenset(self.special_names) | frozenset(self.builtin_names),
        )

    def with_names(self, *names: str) -> LintConfig:
        """Return a copy that also treats ``names`` as always declared."""
        return replace(self, builtin_names=self.builtin_names | frozenset(names))


DEFAULT_CONFIG = LintConfig()
