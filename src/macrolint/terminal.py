"""Terminal color utilities for diagnostic output.

Provides ANSI color codes with automatic TTY detection and NO_COLOR support.
"""

from __future__ import annotations

import os
import re
import sys
from typing import Literal

# ANSI color codes
_COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
    "bright_red": "\033[91m",
    "bright_yellow": "\033[93m",
}

ColorName = Literal[
    "reset", "bold", "dim", "red", "yellow", "cyan", "bright_red", "bright_yellow"
]

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def _should_use_colors() -> bool:
    """Check if terminal supports colors and user allows them.

    Respects:
        - NO_COLOR environment variable (https://no-color.org/)
        - FORCE_COLOR environment variable (overrides NO_COLOR)
        - sys.stderr.isatty() for TTY detection (diagnostics go to stderr)
    """
    if os.environ.get("FORCE_COLOR"):
        return True

    if os.environ.get("NO_COLOR"):
        return False

    return sys.stderr.isatty()


# Cache the color decision
_USE_COLORS = _should_use_colors()


def supports_color() -> bool:
    """Check if current terminal supports color output."""
    return _USE_COLORS


def colorize(text: str, *colors: ColorName) -> str:
    """Apply ANSI color codes to text.

    Args:
        text: Text to colorize
        *colors: One or more color names to apply

    Returns:
        Colorized text if colors are supported, otherwise plain text

    Example:
        >>> colorize("warning", "bright_yellow", "bold")
        '\033[93m\033[1mwarning\033[0m'  # if colors supported
        'warning'  # if colors not supported
    """
    if not _USE_COLORS or not colors:
        return text

    prefix = "".join(_COLORS.get(color, "") for color in colors)
    if not prefix:
        return text

    return f"{prefix}{text}{_COLORS['reset']}"


def strip_colors(text: str) -> str:
    """Remove ANSI color codes from text."""
    return _ANSI_ESCAPE.sub("", text)


# Semantic color helpers for diagnostics
def error_code(text: str) -> str:
    """Color text as an error code (bright red + bold)."""
    return colorize(text, "bright_red", "bold")


def warning_code(text: str) -> str:
    """Color text as a warning code (bright yellow + bold)."""
    return colorize(text, "bright_yellow", "bold")


def location(text: str) -> str:
    """Color text as a file location (cyan)."""
    return colorize(text, "cyan")


def dim_text(text: str) -> str:
    """Color text as dimmed/secondary (dim)."""
    return colorize(text, "dim")


def format_header(code: str | None, message: str, *, warning: bool = False) -> str:
    """Format a diagnostic header with optional code.

    Example:
        >>> format_header("ML-SCOPE-001", "Undeclared variable", warning=True)
        '\033[93m\033[1mML-SCOPE-001\033[0m: Undeclared variable'
    """
    if not code:
        return message
    painted = warning_code(code) if warning else error_code(code)
    return f"{painted}: {message}"
