"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.text import Text

from xdir.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def print_line(line: str, style: str = "listing") -> None:
    """Print one listing line verbatim (no markup, no wrapping)."""
    console.print(Text(line, style=style), soft_wrap=True, highlight=False)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(Text(message, style="warning"), soft_wrap=True, highlight=False)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print("[error]Error:[/]", Text(message), soft_wrap=True, highlight=False)
