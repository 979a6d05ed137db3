"""CLI package for xdir.

This package contains the Typer application.
"""

from xdir.cli.main import app

__all__ = ["app"]
