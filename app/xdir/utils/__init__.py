"""Utility modules for xdir.

This module exports commonly used utility functions.
"""

from xdir.utils.formatting import (
    console,
    err_console,
    print_error,
    print_line,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_line",
    "print_warning",
]
