"""xdir - a clone of the Windows dir command."""

__version__ = "0.1.0"
