"""Directory listing engine.

This module provides the traversal, filtering, sorting and formatting
of directory listings in the manner of the Windows ``dir`` command.
"""

from xdir.listing.config import Config
from xdir.listing.filters import FilterPipeline, PatternError
from xdir.listing.models import (
    DisplayMode,
    Entry,
    GrandTotals,
    PathDisplay,
    SortMode,
    TraversalState,
)
from xdir.listing.sorting import select_sort_mode, sort_entries
from xdir.listing.targets import TargetError, Targets, resolve_targets
from xdir.listing.walker import Walker

__all__ = [
    "Config",
    "DisplayMode",
    "Entry",
    "FilterPipeline",
    "GrandTotals",
    "PathDisplay",
    "PatternError",
    "SortMode",
    "TargetError",
    "Targets",
    "TraversalState",
    "Walker",
    "resolve_targets",
    "select_sort_mode",
    "sort_entries",
]
