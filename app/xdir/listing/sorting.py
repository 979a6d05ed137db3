"""Sort strategies for directory listings.

Each SortMode maps to exactly one key function and direction. When
several sort orders are requested, select_sort_mode applies the fixed
precedence time, size, extension, then the reversed keys, then name.
"""

from collections.abc import Callable, Iterable
from typing import Any

from xdir.listing.models import Entry, SortMode

# Highest priority first
SORT_PRECEDENCE: tuple[SortMode, ...] = (
    SortMode.TIME,
    SortMode.SIZE,
    SortMode.EXTENSION,
    SortMode.TIME_REVERSED,
    SortMode.SIZE_REVERSED,
    SortMode.EXTENSION_REVERSED,
    SortMode.NAME,
    SortMode.NAME_REVERSED,
    SortMode.DIRECTORY_THEN_NAME,
)


def extension(name: str) -> str:
    """Return the suffix of a name starting at its last dot.

    A name without a dot has no extension; a dotfile such as
    ``.bashrc`` is all extension.
    """
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def _folded_name(entry: Entry) -> str:
    return entry.name.lower()


def _folded_extension(entry: Entry) -> str:
    return extension(entry.name).lower()


def _mtime(entry: Entry) -> float:
    return entry.mtime


def _size(entry: Entry) -> int:
    return entry.size


def _raw_name(entry: Entry) -> str:
    return entry.name


def _directory_then_name(entry: Entry) -> tuple[bool, str]:
    return (not entry.effective_dir, entry.name.lower())


# SIZE_REVERSED orders by raw name descending, not by size
_STRATEGIES: dict[SortMode, tuple[Callable[[Entry], Any], bool]] = {
    SortMode.NAME: (_folded_name, False),
    SortMode.NAME_REVERSED: (_folded_name, True),
    SortMode.EXTENSION: (_folded_extension, False),
    SortMode.EXTENSION_REVERSED: (_folded_extension, True),
    SortMode.TIME: (_mtime, False),
    SortMode.TIME_REVERSED: (_mtime, True),
    SortMode.SIZE: (_size, False),
    SortMode.SIZE_REVERSED: (_raw_name, True),
    SortMode.DIRECTORY_THEN_NAME: (_directory_then_name, False),
}


def select_sort_mode(requested: Iterable[SortMode]) -> SortMode:
    """Pick the single sort mode that wins among the requested ones.

    Args:
        requested: Sort modes given by the user, in any order.

    Returns:
        The requested mode with the highest precedence, or
        DIRECTORY_THEN_NAME when nothing was requested.
    """
    wanted = set(requested)
    for mode in SORT_PRECEDENCE:
        if mode in wanted:
            return mode
    return SortMode.DIRECTORY_THEN_NAME


def sort_entries(entries: list[Entry], mode: SortMode) -> list[Entry]:
    """Return the entries ordered by one sort strategy.

    Args:
        entries: Accepted entries of one directory.
        mode: Sort strategy to apply.

    Returns:
        A new, sorted list.
    """
    key, reverse = _STRATEGIES[mode]
    return sorted(entries, key=key, reverse=reverse)
