"""Listing truncation and line emission."""

from collections.abc import Callable

OMITTED_MARKER = "..........  ..... .."


def truncate(lines: list[str], head: int | None = None, tail: int | None = None) -> list[str]:
    """Apply head or tail truncation to a listing.

    Head truncation keeps the first N lines followed by the omission
    marker. Tail truncation keeps the marker followed by the last N
    lines. Head wins when both apply; nothing changes when N is not
    smaller than the number of lines.

    Args:
        lines: Full listing.
        head: Number of leading lines to keep.
        tail: Number of trailing lines to keep.

    Returns:
        A new list of lines.
    """
    if head and head < len(lines):
        return [*lines[:head], OMITTED_MARKER]
    if tail and tail < len(lines):
        return [OMITTED_MARKER, *lines[-tail:]]
    return list(lines)


def render(
    lines: list[str],
    emit: Callable[[str], None],
    *,
    head: int | None = None,
    tail: int | None = None,
) -> int:
    """Truncate a listing and pass each remaining line to emit.

    Returns:
        Number of lines emitted.
    """
    shown = truncate(lines, head, tail)
    for line in shown:
        emit(line)
    return len(shown)
