"""Formatting strategies for directory listings.

Each strategy turns the sorted entries of one directory into display
lines. Exactly one strategy runs per listing, chosen by DisplayMode.
"""

from datetime import datetime

from xdir.listing.config import Config
from xdir.listing.models import DisplayMode, Entry, PathDisplay
from xdir.listing.paths import display_name, relative_to_cwd
from xdir.listing.unix import format_unix_long

# Minimum width of the size column in long listings
SIZE_FIELD_WIDTH = 14

# Wide grid column bounds
WIDE_MIN_NAME_WIDTH = 13
WIDE_MAX_COLUMN_WIDTH = 58

DIR_MARKER = "<DIR>".ljust(SIZE_FIELD_WIDTH)
JUNCTION_MARKER = "<JUNCTION>".ljust(SIZE_FIELD_WIDTH)


def format_size(size: int, commas: bool = True) -> str:
    """Format a byte count, grouping thousands with commas unless disabled."""
    return f"{size:,}" if commas else str(size)


def size_field_width(max_size: int, commas: bool = True) -> int:
    """Width of the long-format size column for a batch of entries."""
    return max(SIZE_FIELD_WIDTH, len(format_size(max_size, commas)))


def link_suffix(entry: Entry) -> str:
    """`` [target]`` for symlinks, empty otherwise."""
    if entry.is_symlink and entry.link_target is not None:
        return f" [{entry.link_target}]"
    return ""


def format_wide(entries: list[Entry], width: int) -> list[str]:
    """Lay names out in a multi-column grid.

    Args:
        entries: Sorted entries.
        width: Target line width.

    Returns:
        Grid rows; directories are shown as ``[name]``.
    """
    names = [f"[{e.name}]" if e.effective_dir else e.name for e in entries]
    longest = max((len(name) for name in names), default=0)
    column = min(max(WIDE_MIN_NAME_WIDTH, longest) + 1, WIDE_MAX_COLUMN_WIDTH)
    per_line = max(1, width // column)

    lines: list[str] = []
    for start in range(0, len(names), per_line):
        row = names[start : start + per_line]
        lines.append("".join(name.ljust(column) for name in row[:-1]) + row[-1])
    return lines


def format_windows_long(
    entries: list[Entry],
    *,
    size_width: int,
    path_display: PathDisplay = PathDisplay.NAME,
    cwd: str = "",
    commas: bool = True,
) -> list[str]:
    """Format entries like the Windows ``dir`` command.

    Each line reads ``YYYY-MM-DD  hh:mm AM  <size> <name>``. Hours after
    noon are reduced by 12; hours 0 and 12 are printed as they are.

    Args:
        entries: Sorted entries.
        size_width: Width of the right-justified size column.
        path_display: How much of each path is shown.
        cwd: Working directory used for partial paths.
        commas: Group file sizes with commas.

    Returns:
        One line per entry.
    """
    lines: list[str] = []
    for entry in entries:
        if entry.effective_dir:
            size = JUNCTION_MARKER if entry.is_symlink else DIR_MARKER
        else:
            size = format_size(entry.size, commas)

        t = datetime.fromtimestamp(entry.mtime)
        hour, am_pm = t.hour, "AM"
        if hour > 12:
            hour, am_pm = hour - 12, "PM"

        name = display_name(entry, path_display, cwd) + link_suffix(entry)
        lines.append(
            f"{t.year:04d}-{t.month:02d}-{t.day:02d}  {hour:02d}:{t.minute:02d} {am_pm}"
            f"  {size:>{size_width}} {name}"
        )
    return lines


def format_bare(
    entries: list[Entry],
    *,
    path_display: PathDisplay = PathDisplay.NAME,
    cwd: str = "",
    directory_only: bool = False,
    quote_spaces: bool = False,
) -> list[str]:
    """Format entries as bare names, one per line.

    Paths under the working directory are shown relative to it, other
    paths in full. Directories are bracketed unless only directories
    are listed.

    Args:
        entries: Sorted entries.
        path_display: FULL forces absolute paths.
        cwd: Working directory.
        directory_only: Omit the directory brackets.
        quote_spaces: Double-quote names that contain a space.

    Returns:
        One line per entry.
    """
    lines: list[str] = []
    for entry in entries:
        name = entry.path
        if path_display != PathDisplay.FULL:
            name = relative_to_cwd(name, cwd)
        if entry.effective_dir and not directory_only:
            name = f"[{name}]"
        name += link_suffix(entry)
        if quote_spaces and " " in name:
            name = f'"{name}"'
        lines.append(name)
    return lines


def format_entries(
    entries: list[Entry],
    config: Config,
    *,
    cwd: str,
    max_size: int = 0,
    path_display: PathDisplay | None = None,
    size_width: int | None = None,
) -> list[str]:
    """Render entries with the strategy selected by the configuration.

    Args:
        entries: Sorted entries.
        config: Listing configuration.
        cwd: Working directory used for relative paths.
        max_size: Largest file size in the batch (sizes the long column).
        path_display: Override of config.path_display.
        size_width: Override of the computed long-format size column width.

    Returns:
        Display lines.
    """
    shown = path_display or config.path_display
    if config.display == DisplayMode.WIDE:
        return format_wide(entries, config.wide_width)
    if config.display == DisplayMode.UNIX_LONG:
        return format_unix_long(
            entries,
            path_display=shown,
            cwd=cwd,
            numeric_mode=config.numeric_mode,
        )
    if config.display == DisplayMode.BARE:
        return format_bare(
            entries,
            path_display=shown,
            cwd=cwd,
            directory_only=config.directory_only,
            quote_spaces=config.quote_spaces,
        )
    if size_width is None:
        size_width = size_field_width(max_size, config.comma_separators)
    return format_windows_long(
        entries,
        size_width=size_width,
        path_display=shown,
        cwd=cwd,
        commas=config.comma_separators,
    )
