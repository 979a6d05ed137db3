"""Summary lines for directory levels and whole runs."""

import os
from pathlib import Path

from xdir.attributes.base import VolumeInfo
from xdir.listing.formatters import SIZE_FIELD_WIDTH, format_size
from xdir.listing.models import GrandTotals, TraversalState

NO_FILE_FOUND = "No file found"


def summary_directory(directory: str, cwd: str) -> str:
    """Name a directory for a summary line.

    The working directory itself and directories outside it are shown
    in full. Directories below it are shown relative to it, with a
    ``./`` prefix when the relative path is a single component.
    """
    try:
        relative = Path(directory).relative_to(cwd)
    except ValueError:
        return directory
    if not relative.parts:
        return directory
    if len(relative.parts) == 1:
        return f".{os.sep}{relative}"
    return str(relative)


def format_level_summary(
    state: TraversalState,
    directory: str,
    cwd: str,
    *,
    bare: bool = False,
) -> str | None:
    """Summarise the accepted entries of one directory.

    Files take precedence over directories. In bare mode a single
    file is not summarised, so a level holding directories reports
    those instead.

    Args:
        state: Counters of the level.
        directory: Absolute directory path.
        cwd: Working directory.
        bare: Whether the listing is in bare mode.

    Returns:
        The summary line, or None when there is nothing to report.
    """
    where = summary_directory(directory, cwd)
    if state.file_count == 1 and not bare:
        return f"{'':>{SIZE_FIELD_WIDTH + 5}} Only one file in {where}"
    if state.file_count > 1:
        files = (
            f"{state.file_count} Files {format_size(state.total_size)} "
            f"({state.total_size} bytes)"
        )
        return f"{files:>{SIZE_FIELD_WIDTH + 22}} {where}"
    if state.directory_count == 1:
        return f"{'':>{SIZE_FIELD_WIDTH}} Only one directory in {where}"
    if state.directory_count > 1:
        return f"{state.directory_count:>{SIZE_FIELD_WIDTH}} directories in {where}"
    return None


def format_grand_total(totals: GrandTotals) -> str:
    """Summarise the files found over a whole run."""
    size = format_size(totals.total_size)
    return f"{totals.file_count:5d} File(s)  {size:>{SIZE_FIELD_WIDTH}} bytes total"


def format_volume_header(volume: VolumeInfo, start_directory: str) -> str:
    """Describe the volume holding the start directory."""
    drive = Path(start_directory).drive.upper() or os.sep
    return f"Volume in drive {drive} is {volume.name}, Serial {volume.serial_text}"


def format_free_space(free: int, volume: VolumeInfo | None = None) -> str:
    """Report the free space left on the volume."""
    line = f"{format_size(free):>32} bytes free"
    if volume is not None and volume.name:
        line += f" in volume {volume.name}"
    return line
