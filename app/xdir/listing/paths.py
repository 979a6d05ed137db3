"""Display path helpers shared by the long and bare formatters."""

from pathlib import Path

from xdir.listing.models import Entry, PathDisplay


def relative_to_cwd(path: str, cwd: str) -> str:
    """Show a path below the working directory relative to it."""
    try:
        relative = Path(path).relative_to(cwd)
    except ValueError:
        return path
    return str(relative) if relative.parts else path


def display_name(entry: Entry, path_display: PathDisplay, cwd: str) -> str:
    """Name of an entry as shown in long listings."""
    if path_display == PathDisplay.FULL:
        return entry.path
    if path_display == PathDisplay.PARTIAL:
        return relative_to_cwd(entry.path, cwd)
    return entry.name
