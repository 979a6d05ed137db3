"""Unix ``ls -l`` style long listing.

Shows permission bits (symbolic, or octal in numeric mode), link
count, owner, group, size, modification time and display name.
"""

import stat
import time

from xdir.listing.models import Entry, PathDisplay
from xdir.listing.paths import display_name

# Entries older than this are shown with a year instead of a clock time
_RECENT_SECONDS = 6 * 30 * 24 * 3600


def _owner_name(uid: int) -> str:
    try:
        import pwd

        return pwd.getpwuid(uid).pw_name
    except (ImportError, KeyError):
        return str(uid)


def _group_name(gid: int) -> str:
    try:
        import grp

        return grp.getgrgid(gid).gr_name
    except (ImportError, KeyError):
        return str(gid)


def format_mode(mode: int, numeric: bool = False) -> str:
    """Format st_mode as ``drwxr-xr-x`` or, in numeric mode, as ``0755``."""
    if numeric:
        return f"{stat.S_IMODE(mode):04o}"
    return stat.filemode(mode)


def format_time(mtime: float, now: float | None = None) -> str:
    """Format a timestamp the way ``ls`` does."""
    if now is None:
        now = time.time()
    fmt = "%b %d %H:%M" if now - mtime < _RECENT_SECONDS else "%b %d  %Y"
    return time.strftime(fmt, time.localtime(mtime))


def format_unix_long(
    entries: list[Entry],
    *,
    path_display: PathDisplay = PathDisplay.NAME,
    cwd: str = "",
    numeric_mode: bool = False,
    now: float | None = None,
) -> list[str]:
    """Format entries as an ``ls -l`` style listing.

    Args:
        entries: Sorted entries.
        path_display: How much of each path is shown.
        cwd: Working directory used for partial paths.
        numeric_mode: Show octal permissions instead of symbolic ones.
        now: Reference time for recent/old entries (defaults to now).

    Returns:
        One line per entry, columns aligned across the batch.
    """
    if not entries:
        return []

    rows = [
        (
            format_mode(e.mode, numeric_mode),
            str(e.nlink),
            _owner_name(e.uid),
            _group_name(e.gid),
            str(e.size),
            format_time(e.mtime, now),
            display_name(e, path_display, cwd),
            f" -> {e.link_target}" if e.is_symlink else "",
        )
        for e in entries
    ]
    nlink_width = max(len(r[1]) for r in rows)
    owner_width = max(len(r[2]) for r in rows)
    group_width = max(len(r[3]) for r in rows)
    size_width = max(len(r[4]) for r in rows)

    return [
        f"{mode} {nlink:>{nlink_width}} {owner:<{owner_width}} {group:<{group_width}} "
        f"{size:>{size_width}} {mtime} {name}{link}"
        for mode, nlink, owner, group, size, mtime, name, link in rows
    ]
