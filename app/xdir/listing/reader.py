"""Raw directory reads.

Turns directory listings and lstat results into Entry records, resolving
symlink targets through the attribute probe.
"""

import logging
import stat
from collections.abc import Callable
from pathlib import Path

from xdir.attributes.base import AttributeProbe
from xdir.listing.models import Entry

logger = logging.getLogger(__name__)


def stat_entry(path: str, probe: AttributeProbe) -> Entry:
    """Build an Entry for a single path without following symlinks.

    A symlink whose target cannot be read is treated as a plain entry.

    Args:
        path: Absolute path to stat.
        probe: Attribute probe used for symlink resolution.

    Returns:
        Entry describing the path.

    Raises:
        OSError: If the path cannot be stat-ed.
    """
    st = Path(path).lstat()
    link_target: str | None = None
    target_is_dir = False
    if stat.S_ISLNK(st.st_mode):
        link_target = probe.read_link(path)
        if link_target is not None:
            target_is_dir = probe.target_is_dir(path, link_target)
        else:
            logger.debug("Cannot resolve symlink %s, treating as plain entry", path)
    return Entry.from_stat(path, st, link_target=link_target, target_is_dir=target_is_dir)


def read_directory(
    directory: str | Path,
    probe: AttributeProbe,
    warn: Callable[[str], None],
) -> list[Entry]:
    """Read every entry of a directory in the order the OS returns them.

    The directory handle is closed before this function returns.
    Entries that vanish or cannot be stat-ed between the read and the
    stat are reported through warn and skipped.

    Args:
        directory: Absolute directory path.
        probe: Attribute probe used for symlink resolution.
        warn: Sink for recoverable per-entry problems.

    Returns:
        List of entries (unsorted, pseudo-entries never included).

    Raises:
        OSError: If the directory itself cannot be opened or read.
    """
    paths = [str(child) for child in Path(directory).iterdir()]

    entries: list[Entry] = []
    for path in paths:
        try:
            entries.append(stat_entry(path, probe))
        except OSError as e:
            warn(f'Warning "{path}": {e.strerror or e}')
    return entries
