"""Listing domain models.

This module defines the data structures shared by the listing engine:
the immutable Entry record, the per-directory TraversalState counters,
the GrandTotals accumulated across a traversal, and the enums that
select sorting, rendering, and path display.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class SortMode(str, Enum):
    """Ordering applied to the accepted entries of one directory.

    Attributes:
        NAME: Case-folded name ascending.
        NAME_REVERSED: Case-folded name descending.
        EXTENSION: Case-folded extension ascending.
        EXTENSION_REVERSED: Case-folded extension descending.
        TIME: Modification time ascending.
        TIME_REVERSED: Modification time descending.
        SIZE: Size ascending.
        SIZE_REVERSED: Raw name descending (legacy behaviour, not size).
        DIRECTORY_THEN_NAME: Directories first, then case-folded name.
    """

    NAME = "name"
    NAME_REVERSED = "name-rev"
    EXTENSION = "ext"
    EXTENSION_REVERSED = "ext-rev"
    TIME = "time"
    TIME_REVERSED = "time-rev"
    SIZE = "size"
    SIZE_REVERSED = "size-rev"
    DIRECTORY_THEN_NAME = "dir"


class DisplayMode(str, Enum):
    """Rendering strategy for a listing."""

    WINDOWS_LONG = "long"
    UNIX_LONG = "unix"
    WIDE = "wide"
    BARE = "bare"


class PathDisplay(str, Enum):
    """How much of an entry's path is shown.

    Attributes:
        NAME: Base name only.
        PARTIAL: Path relative to the working directory when under it.
        FULL: Absolute path.
    """

    NAME = "name"
    PARTIAL = "partial"
    FULL = "full"


@dataclass(frozen=True, slots=True)
class Entry:
    """One filesystem object returned by a directory read.

    Attributes:
        name: Base name.
        path: Absolute path.
        is_dir: True if lstat reports a directory.
        is_symlink: True if the entry is a symbolic link.
        size: Size in bytes (meaningful only for files).
        mtime: Modification time as a POSIX timestamp.
        mode: Raw st_mode bits.
        nlink: Hard link count.
        uid: Owner user id.
        gid: Owner group id.
        link_target: Raw symlink target, None when not a link or unresolvable.
        target_is_dir: True if the resolved symlink target is a directory.
        effective_dir: Directory, or symlink to a directory (computed).
    """

    name: str
    path: str
    is_dir: bool
    is_symlink: bool = False
    size: int = 0
    mtime: float = 0.0
    mode: int = 0
    nlink: int = 1
    uid: int = 0
    gid: int = 0
    link_target: str | None = None
    target_is_dir: bool = False
    effective_dir: bool = field(init=False)

    def __post_init__(self) -> None:
        """Validate the entry and precompute the effective directory flag."""
        if not self.name:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)
        object.__setattr__(
            self,
            "effective_dir",
            self.is_dir or (self.is_symlink and self.target_is_dir),
        )

    @classmethod
    def from_stat(
        cls,
        path: str,
        st: os.stat_result,
        *,
        link_target: str | None = None,
        target_is_dir: bool = False,
    ) -> Entry:
        """Build an Entry from an lstat result.

        Args:
            path: Absolute path of the entry.
            st: Result of os.lstat (symlinks are not followed).
            link_target: Raw link text when the entry is a resolvable symlink.
            target_is_dir: Whether the link target is a directory.

        Returns:
            A new Entry.
        """
        return cls(
            name=Path(path).name or path,
            path=path,
            is_dir=stat.S_ISDIR(st.st_mode),
            is_symlink=stat.S_ISLNK(st.st_mode) and link_target is not None,
            size=st.st_size,
            mtime=st.st_mtime,
            mode=st.st_mode,
            nlink=st.st_nlink,
            uid=st.st_uid,
            gid=st.st_gid,
            link_target=link_target,
            target_is_dir=target_is_dir,
        )


@dataclass(slots=True)
class TraversalState:
    """Counters for the accepted entries of one directory level."""

    file_count: int = 0
    directory_count: int = 0
    total_size: int = 0
    max_size: int = 0
    max_name_length: int = 0

    def record(self, entry: Entry) -> None:
        """Account for one accepted entry."""
        if entry.effective_dir:
            self.directory_count += 1
        else:
            self.file_count += 1
            self.total_size += entry.size
            self.max_size = max(self.max_size, entry.size)
        self.max_name_length = max(self.max_name_length, len(entry.name))

    @property
    def is_empty(self) -> bool:
        """True when nothing was accepted at this level."""
        return self.file_count == 0 and self.directory_count == 0


@dataclass(frozen=True, slots=True)
class GrandTotals:
    """Cumulative counts over a whole traversal."""

    file_count: int = 0
    directory_count: int = 0
    total_size: int = 0

    def __add__(self, other: GrandTotals) -> GrandTotals:
        return GrandTotals(
            file_count=self.file_count + other.file_count,
            directory_count=self.directory_count + other.directory_count,
            total_size=self.total_size + other.total_size,
        )

    @classmethod
    def from_state(cls, state: TraversalState) -> GrandTotals:
        """Fold one level's counters into a totals value."""
        return cls(
            file_count=state.file_count,
            directory_count=state.directory_count,
            total_size=state.total_size,
        )

    @property
    def is_empty(self) -> bool:
        """True when nothing was found anywhere."""
        return self.file_count == 0 and self.directory_count == 0
