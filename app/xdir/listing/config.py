"""Immutable listing configuration.

The Config model is built once after command-line and settings
resolution and then passed, unchanged, through the whole traversal.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from xdir.listing.models import DisplayMode, PathDisplay, SortMode

DEFAULT_WIDE_WIDTH = 80


class Config(BaseModel):
    """Resolved options for one listing run.

    Attributes:
        sort: Ordering of each directory's entries.
        display: Rendering strategy.
        path_display: How much of each path is shown.
        patterns: Shell-style wildcard patterns (ignored when match_all).
        match_all: Accept every name regardless of patterns.
        recurse: Descend into subdirectories.
        exclude_directory: Hide directories (they are still descended).
        directory_only: Show directories only.
        exclude_hidden: Hide hidden and system entries.
        hidden_only: Show hidden and system entries only.
        exclude_readonly: Hide read-only entries.
        readonly_only: Show read-only entries only.
        cutoff: Hide entries modified before this moment.
        head: Keep only the first N listing lines of each directory.
        tail: Keep only the last N listing lines of each directory.
        quote_spaces: Quote bare names that contain a space.
        wide_width: Target line width for the wide grid.
        ignore_case: Match patterns against case-folded names.
        numeric_mode: Unix-long shows octal permissions.
        comma_separators: Group digits of file sizes with commas.
        show_volume: Show volume information.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    sort: SortMode = SortMode.DIRECTORY_THEN_NAME
    display: DisplayMode = DisplayMode.WINDOWS_LONG
    path_display: PathDisplay = PathDisplay.NAME
    patterns: tuple[str, ...] = ()
    match_all: bool = True
    recurse: bool = False
    exclude_directory: bool = False
    directory_only: bool = False
    exclude_hidden: bool = False
    hidden_only: bool = False
    exclude_readonly: bool = False
    readonly_only: bool = False
    cutoff: datetime | None = None
    head: Annotated[int | None, Field(ge=1)] = None
    tail: Annotated[int | None, Field(ge=1)] = None
    quote_spaces: bool = False
    wide_width: Annotated[int, Field(ge=1)] = DEFAULT_WIDE_WIDTH
    ignore_case: bool = False
    numeric_mode: bool = False
    comma_separators: bool = True
    show_volume: bool = False

    @model_validator(mode="after")
    def validate_exclusive_flags(self) -> Config:
        """Reject option pairs that contradict each other."""
        pairs = (
            ("exclude_directory", "directory_only", "-d", "d"),
            ("exclude_hidden", "hidden_only", "-h", "h"),
            ("exclude_readonly", "readonly_only", "-o", "o"),
        )
        for exclude, only, exclude_flag, only_flag in pairs:
            if getattr(self, exclude) and getattr(self, only):
                msg = f"Can not use both --attr {exclude_flag} and --attr {only_flag}"
                raise ValueError(msg)
        if not self.match_all and not self.patterns:
            msg = "At least one pattern is required unless matching all files"
            raise ValueError(msg)
        return self

    @property
    def filters_hidden(self) -> bool:
        """True when the hidden/system attribute must be queried."""
        return self.exclude_hidden or self.hidden_only

    @property
    def filters_readonly(self) -> bool:
        """True when the read-only attribute must be queried."""
        return self.exclude_readonly or self.readonly_only
