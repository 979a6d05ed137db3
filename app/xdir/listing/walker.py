"""Recursive directory traversal engine.

The Walker lists one directory at a time, depth first: read, filter,
sort, format, render, summarise, then recurse into the queued
subdirectories. Counts are returned as GrandTotals values rather than
accumulated in shared state.
"""

import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path

from xdir.attributes import AttributeProbe, get_probe
from xdir.listing.config import Config
from xdir.listing.filters import FilterPipeline
from xdir.listing.formatters import SIZE_FIELD_WIDTH, format_entries
from xdir.listing.models import DisplayMode, Entry, GrandTotals, PathDisplay
from xdir.listing.reader import read_directory, stat_entry
from xdir.listing.renderer import render
from xdir.listing.sorting import sort_entries
from xdir.listing.summary import format_level_summary

logger = logging.getLogger(__name__)


class Walker:
    """Lists directories according to a Config.

    Args:
        config: Listing configuration.
        emit: Sink for listing and summary lines.
        warn: Sink for recoverable problems.
        probe: Attribute probe. Defaults to the running platform's probe.
        cwd: Working directory used for relative display paths.
            Defaults to os.getcwd().

    Raises:
        PatternError: If a configured pattern is malformed.

    Example:
        >>> walker = Walker(Config(recurse=True), emit=print, warn=print)
        >>> totals = walker.walk("/tmp/project")
    """

    def __init__(
        self,
        config: Config,
        *,
        emit: Callable[[str], None],
        warn: Callable[[str], None],
        probe: AttributeProbe | None = None,
        cwd: str | None = None,
    ) -> None:
        self._config = config
        self._emit = emit
        self._warn = warn
        self._probe = probe or get_probe()
        self._cwd = cwd if cwd is not None else os.getcwd()
        self._filter = FilterPipeline(config, self._probe, warn)
        self._ancestors: set[Path] = set()

    @property
    def config(self) -> Config:
        """The configuration this walker lists with."""
        return self._config

    def walk(self, directory: str | Path) -> GrandTotals:
        """List a directory and, if configured, everything below it.

        Args:
            directory: Directory to list.

        Returns:
            Totals over every listed level.

        Raises:
            OSError: If the directory itself cannot be read. Failures
                below it are reported through warn and skipped.
        """
        self._ancestors = set()
        return self._walk(Path(os.path.abspath(directory)))

    def _walk(self, directory: Path) -> GrandTotals:
        logger.debug("Listing %s", directory)
        real = directory.resolve()
        self._ancestors.add(real)
        try:
            return self._list_level(directory)
        finally:
            self._ancestors.discard(real)

    def _list_level(self, directory: Path) -> GrandTotals:
        config = self._config

        entries = read_directory(str(directory), self._probe, self._warn)
        result = self._filter.run(entries)
        ordered = sort_entries(result.accepted, config.sort)
        lines = format_entries(ordered, config, cwd=self._cwd, max_size=result.state.max_size)
        render(lines, self._emit, head=config.head, tail=config.tail)

        if not result.state.is_empty:
            self._emit("")
            summary = format_level_summary(
                result.state,
                str(directory),
                self._cwd,
                bare=config.display == DisplayMode.BARE,
            )
            if summary is not None:
                self._emit(summary)
            if config.recurse:
                self._emit("")

        totals = GrandTotals.from_state(result.state)
        for subdirectory in result.subdirectories:
            path = Path(subdirectory.path)
            # Links back into the current descent path would never end
            if path.resolve() in self._ancestors:
                logger.debug("Skipping link to enclosing directory %s", path)
                continue
            try:
                totals += self._walk(path)
            except OSError as e:
                self._warn(f'Warning "{subdirectory.path}": {e.strerror or e}')
        return totals

    def list_paths(self, paths: Iterable[str]) -> GrandTotals:
        """List explicit paths, then the contents of those that are directories.

        Paths are shown with enough of their location to tell apart
        entries of the same name from different directories. Missing
        paths are reported through warn. Each directory is then listed
        with every name matched and hidden entries excluded.

        Args:
            paths: Absolute paths.

        Returns:
            Totals over the flat listing and every directory listing.
        """
        config = self._config
        entries: list[Entry] = []
        for path in paths:
            try:
                entries.append(stat_entry(path, self._probe))
            except OSError as e:
                self._warn(f'Warning "{path}": {e.strerror or e}')

        flat = config
        if config.display == DisplayMode.WIDE:
            flat = config.model_copy(update={"display": DisplayMode.WINDOWS_LONG})
        shown = PathDisplay.FULL if config.path_display == PathDisplay.FULL else PathDisplay.PARTIAL
        lines = format_entries(
            entries,
            flat,
            cwd=self._cwd,
            path_display=shown,
            size_width=SIZE_FIELD_WIDTH,
        )
        render(lines, self._emit, head=config.head, tail=config.tail)
        self._emit("")

        files = [e for e in entries if not e.effective_dir]
        totals = GrandTotals(
            file_count=len(files),
            directory_count=len(entries) - len(files),
            total_size=sum(e.size for e in files),
        )

        nested = Walker(
            config.model_copy(
                update={
                    "match_all": True,
                    "patterns": (),
                    "exclude_hidden": True,
                    "hidden_only": False,
                    "path_display": (
                        PathDisplay.FULL
                        if config.path_display == PathDisplay.FULL
                        else PathDisplay.NAME
                    ),
                }
            ),
            emit=self._emit,
            warn=self._warn,
            probe=self._probe,
            cwd=self._cwd,
        )
        for entry in entries:
            if not entry.effective_dir:
                continue
            try:
                totals += nested.walk(entry.path)
            except OSError as e:
                self._warn(f'Warning "{entry.path}": {e.strerror or e}')
            self._emit("")
        return totals
