"""Entry filter pipeline.

Decides, for every raw entry of a directory, whether it is shown and
whether it is queued for recursion. Stages run in a fixed order and
stop at the first rejection:

1. pseudo-entries (``.`` and ``..``) are dropped
2. directories are queued for recursion, then the directory type
   filters apply (exclude-directory / directory-only)
3. modification-time cutoff
4. wildcard pattern match
5. hidden/system attribute filter
6. read-only attribute filter
"""

import fnmatch
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from xdir.attributes.base import AttributeProbe
from xdir.listing.config import Config
from xdir.listing.models import Entry, TraversalState

logger = logging.getLogger(__name__)

_PSEUDO_ENTRIES = frozenset({".", ".."})


class PatternError(ValueError):
    """Raised when a wildcard pattern is malformed."""


def validate_pattern(pattern: str) -> None:
    """Check that every character class in a pattern is terminated.

    A ``]`` directly after ``[`` or ``[!`` is a literal member of the
    class, as in fnmatch.

    Args:
        pattern: Shell-style wildcard pattern.

    Raises:
        PatternError: If a ``[`` has no closing ``]``.
    """
    i, n = 0, len(pattern)
    while i < n:
        if pattern[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < n and pattern[j] == "!":
            j += 1
        if j < n and pattern[j] == "]":
            j += 1
        close = pattern.find("]", j)
        if close < 0:
            msg = f"syntax error in pattern: {pattern!r}"
            raise PatternError(msg)
        i = close + 1


@dataclass(slots=True)
class FilterResult:
    """Outcome of filtering one directory.

    Attributes:
        accepted: Entries to display, in read order.
        subdirectories: Directories to recurse into, in read order.
        state: Counters over the accepted entries.
    """

    accepted: list[Entry] = field(default_factory=list)
    subdirectories: list[Entry] = field(default_factory=list)
    state: TraversalState = field(default_factory=TraversalState)


class FilterPipeline:
    """Ordered predicate chain over the entries of one directory.

    Args:
        config: Listing configuration.
        probe: Attribute probe for hidden/system/read-only queries.
        warn: Sink for recoverable attribute query failures.

    Raises:
        PatternError: If any configured pattern is malformed.
    """

    def __init__(
        self,
        config: Config,
        probe: AttributeProbe,
        warn: Callable[[str], None],
    ) -> None:
        self._config = config
        self._probe = probe
        self._warn = warn

        patterns = config.patterns
        if config.ignore_case:
            patterns = tuple(p.lower() for p in patterns)
        for pattern in patterns:
            validate_pattern(pattern)
        self._patterns = patterns
        self._cutoff = config.cutoff.timestamp() if config.cutoff is not None else None

        self._stages: tuple[Callable[[Entry], bool], ...] = (
            self._passes_type,
            self._passes_cutoff,
            self._passes_pattern,
            self._passes_hidden,
            self._passes_readonly,
        )

    def run(self, entries: Iterable[Entry]) -> FilterResult:
        """Filter the raw entries of one directory.

        Args:
            entries: Raw entries in read order.

        Returns:
            FilterResult with accepted entries, recursion queue and counters.
        """
        result = FilterResult()
        seen = 0
        for entry in entries:
            seen += 1
            if entry.name in _PSEUDO_ENTRIES:
                continue
            if entry.effective_dir and self._config.recurse:
                result.subdirectories.append(entry)
            if self.accepts(entry):
                result.accepted.append(entry)
                result.state.record(entry)
        logger.debug("Accepted %d of %d entries", len(result.accepted), seen)
        return result

    def accepts(self, entry: Entry) -> bool:
        """Return True if an entry passes every display stage."""
        return all(stage(entry) for stage in self._stages)

    def _passes_type(self, entry: Entry) -> bool:
        if entry.effective_dir:
            return not self._config.exclude_directory
        return not self._config.directory_only

    def _passes_cutoff(self, entry: Entry) -> bool:
        return self._cutoff is None or entry.mtime >= self._cutoff

    def _passes_pattern(self, entry: Entry) -> bool:
        if self._config.match_all:
            return True
        name = entry.name.lower() if self._config.ignore_case else entry.name
        return any(fnmatch.fnmatchcase(name, pattern) for pattern in self._patterns)

    def _passes_hidden(self, entry: Entry) -> bool:
        config = self._config
        if not config.filters_hidden:
            return True
        try:
            flagged = self._probe.is_hidden(entry.path) or self._probe.is_system(entry.path)
        except OSError as e:
            self._warn(f'Warning "{entry.path}": {e.strerror or e}')
            return False
        # Hidden directories stay visible in directory-only listings
        if entry.effective_dir and config.directory_only:
            return True
        if config.exclude_hidden:
            return not flagged
        return flagged

    def _passes_readonly(self, entry: Entry) -> bool:
        config = self._config
        if not config.filters_readonly:
            return True
        try:
            read_only = self._probe.is_read_only(entry.path)
        except OSError as e:
            self._warn(f'Warning "{entry.path}": {e.strerror or e}')
            return False
        if config.exclude_readonly:
            return not read_only
        return read_only
