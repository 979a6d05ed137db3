"""Resolution of command-line arguments into listing targets.

Arguments are either wildcard patterns (optionally prefixed by the
directory to start in) or, when no wildcard is needed at all, a list
of explicit paths that are listed individually.
"""

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

WILDCARD_CHARS = frozenset("*?[")

# Patterns that stand for "every file"
MATCH_ALL_PATTERNS = frozenset({"*", "*.*"})


class TargetError(ValueError):
    """Raised when the arguments cannot be combined into one listing."""


@dataclass(frozen=True, slots=True)
class Targets:
    """What a listing run should look at.

    Attributes:
        start_directory: Absolute directory the traversal starts in.
        patterns: Wildcard patterns (empty when matching everything).
        match_all: Every name matches.
        explicit_match_all: ``*`` or ``*.*`` was given explicitly.
        paths: Absolute paths to list individually (absolute-path mode).
    """

    start_directory: str
    patterns: tuple[str, ...] = ()
    match_all: bool = True
    explicit_match_all: bool = False
    paths: tuple[str, ...] = ()

    @property
    def is_path_list(self) -> bool:
        """True when explicit paths are listed instead of a directory."""
        return bool(self.paths)


def has_wildcard(arg: str) -> bool:
    """Return True if an argument contains a wildcard character."""
    return any(c in WILDCARD_CHARS for c in arg)


def _normalize(path: Path) -> str:
    """Collapse ``.`` and ``..`` components without resolving symlinks."""
    return os.path.normpath(path)


def resolve_targets(args: Sequence[str], *, cwd: str, recurse: bool = False) -> Targets:
    """Turn positional arguments into listing targets.

    Rules:
        - no arguments: list the working directory, matching everything
        - a single existing directory: list it, matching everything
        - no wildcard anywhere and no recursion: list the arguments as
          explicit paths
        - otherwise the first argument's directory part (if any) is the
          start directory and the base names are patterns

    Args:
        args: Positional arguments.
        cwd: Working directory.
        recurse: Whether subdirectories are searched too (plain names
            then act as patterns).

    Returns:
        Resolved Targets.

    Raises:
        TargetError: If ``*`` or ``*.*`` is combined with other patterns.
    """
    if not args:
        return Targets(start_directory=cwd)

    first = Path(cwd, args[0])
    single_directory = len(args) == 1 and not has_wildcard(args[0]) and first.is_dir()
    if not recurse and not single_directory and not any(has_wildcard(a) for a in args):
        paths = tuple(_normalize(Path(cwd, a)) for a in args)
        return Targets(start_directory=cwd, paths=paths)

    if not has_wildcard(args[0]) and first.is_dir():
        start = _normalize(first)
        patterns = list(args[1:])
    else:
        leading = Path(args[0])
        start = cwd if leading.parent == Path(".") else _normalize(Path(cwd, leading.parent))
        patterns = [leading.name, *args[1:]]
    patterns = [Path(p).name for p in patterns]

    explicit = any(p in MATCH_ALL_PATTERNS for p in patterns)
    if explicit and len(patterns) > 1:
        msg = f"You can not specify multiple patterns {patterns} in combination with * or *.*"
        raise TargetError(msg)

    return Targets(
        start_directory=start,
        patterns=() if explicit else tuple(patterns),
        match_all=explicit or not patterns,
        explicit_match_all=explicit,
    )
