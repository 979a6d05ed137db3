"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest
from xdir.attributes.base import AttributeProbe
from xdir.listing.models import Entry


class FakeProbe(AttributeProbe):
    """Attribute probe driven by sets of paths instead of the OS."""

    def __init__(self) -> None:
        self.hidden: set[str] = set()
        self.system: set[str] = set()
        self.read_only: set[str] = set()
        self.failing: set[str] = set()
        self.free = 123_456_789

    def _check(self, path: str) -> None:
        if path in self.failing:
            raise PermissionError(13, "Permission denied", path)

    def is_hidden(self, path: str) -> bool:
        self._check(path)
        return path in self.hidden

    def is_system(self, path: str) -> bool:
        self._check(path)
        return path in self.system

    def is_read_only(self, path: str) -> bool:
        self._check(path)
        return path in self.read_only

    def free_space(self, path: str) -> int:
        return self.free


@pytest.fixture
def fake_probe() -> FakeProbe:
    """Attribute probe with no hidden, system or read-only entries."""
    return FakeProbe()


@pytest.fixture
def make_entry() -> Callable[..., Entry]:
    """Factory for Entry records under /data."""

    def _make(
        name: str,
        *,
        is_dir: bool = False,
        size: int = 0,
        mtime: datetime | float = 0.0,
        directory: str = "/data",
        **kwargs: object,
    ) -> Entry:
        if isinstance(mtime, datetime):
            mtime = mtime.timestamp()
        return Entry(
            name=name,
            path=os.path.join(directory, name),
            is_dir=is_dir,
            size=size,
            mtime=mtime,
            **kwargs,  # type: ignore[arg-type]
        )

    return _make


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Directory with a.txt (10B), b.txt (20B) and sub/c.txt (5B)."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_bytes(b"x" * 10)
    (root / "b.txt").write_bytes(b"x" * 20)
    sub = root / "sub"
    sub.mkdir()
    (sub / "c.txt").write_bytes(b"x" * 5)
    return root
