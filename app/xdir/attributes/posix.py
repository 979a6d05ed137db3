"""Attribute probe for Linux, macOS and other POSIX systems."""

import os
import stat
import sys
from pathlib import Path

from xdir.attributes.base import AttributeProbe


class PosixProbe(AttributeProbe):
    """POSIX attribute queries.

    Dotfiles are hidden, there are no system files, and an entry is
    read-only when its owner write bit is clear.
    """

    def is_hidden(self, path: str) -> bool:
        os.lstat(path)
        return Path(path).name.startswith(".")

    def is_system(self, path: str) -> bool:
        return False

    def is_read_only(self, path: str) -> bool:
        return not os.lstat(path).st_mode & stat.S_IWUSR

    def case_sensitive_default(self) -> bool:
        # HFS+/APFS default to case-insensitive
        return sys.platform != "darwin"
