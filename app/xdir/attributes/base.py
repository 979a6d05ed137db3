"""Abstract base class for filesystem attribute probes.

This module defines the AttributeProbe interface the listing engine
uses for every OS-level query it cannot answer from a stat result.
"""

import os
import shutil
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class VolumeInfo:
    """Name and serial number of the volume holding a path.

    Attributes:
        name: Volume label (empty when the platform has none).
        serial: 32-bit volume serial number.
    """

    name: str
    serial: int

    @property
    def serial_text(self) -> str:
        """Serial number formatted as XXXX-XXXX."""
        return f"{self.serial >> 16:04X}-{self.serial & 0xFFFF:04X}"


class AttributeProbe(ABC):
    """Platform queries consumed by the listing engine.

    Hidden, system and read-only queries raise OSError when the
    attribute cannot be read; callers degrade that to a warning.

    Example:
        >>> probe = get_probe()
        >>> probe.is_hidden("/home/user/.bashrc")
        True
    """

    @abstractmethod
    def is_hidden(self, path: str) -> bool:
        """Return True if the entry at path is hidden.

        Raises:
            OSError: If the attribute cannot be queried.
        """

    @abstractmethod
    def is_system(self, path: str) -> bool:
        """Return True if the entry at path is a system file.

        Raises:
            OSError: If the attribute cannot be queried.
        """

    @abstractmethod
    def is_read_only(self, path: str) -> bool:
        """Return True if the entry at path is read-only.

        Raises:
            OSError: If the attribute cannot be queried.
        """

    def case_sensitive_default(self) -> bool:
        """Whether file names on this platform are case sensitive."""
        return True

    def read_link(self, path: str) -> str | None:
        """Return the raw target of a symlink, or None if it cannot be read."""
        try:
            return os.readlink(path)
        except (OSError, ValueError):
            return None

    def target_is_dir(self, path: str, target: str) -> bool:
        """Return True if a link target, relative to the link's directory, is a directory."""
        return (Path(path).parent / target).is_dir()

    def volume_info(self, path: str) -> VolumeInfo | None:
        """Return the volume holding path, or None if the platform has no labels."""
        return None

    def free_space(self, path: str) -> int:
        """Return free bytes on the volume holding path.

        Raises:
            OSError: If the volume cannot be queried.
        """
        return shutil.disk_usage(path).free
