"""Attribute probe for Windows.

Reads the FILE_ATTRIBUTE_* bits that os.lstat exposes on Windows
as st_file_attributes.
"""

import logging
import os
import stat
from pathlib import PureWindowsPath

from xdir.attributes.base import AttributeProbe, VolumeInfo

logger = logging.getLogger(__name__)


class WindowsProbe(AttributeProbe):
    """Windows attribute queries based on st_file_attributes."""

    def _attributes(self, path: str) -> int:
        """Return the file attribute bits of path (0 if unavailable)."""
        return getattr(os.lstat(path), "st_file_attributes", 0)

    def is_hidden(self, path: str) -> bool:
        return bool(self._attributes(path) & stat.FILE_ATTRIBUTE_HIDDEN)

    def is_system(self, path: str) -> bool:
        return bool(self._attributes(path) & stat.FILE_ATTRIBUTE_SYSTEM)

    def is_read_only(self, path: str) -> bool:
        return bool(self._attributes(path) & stat.FILE_ATTRIBUTE_READONLY)

    def case_sensitive_default(self) -> bool:
        return False

    def volume_info(self, path: str) -> VolumeInfo | None:
        """Describe the drive holding path.

        The volume is named after its drive letter. Windows reports the
        volume serial number as st_dev of any path on the volume.

        Returns:
            VolumeInfo, or None when path has no drive or the drive
            root cannot be stat-ed.
        """
        drive = PureWindowsPath(path).drive
        if not drive:
            return None
        try:
            st = os.stat(drive + "\\")
        except OSError as e:
            logger.debug("Cannot query volume of %s: %s", path, e)
            return None
        return VolumeInfo(name=drive.rstrip(":").upper(), serial=st.st_dev & 0xFFFFFFFF)
