"""Filesystem attribute probes.

This module exports the AttributeProbe interface and a factory that
picks the implementation for the running platform.
"""

import sys

from xdir.attributes.base import AttributeProbe, VolumeInfo
from xdir.attributes.posix import PosixProbe
from xdir.attributes.windows import WindowsProbe


def get_probe(platform: str | None = None) -> AttributeProbe:
    """Get the attribute probe for a platform.

    Args:
        platform: A sys.platform value. Defaults to the running platform.

    Returns:
        WindowsProbe on Windows, PosixProbe everywhere else.
    """
    if (platform or sys.platform) == "win32":
        return WindowsProbe()
    return PosixProbe()


__all__ = [
    "AttributeProbe",
    "PosixProbe",
    "VolumeInfo",
    "WindowsProbe",
    "get_probe",
]
