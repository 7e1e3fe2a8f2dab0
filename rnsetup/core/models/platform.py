"""
Platform model — which host operating system we are setting up.

The tag is read once when the installer is built and never changes
for the rest of the run.
"""

from __future__ import annotations

import sys
from enum import Enum


class Platform(str, Enum):
    """Closed set of host platforms the installer knows about."""

    MACOS = "macos"
    LINUX = "linux"
    WINDOWS = "windows"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_identifier(cls, identifier: str | None = None) -> Platform:
        """Map a ``sys.platform`` style identifier to a Platform.

        ``darwin`` → MACOS, ``linux`` → LINUX, ``win32`` → WINDOWS.
        Anything else is UNSUPPORTED.
        """
        ident = (identifier if identifier is not None else sys.platform).lower()
        if ident == "darwin":
            return cls.MACOS
        if ident == "linux":
            return cls.LINUX
        if ident == "win32":
            return cls.WINDOWS
        return cls.UNSUPPORTED

    @property
    def label(self) -> str:
        return {
            Platform.MACOS: "macOS",
            Platform.LINUX: "Linux",
            Platform.WINDOWS: "Windows",
            Platform.UNSUPPORTED: "Unsupported",
        }[self]
