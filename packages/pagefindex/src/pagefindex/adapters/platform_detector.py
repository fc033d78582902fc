"""Platform detector adapter for detecting current OS and architecture.

This module provides an adapter that implements PlatformDetectorPort
by using Python's standard library platform module.
"""

from __future__ import annotations

import platform
import sys

from pagefindex.domain.binary import Platform


class OsPlatformDetector:
    """Adapter that detects the current platform using platform module.

    Implements PlatformDetectorPort by querying platform.system(),
    platform.machine() and the interpreter word size. Values are lower-cased
    but otherwise reported as-is; support is decided by the installer.
    """

    def detect(self) -> Platform:
        """Detect the current platform.

        Returns:
            Platform value object with os, machine and word_size fields.
        """
        return Platform(
            os=platform.system().lower(),
            machine=platform.machine().lower(),
            word_size=64 if sys.maxsize > 2**32 else 32,
        )
