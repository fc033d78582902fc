"""Fake platform detector for testing.

This module provides a fake implementation of PlatformDetectorPort
that allows tests to control platform detection without relying on
actual OS/architecture detection.
"""

from __future__ import annotations

from pagefindex.domain.binary import Platform


class FakePlatformDetector:
    """Fake implementation of PlatformDetectorPort for testing.

    Example:
        >>> fake = FakePlatformDetector.from_tuple("darwin", "arm64")
        >>> fake.detect()
        Platform(os='darwin', machine='arm64', word_size=64)
    """

    def __init__(self, platform: Platform) -> None:
        """Initialize with the platform to return.

        Args:
            platform: The Platform value object to return from detect().
        """
        self._platform = platform

    @classmethod
    def from_tuple(
        cls,
        os: str,
        machine: str,
        word_size: int = 64,
    ) -> FakePlatformDetector:
        """Create a FakePlatformDetector from OS and machine strings.

        Convenience constructor for when you don't want to import Platform.
        """
        return cls(Platform(os=os, machine=machine, word_size=word_size))

    def detect(self) -> Platform:
        return self._platform
