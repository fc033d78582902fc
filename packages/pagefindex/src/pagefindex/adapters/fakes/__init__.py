"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without real I/O operations.
"""

from pagefindex.adapters.fakes.fake_downloader import FakeDownloader
from pagefindex.adapters.fakes.fake_platform_detector import FakePlatformDetector
from pagefindex.adapters.fakes.fake_system import FakeSystem

__all__ = [
    "FakeDownloader",
    "FakePlatformDetector",
    "FakeSystem",
]
