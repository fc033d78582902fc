"""Pytest configuration for pagefindex core unit tests."""

from __future__ import annotations

import io
import tarfile

import pytest

from pagefindex.adapters.config_provider import StaticConfigProvider
from pagefindex.adapters.fakes import FakeDownloader, FakePlatformDetector, FakeSystem
from pagefindex.api import Pagefindex


def make_release_archive(members: dict[str, bytes]) -> bytes:
    """Build a gzip tarball in memory from a name -> content mapping."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        for name, content in members.items():
            info = tarfile.TarInfo(name=name)
            info.size = len(content)
            info.mode = 0o755
            archive.addfile(info, io.BytesIO(content))
    return buffer.getvalue()


@pytest.fixture
def fake_system() -> FakeSystem:
    """Provide FakeSystem for unit tests.

    Example:
        def test_global(fake_system):
            fake_system.add_executable("pagefind")
            fake_system.set_response("/usr/local/bin/pagefind", "pagefind 1.4.0")
    """
    return FakeSystem()


@pytest.fixture
def fake_downloader() -> FakeDownloader:
    return FakeDownloader(data=make_release_archive({"pagefind": b"#!/bin/sh\n"}))


@pytest.fixture
def fake_platform_detector() -> FakePlatformDetector:
    return FakePlatformDetector.from_tuple("linux", "x86_64")


@pytest.fixture
def config_provider() -> StaticConfigProvider:
    return StaticConfigProvider()


@pytest.fixture
def app(
    fake_system: FakeSystem,
    fake_downloader: FakeDownloader,
    fake_platform_detector: FakePlatformDetector,
    config_provider: StaticConfigProvider,
) -> Pagefindex:
    """Pagefindex façade wired to fakes only."""
    return Pagefindex(
        system=fake_system,
        downloader=fake_downloader,
        platform_detector=fake_platform_detector,
        config_provider=config_provider,
    )


@pytest.fixture
def make_archive():
    """Return the in-memory release archive builder."""
    return make_release_archive
