"""Shared fixtures for BDD tests."""

import io
import tarfile

import pytest

from pagefindex.adapters.fakes import FakeDownloader, FakePlatformDetector, FakeSystem


@pytest.fixture
def context() -> dict:
    """Shared context for passing state between steps."""
    return {"result": None, "error": None}


@pytest.fixture
def fake_system() -> FakeSystem:
    return FakeSystem()


@pytest.fixture
def fake_downloader(make_archive) -> FakeDownloader:
    return FakeDownloader(data=make_archive({"pagefind": b"#!/bin/sh\n"}))


@pytest.fixture
def fake_platform_detector() -> FakePlatformDetector:
    return FakePlatformDetector.from_tuple("linux", "x86_64")


@pytest.fixture
def make_archive():
    """Return an in-memory release archive builder."""

    def build(members: dict[str, bytes]) -> bytes:
        buffer = io.BytesIO()
        with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
            for name, content in members.items():
                info = tarfile.TarInfo(name=name)
                info.size = len(content)
                archive.addfile(info, io.BytesIO(content))
        return buffer.getvalue()

    return build
