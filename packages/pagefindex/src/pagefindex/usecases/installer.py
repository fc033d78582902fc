"""Local installer use case: download and unpack a managed pagefind binary."""

from __future__ import annotations

import io
import logging
import os
import sys
import tarfile
from dataclasses import replace
from pathlib import Path
from typing import Any

from pagefindex.adapters.ports import DownloaderPort, PlatformDetectorPort, SystemPort
from pagefindex.domain.binary import (
    BINARY_NAMES,
    LATEST_VERSION,
    RELEASE_URL,
    InstallerDescriptor,
    target_triple,
)
from pagefindex.domain.exceptions import PagefindInstallError
from pagefindex.domain.version import LATEST

logger = logging.getLogger(__name__)


def default_install_base() -> Path:
    """Get the user cache directory for pagefind binaries.

    Returns platform-specific cache directory:
    - Linux: $XDG_CACHE_HOME/pagefindex or ~/.cache/pagefindex
    - macOS: ~/Library/Caches/pagefindex
    - Windows: %LOCALAPPDATA%\\pagefindex
    """
    home = Path(os.environ.get("HOME", "~")).expanduser()

    if sys.platform == "darwin":
        return home / "Library" / "Caches" / "pagefindex"

    if sys.platform == "win32":
        local_app_data = os.environ.get("LOCALAPPDATA")
        if local_app_data:
            return Path(local_app_data) / "pagefindex"
        return home / "AppData" / "Local" / "pagefindex"

    # Linux and other Unix-like systems
    xdg_cache = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache:
        return Path(xdg_cache) / "pagefindex"

    return home / ".cache" / "pagefindex"


class LocalInstaller:
    """Use case for installing pagefind from its GitHub release archives.

    The install pipeline is ``config() -> download() -> install()``. config()
    builds an InstallerDescriptor through a chain of resolve steps, each of
    which fills one field only when it is still empty. Errors are raised and
    propagate unchanged through the remaining steps.
    """

    def __init__(
        self,
        system: SystemPort,
        downloader: DownloaderPort,
        platform_detector: PlatformDetectorPort,
        base_path: str | Path | None = None,
    ) -> None:
        """Initialize the installer.

        Args:
            system: Filesystem access for writing the binary.
            downloader: Fetches release archives.
            platform_detector: Detects the host OS and architecture.
            base_path: Directory holding per-version install directories.
                Defaults to the user cache directory.
        """
        self._system = system
        self._downloader = downloader
        self._platform_detector = platform_detector
        self._base_path = Path(base_path) if base_path is not None else None

    def config(
        self,
        version: str | None = None,
        base_path: str | Path | None = None,
        **fields: Any,
    ) -> InstallerDescriptor:
        """Build a fully resolved installer descriptor.

        Args:
            version: Pagefind version, ``"latest"`` or None for the bundled
                fallback version.
            base_path: Overrides the installer's base path for this descriptor.
            **fields: Any InstallerDescriptor field to pin up front.

        Returns:
            InstallerDescriptor with version, os_type, target_arch, binary,
            dir and url populated.

        Raises:
            UnsupportedPlatformError: If no release exists for the platform.
        """
        if "binary" in fields and fields["binary"] is not None:
            fields["binary"] = Path(fields["binary"])
        descriptor = InstallerDescriptor(version=version, **fields)

        descriptor = self.resolve_version(descriptor)
        descriptor = self.resolve_os_type(descriptor)
        descriptor = self.resolve_target_arch(descriptor)
        descriptor = self.resolve_path(descriptor, base_path)
        return self.resolve_url(descriptor)

    def resolve_version(self, descriptor: InstallerDescriptor) -> InstallerDescriptor:
        if descriptor.version is None or descriptor.version == LATEST:
            return replace(descriptor, version=LATEST_VERSION)
        return descriptor

    def resolve_os_type(self, descriptor: InstallerDescriptor) -> InstallerDescriptor:
        if descriptor.os_type is not None:
            return descriptor
        return replace(descriptor, os_type=self._platform_detector.detect().os)

    def resolve_target_arch(self, descriptor: InstallerDescriptor) -> InstallerDescriptor:
        if descriptor.target_arch is not None:
            return descriptor

        platform = self._platform_detector.detect()
        target = target_triple(
            descriptor.os_type or platform.os, platform.machine, platform.word_size
        )
        return replace(descriptor, target_arch=target)

    def resolve_path(
        self, descriptor: InstallerDescriptor, base_path: str | Path | None = None
    ) -> InstallerDescriptor:
        if descriptor.binary is not None:
            return replace(descriptor, dir=descriptor.binary.parent)

        name = f"pagefind-{descriptor.version}-{descriptor.target_arch}"
        if base_path is not None:
            base = Path(base_path)
        elif self._base_path is not None:
            base = self._base_path
        else:
            base = default_install_base()
        ext = ".exe" if descriptor.is_windows else ""
        binary = base / name / f"pagefind{ext}"

        return replace(descriptor, binary=binary, dir=binary.parent)

    def resolve_url(self, descriptor: InstallerDescriptor) -> InstallerDescriptor:
        if descriptor.url is not None:
            return descriptor
        url = RELEASE_URL.format(version=descriptor.version, target=descriptor.target_arch)
        return replace(descriptor, url=url)

    def download(self, descriptor: InstallerDescriptor) -> InstallerDescriptor:
        """Fetch the release archive unless its bytes are already present.

        Raises:
            PagefindDownloadError: If the archive cannot be fetched.
        """
        logger.info(
            f"Downloading pagefind v{descriptor.version} for {descriptor.target_arch}..."
        )

        if descriptor.data is not None:
            return descriptor

        assert descriptor.url is not None  # Guaranteed by resolve_url
        return replace(descriptor, data=self._downloader.fetch(descriptor.url))

    def install(self, descriptor: InstallerDescriptor) -> InstallerDescriptor:
        """Extract the pagefind binary from the archive and write it to disk.

        Returns:
            The descriptor that was installed.

        Raises:
            PagefindInstallError: If the archive cannot be read or holds no
                pagefind binary.
        """
        assert descriptor.binary is not None and descriptor.dir is not None
        self._system.make_dirs(descriptor.dir)

        binary_data = self._extract_binary(descriptor.data or b"")
        self._system.write_executable(descriptor.binary, binary_data)

        logger.info(f"Installed pagefind v{descriptor.version} at {descriptor.binary}")
        return descriptor

    def ensure(
        self,
        version: str | None = None,
        base_path: str | Path | None = None,
        binary: str | Path | None = None,
    ) -> InstallerDescriptor:
        """Return a descriptor for an installed binary, installing it if absent."""
        descriptor = self.config(version, base_path=base_path, binary=binary)
        assert descriptor.binary is not None

        if self._system.file_exists(descriptor.binary):
            logger.debug(f"Using installed pagefind at {descriptor.binary}")
            return descriptor

        return self.install(self.download(descriptor))

    @staticmethod
    def _extract_binary(data: bytes) -> bytes:
        contents: dict[str, bytes] = {}
        try:
            with tarfile.open(fileobj=io.BytesIO(data), mode="r:gz") as archive:
                for member in archive.getmembers():
                    handle = archive.extractfile(member) if member.isfile() else None
                    if handle is not None:
                        contents[member.name] = handle.read()
        except (tarfile.TarError, OSError, EOFError) as e:
            raise PagefindInstallError(f"Failed to extract archive: {e}") from e

        for name, content in contents.items():
            if name.removeprefix("./") in BINARY_NAMES:
                return content

        raise PagefindInstallError("pagefind binary not found in archive")
