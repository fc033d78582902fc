"""Binary-related domain value objects.

This module contains value objects for installing a locally managed pagefind
binary: the host platform facts, the release target triple mapping, and the
installer descriptor that is filled in step by step.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pagefindex.domain.exceptions import UnsupportedPlatformError

# Fallback version used when "latest" is requested for a local install
LATEST_VERSION = "1.4.0"

RELEASE_URL = (
    "https://github.com/Pagefind/pagefind/releases/download/"
    "v{version}/pagefind-v{version}-{target}.tar.gz"
)

BINARY_NAMES = ("pagefind", "pagefind.exe")

# Mapping from (machine, word size) to the architecture used in release names
_ARCH_MAP: dict[tuple[str, int], str] = {
    ("x86_64", 64): "x86_64",
    ("amd64", 64): "x86_64",
    ("aarch64", 64): "aarch64",
    ("arm64", 64): "aarch64",
}

_TARGET_SUFFIXES: dict[str, str] = {
    "darwin": "apple-darwin",
    "linux": "unknown-linux-musl",
    "windows": "pc-windows-msvc",
}


@dataclass(frozen=True)
class Platform:
    """Host platform facts as reported by the platform detector.

    Attributes:
        os: Lower-cased operating system name (``linux``, ``darwin``, ``windows``).
        machine: Lower-cased machine name (``x86_64``, ``arm64``, ...).
        word_size: Native word size in bits.
    """

    os: str
    machine: str
    word_size: int = 64


def target_triple(os_type: str, machine: str, word_size: int) -> str:
    """Map platform facts to a pagefind release target triple.

    Args:
        os_type: Operating system name.
        machine: CPU architecture name.
        word_size: Native word size in bits.

    Returns:
        Target triple such as ``x86_64-unknown-linux-musl``.

    Raises:
        UnsupportedPlatformError: If the architecture or OS has no release.
    """
    arch = _ARCH_MAP.get((machine.lower(), word_size))
    if arch is None:
        raise UnsupportedPlatformError(f"Unsupported architecture: {machine}")

    suffix = _TARGET_SUFFIXES.get(os_type)
    if suffix is None:
        raise UnsupportedPlatformError(f"Unsupported OS: {os_type!r}")

    return f"{arch}-{suffix}"


@dataclass(frozen=True)
class InstallerDescriptor:
    """Accumulated state for a single local install attempt.

    Every field starts empty and is filled by one installer step. Steps never
    overwrite a field that is already set, so callers can pin any value up
    front (a custom binary path, a URL mirror, pre-fetched archive bytes).

    Attributes:
        version: Pagefind version to install.
        os_type: Operating system name.
        target_arch: Release target triple.
        binary: Path of the installed binary.
        dir: Directory containing the binary.
        url: Release archive URL.
        data: Release archive bytes, once downloaded.
    """

    version: str | None = None
    os_type: str | None = None
    target_arch: str | None = None
    binary: Path | None = None
    dir: Path | None = None
    url: str | None = None
    data: bytes | None = None

    @property
    def is_windows(self) -> bool:
        return self.os_type == "windows"
