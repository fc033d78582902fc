"""Port interfaces for the pagefindex core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pagefindex.domain.binary import Platform
    from pagefindex.domain.results import CommandOutput


@runtime_checkable
class SystemPort(Protocol):
    """Port interface for process execution and filesystem access.

    Implementations run external commands, look up executables on ``PATH``
    and touch the filesystem on behalf of the command resolver, the indexer
    runner and the local installer.

    Contract:
        - run() executes exactly once, blocks until exit, merges stderr into stdout
        - run() never raises for a non-zero exit status
        - find_executable() returns None when the name is not on PATH
        - write_executable() replaces any existing file and sets mode 0o755
    """

    def run(self, command: str, args: Sequence[str]) -> CommandOutput:
        """Run a command and capture its combined output.

        Args:
            command: Executable name or path.
            args: Arguments passed to the executable.

        Returns:
            CommandOutput with the captured text and exit status.
        """
        ...

    def find_executable(self, name: str) -> str | None:
        """Return the full path of an executable on PATH, or None."""
        ...

    def file_exists(self, path: str | Path) -> bool:
        """Return True if a file exists at path."""
        ...

    def make_dirs(self, path: Path) -> None:
        """Create a directory and its parents if missing."""
        ...

    def write_executable(self, path: Path, data: bytes) -> None:
        """Write data to path, replacing any existing file, and mark it executable."""
        ...


@runtime_checkable
class DownloaderPort(Protocol):
    """Port interface for fetching release archives.

    Contract:
        - fetch() returns the full response body
        - fetch() raises PagefindDownloadError for transport and HTTP status errors
    """

    def fetch(self, url: str) -> bytes:
        """Download url and return its body.

        Raises:
            PagefindDownloadError: If the request fails or returns an error status.
        """
        ...


@runtime_checkable
class PlatformDetectorPort(Protocol):
    """Port interface for detecting the host platform.

    Contract:
        - detect() returns raw, lower-cased platform facts
        - detect() does not validate support; the installer does
    """

    def detect(self) -> Platform:
        """Detect the current OS, machine and word size."""
        ...


@runtime_checkable
class ConfigProviderPort(Protocol):
    """Port interface for process-wide pagefindex configuration.

    Implementations supply default overrides that are merged beneath
    call-site arguments on every configuration load.

    Contract:
        - get_config() returns a mapping with snake_case setting names
        - Missing settings are simply absent from the mapping
    """

    def get_config(self) -> Mapping[str, Any]:
        """Return the process-wide configuration overrides."""
        ...
