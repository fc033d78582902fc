"""Domain layer: value objects and exceptions."""

from pagefindex.domain.binary import InstallerDescriptor, Platform, target_triple
from pagefindex.domain.exceptions import (
    PagefindConfigError,
    PagefindDownloadError,
    PagefindError,
    PagefindInstallError,
    PagefindNotFoundError,
    PagefindVersionError,
    UnsupportedPlatformError,
)
from pagefindex.domain.results import (
    CommandOutput,
    IndexerFailure,
    IndexerResult,
    ResolvedInvocation,
)
from pagefindex.domain.settings import CustomCommand, PagefindSettings, RunWith
from pagefindex.domain.version import LATEST, Version, check_compatibility

__all__ = [
    "CommandOutput",
    "CustomCommand",
    "IndexerFailure",
    "IndexerResult",
    "InstallerDescriptor",
    "LATEST",
    "PagefindConfigError",
    "PagefindDownloadError",
    "PagefindError",
    "PagefindInstallError",
    "PagefindNotFoundError",
    "PagefindSettings",
    "PagefindVersionError",
    "Platform",
    "ResolvedInvocation",
    "RunWith",
    "UnsupportedPlatformError",
    "Version",
    "check_compatibility",
    "target_triple",
]
