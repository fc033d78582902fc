"""Domain exceptions.

Exception hierarchy:
- PagefindError: Base for every error raised by the core package.
  - PagefindConfigError: Invalid configuration values.
    - UnsupportedPlatformError: OS or architecture has no pagefind release.
  - PagefindNotFoundError: No usable pagefind installation was found.
  - PagefindVersionError: Version output could not be read or is incompatible.
  - PagefindDownloadError: Release archive could not be fetched.
  - PagefindInstallError: Release archive could not be unpacked.

A non-zero exit from the indexer itself is not an exception; it is reported
as a failed IndexerResult so callers get the full invocation context.
"""

from __future__ import annotations


class PagefindError(Exception):
    """Base exception for pagefindex.

    Framework adapters (Django) may catch this and re-raise as
    framework-specific exceptions, but the core always uses this hierarchy.
    """

    pass


class PagefindConfigError(PagefindError):
    """Raised when pagefindex configuration is invalid.

    Raised by the configuration record and the configuration loader. The
    message names the offending field and the accepted shape.
    """

    pass


class UnsupportedPlatformError(PagefindConfigError):
    """Raised when the target OS or CPU architecture is not supported.

    This is an environment precondition, so it is raised as soon as the
    installer descriptor is built rather than at download time.
    """

    pass


class PagefindNotFoundError(PagefindError):
    """Raised when no pagefind executable can be resolved."""

    pass


class PagefindVersionError(PagefindError):
    """Raised for unreadable or incompatible pagefind versions."""

    pass


class PagefindDownloadError(PagefindError):
    """Raised when the pagefind release archive download fails.

    Attributes:
        message: Human-readable error description.
        url: The URL that failed to download (optional).
        original_error: The underlying exception that caused the failure (optional).
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.original_error = original_error


class PagefindInstallError(PagefindError):
    """Raised when the pagefind binary cannot be installed from an archive."""

    pass
