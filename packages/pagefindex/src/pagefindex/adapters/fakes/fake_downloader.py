"""Fake downloader for testing.

Provides a test double for DownloaderPort that returns
preconfigured bytes without network operations.
"""

from __future__ import annotations


class FakeDownloader:
    """Fake implementation of DownloaderPort for testing.

    Returns preconfigured bytes without making network calls.
    Supports configuring exceptions for error path testing and records
    all requested URLs for assertion in tests.

    Example:
        >>> fake = FakeDownloader(data=b"archive")
        >>> fake.fetch("https://example.com/pagefind.tar.gz")
        b'archive'
        >>> fake.calls
        ['https://example.com/pagefind.tar.gz']
    """

    def __init__(self, data: bytes = b"") -> None:
        self._data = data
        self._exception: BaseException | None = None
        self._calls: list[str] = []

    @property
    def calls(self) -> list[str]:
        """Return list of URLs passed to fetch()."""
        return self._calls

    def set_response(self, data: bytes) -> None:
        """Configure the bytes to return from fetch()."""
        self._data = data

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from fetch(), or None to clear."""
        self._exception = exception

    def fetch(self, url: str) -> bytes:
        self._calls.append(url)

        if self._exception is not None:
            raise self._exception

        return self._data
