"""HTTPX-based implementation of the DownloaderPort.

This adapter uses httpx to download pagefind release archives.
"""

from __future__ import annotations

import httpx

from pagefindex.adapters.ports import DownloaderPort
from pagefindex.domain.exceptions import PagefindDownloadError


class HttpxDownloader:
    """HTTPX-based adapter for downloading pagefind release archives.

    GitHub release assets redirect to a CDN, so redirects are followed.
    No timeout is applied; a stalled download blocks the caller.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        """Initialize the HTTPX downloader.

        Args:
            client: Optional httpx.Client for dependency injection (testing).
                   If not provided, a new client is created per request.
        """
        self._client = client

    def fetch(self, url: str) -> bytes:
        """Download url and return the response body.

        Args:
            url: Release archive URL.

        Returns:
            Response body bytes.

        Raises:
            PagefindDownloadError: For network failures and HTTP errors (4xx, 5xx).
        """
        try:
            if self._client is not None:
                return self._get(self._client, url)
            with httpx.Client(follow_redirects=True, timeout=None) as client:
                return self._get(client, url)
        except httpx.HTTPStatusError as e:
            raise PagefindDownloadError(
                f"HTTP {e.response.status_code}", url=url, original_error=e
            ) from e
        except httpx.HTTPError as e:
            raise PagefindDownloadError(
                f"Download failed: {e}", url=url, original_error=e
            ) from e

    @staticmethod
    def _get(client: httpx.Client, url: str) -> bytes:
        response = client.get(url, follow_redirects=True)
        response.raise_for_status()
        return response.content


# Runtime protocol check
assert isinstance(HttpxDownloader(), DownloaderPort)
