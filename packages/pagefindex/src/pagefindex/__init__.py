"""pagefindex: run Pagefind search indexing from Python.

Pagefind builds a static search index from generated HTML. pagefindex picks
how to run it: through ``bunx``, ``pnpx`` or ``npx`` when a JavaScript
lockfile is present, a global ``pagefind`` from ``PATH``, a binary downloaded
into the user cache directory, or a custom command.

Settings are merged from defaults, ``PAGEFINDEX_*`` environment variables and
call-site overrides:

    >>> import pagefindex
    >>> settings = pagefindex.config(site="_site", run_with="global")
    >>> result = pagefindex.run_indexer(settings)  # doctest: +SKIP
    >>> pagefindex.format_success_message(result.output)  # doctest: +SKIP
    '1 language, 46 pages, 3810 words, and 2 filters'
"""

from __future__ import annotations

__version__ = "0.1.0"

from collections.abc import Mapping
from typing import Any

from pagefindex.api import Pagefindex
from pagefindex.domain.exceptions import (
    PagefindConfigError,
    PagefindDownloadError,
    PagefindError,
    PagefindInstallError,
    PagefindNotFoundError,
    PagefindVersionError,
    UnsupportedPlatformError,
)
from pagefindex.domain.results import IndexerFailure, IndexerResult
from pagefindex.domain.settings import CustomCommand, PagefindSettings, RunWith
from pagefindex.domain.version import LATEST
from pagefindex.usecases.output_formatter import (
    format_error_message,
    format_success_message,
)


def config(overrides: Mapping[str, Any] | None = None, **kwargs: Any) -> PagefindSettings:
    """Merge and validate configuration. Raises PagefindConfigError if invalid."""
    return Pagefindex().config(overrides, **kwargs)


def pagefind_version(settings: PagefindSettings) -> str:
    """Return the version of the resolved pagefind binary."""
    return Pagefindex().pagefind_version(settings)


def run_indexer(settings: PagefindSettings) -> IndexerResult:
    """Run pagefind with the given settings."""
    return Pagefindex().run_indexer(settings)


pagefind = run_indexer

__all__ = [
    "CustomCommand",
    "IndexerFailure",
    "IndexerResult",
    "LATEST",
    "Pagefindex",
    "PagefindConfigError",
    "PagefindDownloadError",
    "PagefindError",
    "PagefindInstallError",
    "PagefindNotFoundError",
    "PagefindSettings",
    "PagefindVersionError",
    "RunWith",
    "UnsupportedPlatformError",
    "config",
    "format_error_message",
    "format_success_message",
    "pagefind",
    "pagefind_version",
    "run_indexer",
]
