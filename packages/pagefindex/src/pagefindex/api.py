"""Pagefindex façade wiring ports to use cases.

Provides the programmatic API: configuration loading, version lookup and
indexer runs, with every collaborator injectable for testing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pagefindex.adapters.config_provider import EnvironmentConfigProvider
from pagefindex.adapters.httpx_downloader import HttpxDownloader
from pagefindex.adapters.os_system import OsSystem
from pagefindex.adapters.platform_detector import OsPlatformDetector
from pagefindex.adapters.ports import (
    ConfigProviderPort,
    DownloaderPort,
    PlatformDetectorPort,
    SystemPort,
)
from pagefindex.domain.exceptions import PagefindConfigError
from pagefindex.domain.results import IndexerResult
from pagefindex.domain.settings import PagefindSettings
from pagefindex.usecases.command_resolver import CommandResolver, sanitize_args
from pagefindex.usecases.config_loader import ConfigLoader
from pagefindex.usecases.indexer_runner import IndexerRunner
from pagefindex.usecases.installer import LocalInstaller


class Pagefindex:
    """Entry point for running pagefind.

    Example:
        >>> from pagefindex.adapters.fakes import FakeSystem
        >>> system = FakeSystem()
        >>> system.set_default_response("Indexed 5 pages")
        >>> app = Pagefindex(system=system)
        >>> settings = app.config(run_with="npm", site="_site")
        >>> app.run_indexer(settings).output
        'Indexed 5 pages'
    """

    def __init__(
        self,
        system: SystemPort | None = None,
        downloader: DownloaderPort | None = None,
        platform_detector: PlatformDetectorPort | None = None,
        config_provider: ConfigProviderPort | None = None,
    ) -> None:
        """Initialize the façade.

        Args:
            system: Process and filesystem gateway. Defaults to OsSystem.
            downloader: Release archive downloader. Defaults to HttpxDownloader.
            platform_detector: Host platform detector. Defaults to OsPlatformDetector.
            config_provider: Process-wide configuration. Defaults to
                EnvironmentConfigProvider.
        """
        self.system = system or OsSystem()
        self.installer = LocalInstaller(
            system=self.system,
            downloader=downloader or HttpxDownloader(),
            platform_detector=platform_detector or OsPlatformDetector(),
        )
        self.resolver = CommandResolver(self.system, self.installer)
        self.runner = IndexerRunner(self.system)
        self.loader = ConfigLoader(config_provider or EnvironmentConfigProvider())

    def config(
        self, overrides: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> PagefindSettings:
        """Merge defaults, process-wide configuration and overrides.

        Raises:
            PagefindConfigError: If the merged configuration is invalid.
        """
        return self.loader.load(overrides, **kwargs)

    def pagefind_version(self, settings: PagefindSettings) -> str:
        """Return the version reported by the resolved pagefind.

        Resolution skips the version compatibility check.

        Raises:
            PagefindError: If pagefind cannot be resolved or its version read.
        """
        invocation = self.resolver.resolve(settings, validate=False)
        return self.resolver.query_version(invocation.command, invocation.args)

    def run_indexer(self, settings: PagefindSettings) -> IndexerResult:
        """Run pagefind over ``settings.site``.

        Returns:
            IndexerResult; a non-zero exit is a failure result, not an exception.

        Raises:
            PagefindConfigError: If no site is configured.
            PagefindError: If pagefind cannot be resolved.
        """
        if not settings.site:
            raise PagefindConfigError("site is required to run pagefind")

        invocation = self.resolver.resolve(settings)
        args = [
            *sanitize_args(invocation.args),
            "--site",
            settings.site,
            *sanitize_args(settings.args),
        ]
        return self.runner.run(invocation.command, args)
