"""Interface adapters: ports and their production implementations."""

from pagefindex.adapters.config_provider import (
    EnvironmentConfigProvider,
    StaticConfigProvider,
)
from pagefindex.adapters.httpx_downloader import HttpxDownloader
from pagefindex.adapters.os_system import OsSystem
from pagefindex.adapters.platform_detector import OsPlatformDetector
from pagefindex.adapters.ports import (
    ConfigProviderPort,
    DownloaderPort,
    PlatformDetectorPort,
    SystemPort,
)

__all__ = [
    "ConfigProviderPort",
    "DownloaderPort",
    "EnvironmentConfigProvider",
    "HttpxDownloader",
    "OsPlatformDetector",
    "OsSystem",
    "PlatformDetectorPort",
    "StaticConfigProvider",
    "SystemPort",
]
