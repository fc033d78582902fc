"""Pytest configuration for Django adapter unit tests."""

import os

import pytest

from pagefindex.adapters.config_provider import StaticConfigProvider
from pagefindex.adapters.fakes import FakeDownloader, FakePlatformDetector, FakeSystem
from pagefindex.api import Pagefindex
from pagefindex_django.settings import DjangoSettingsConfigProvider


@pytest.fixture(scope="session", autouse=True)
def _configure_django():
    """Configure Django once per test session."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "django.conf.global_settings")

    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            INSTALLED_APPS=["pagefindex_django"],
            USE_TZ=True,
            SECRET_KEY="test-secret-key-for-unit-tests",
        )
        django.setup()

    yield


@pytest.fixture
def fake_system() -> FakeSystem:
    """FakeSystem with a global pagefind 1.4.0 on PATH."""
    system = FakeSystem()
    system.add_executable("pagefind")
    system.set_response("/usr/local/bin/pagefind", "pagefind 1.4.0\n", args=["--version"])
    system.set_default_response("Indexed 1 language\nIndexed 46 pages\n")
    return system


@pytest.fixture
def django_app(fake_system: FakeSystem) -> Pagefindex:
    """Pagefindex façade reading settings.PAGEFIND, with fake system access."""
    return Pagefindex(
        system=fake_system,
        downloader=FakeDownloader(),
        platform_detector=FakePlatformDetector.from_tuple("linux", "x86_64"),
        config_provider=DjangoSettingsConfigProvider(),
    )


@pytest.fixture
def static_app(fake_system: FakeSystem) -> Pagefindex:
    """Pagefindex façade with empty process-wide configuration."""
    return Pagefindex(
        system=fake_system,
        downloader=FakeDownloader(),
        platform_detector=FakePlatformDetector.from_tuple("linux", "x86_64"),
        config_provider=StaticConfigProvider(),
    )
