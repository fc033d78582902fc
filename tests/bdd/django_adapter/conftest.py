"""Shared fixtures for Django adapter BDD tests."""

from __future__ import annotations

import os

import pytest

from pagefindex.adapters.config_provider import StaticConfigProvider
from pagefindex.api import Pagefindex


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
            SECRET_KEY="test-secret-key-for-bdd-tests",
        )
        django.setup()

    yield


@pytest.fixture
def fake_system(fake_system):
    """FakeSystem with a global pagefind 1.4.0 that indexes 46 pages."""
    fake_system.add_executable("pagefind")
    fake_system.set_response("/usr/local/bin/pagefind", "pagefind 1.4.0\n", args=["--version"])
    fake_system.set_default_response("Indexed 46 pages\n")
    return fake_system


@pytest.fixture
def pagefind_app(fake_system, fake_downloader, fake_platform_detector) -> Pagefindex:
    return Pagefindex(
        system=fake_system,
        downloader=fake_downloader,
        platform_detector=fake_platform_detector,
        config_provider=StaticConfigProvider(),
    )
