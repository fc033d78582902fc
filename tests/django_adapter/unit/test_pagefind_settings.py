"""Unit tests for the Django PAGEFIND settings reader."""

from pathlib import Path

import pytest
from django.test import override_settings

from pagefindex.adapters.ports import ConfigProviderPort
from pagefindex.domain.exceptions import PagefindConfigError
from pagefindex.domain.settings import RunWith
from pagefindex_django.settings import (
    DjangoSettingsConfigProvider,
    get_hook_settings,
    get_pagefind_settings,
    read_django_pagefind_settings,
)


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.DjangoSettings")
class TestGetPagefindSettings:
    """Test mapping of UPPER_CASE keys to core settings."""

    def test_maps_core_keys(self) -> None:
        result = get_pagefind_settings(
            {
                "SITE": "_site",
                "RUN_WITH": "npm",
                "VERSION": "1.4.0",
                "ARGS": ["--verbose"],
                "INSTALL_DIR": "/opt/pagefind",
                "ENABLED": True,
            }
        )
        assert result == {
            "site": "_site",
            "run_with": "npm",
            "version": "1.4.0",
            "args": ["--verbose"],
            "install_dir": "/opt/pagefind",
        }

    def test_missing_keys_are_left_out(self) -> None:
        assert get_pagefind_settings({}) == {}

    def test_unknown_keys_rejected(self) -> None:
        with pytest.raises(PagefindConfigError, match="Unknown PAGEFIND settings: COMMAND"):
            get_pagefind_settings({"COMMAND": "bun"})

    def test_hook_keys(self) -> None:
        result = get_hook_settings({"ENABLED": True, "DEBOUNCE_MS": 0, "ON_ERROR": "fail", "SITE": "x"})
        assert result == {"enabled": True, "debounce_ms": 0, "on_error": "fail"}


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.DjangoSettingsConfigProvider")
class TestDjangoSettingsConfigProvider:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(DjangoSettingsConfigProvider(), ConfigProviderPort)

    def test_no_pagefind_setting(self) -> None:
        assert read_django_pagefind_settings() == {}
        assert DjangoSettingsConfigProvider().get_config() == {}

    @override_settings(PAGEFIND={"RUN_WITH": "pnpm", "SITE": Path("/srv/_site")})
    def test_feeds_merge_beneath_overrides(self, django_app) -> None:
        settings = django_app.config()
        assert settings.run_with is RunWith.PNPM
        assert settings.site == str(Path("/srv/_site"))
        assert django_app.config(run_with="bun").run_with is RunWith.BUN

    @override_settings(PAGEFIND={"VERSION": "next"})
    def test_invalid_values_surface_on_load(self, django_app) -> None:
        with pytest.raises(PagefindConfigError, match="invalid :version value 'next'"):
            django_app.config()
