"""Settings reader for the Django pagefindex adapter."""

from __future__ import annotations

from typing import Any

from pagefindex.domain.exceptions import PagefindConfigError

# Mapping from UPPER_CASE Django keys to snake_case core settings
_CORE_FIELDS = {
    "SITE": "site",
    "RUN_WITH": "run_with",
    "VERSION": "version",
    "ARGS": "args",
    "INSTALL_DIR": "install_dir",
}

# Keys read by the site-build hook only
_HOOK_FIELDS = {
    "ENABLED": "enabled",
    "DEBOUNCE_MS": "debounce_ms",
    "ON_ERROR": "on_error",
}


def _check_keys(django_settings: dict[str, Any]) -> None:
    unknown = sorted(set(django_settings) - set(_CORE_FIELDS) - set(_HOOK_FIELDS))
    if unknown:
        raise PagefindConfigError(
            f"Unknown PAGEFIND settings: {', '.join(unknown)}"
        )


def get_pagefind_settings(django_settings: dict[str, Any]) -> dict[str, Any]:
    """Convert the Django PAGEFIND settings dict to core configuration overrides.

    Maps UPPER_CASE Django keys to snake_case setting names. Missing keys are
    left out so defaults apply; values are validated by the core loader.

    Args:
        django_settings: Django settings dict with UPPER_CASE keys

    Returns:
        Dict of snake_case overrides for ConfigLoader.

    Raises:
        PagefindConfigError: If the dict contains unknown keys
    """
    _check_keys(django_settings)
    return {
        field: django_settings[key]
        for key, field in _CORE_FIELDS.items()
        if key in django_settings
    }


def get_hook_settings(django_settings: dict[str, Any]) -> dict[str, Any]:
    """Extract site-build hook options from the Django PAGEFIND settings dict."""
    _check_keys(django_settings)
    return {
        field: django_settings[key]
        for key, field in _HOOK_FIELDS.items()
        if key in django_settings
    }


def read_django_pagefind_settings() -> dict[str, Any]:
    """Return ``settings.PAGEFIND`` from the active Django settings, or {}."""
    from django.conf import settings as django_settings

    return dict(getattr(django_settings, "PAGEFIND", None) or {})


class DjangoSettingsConfigProvider:
    """ConfigProviderPort implementation backed by ``settings.PAGEFIND``.

    Read on every call so ``override_settings`` in tests takes effect.
    """

    def get_config(self) -> dict[str, Any]:
        return get_pagefind_settings(read_django_pagefind_settings())
