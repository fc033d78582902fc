"""Configuration loader use case: merge defaults, process-wide and call-site settings."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import PurePath
from typing import Any

from pagefindex.adapters.ports import ConfigProviderPort
from pagefindex.domain.exceptions import PagefindConfigError
from pagefindex.domain.settings import (
    CustomCommand,
    PagefindSettings,
    RunWith,
    RunWithValue,
    invalid_run_with_message,
)
from pagefindex.domain.version import LATEST

DEFAULTS: dict[str, Any] = {
    "site": None,
    "run_with": RunWith.AUTO,
    "version": LATEST,
    "args": (),
    "install_dir": None,
}


def coerce_run_with(value: Any) -> RunWithValue:
    """Convert a loosely typed run_with value into a RunWith or CustomCommand.

    Accepts RunWith members, their string values, CustomCommand instances and
    non-empty lists or tuples of strings (a custom command line).

    Raises:
        PagefindConfigError: If value has none of the accepted shapes.
    """
    if isinstance(value, (RunWith, CustomCommand)):
        return value
    if isinstance(value, str):
        try:
            return RunWith(value)
        except ValueError:
            raise PagefindConfigError(invalid_run_with_message(value)) from None
    if isinstance(value, (list, tuple)) and value and isinstance(value[0], str):
        return CustomCommand(tuple(value))
    raise PagefindConfigError(invalid_run_with_message(value))


def _coerce_path(value: Any) -> Any:
    # Path objects (e.g. BASE_DIR / "_site" in Django settings) become strings
    if isinstance(value, PurePath):
        return str(value)
    return value


def _coerce_args(value: Any) -> Any:
    # Lists become tuples; anything else is left for the settings validator
    if isinstance(value, list):
        return tuple(value)
    return value


class ConfigLoader:
    """Use case for building validated PagefindSettings.

    Merge order is built-in defaults, then the process-wide configuration
    supplied by the provider, then call-site overrides. Later sources win
    per key. Validation happens eagerly and stops at the first failure.
    """

    def __init__(self, provider: ConfigProviderPort) -> None:
        """Initialize the loader.

        Args:
            provider: Source of process-wide configuration.
        """
        self._provider = provider

    def base(self) -> dict[str, Any]:
        """Return defaults merged with the process-wide configuration."""
        return {**DEFAULTS, **dict(self._provider.get_config())}

    def load(
        self,
        overrides: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> PagefindSettings:
        """Merge and validate configuration.

        Args:
            overrides: Call-site settings mapping.
            **kwargs: Call-site settings as keyword arguments; these win over
                overrides.

        Returns:
            Validated PagefindSettings.

        Raises:
            PagefindConfigError: If a key is unknown or a value is invalid.
        """
        merged = {**self.base(), **dict(overrides or {}), **kwargs}

        unknown = sorted(set(merged) - set(DEFAULTS))
        if unknown:
            raise PagefindConfigError(
                f"Unknown pagefindex settings: {', '.join(unknown)}"
            )

        return PagefindSettings(
            site=_coerce_path(merged["site"]),
            run_with=coerce_run_with(merged["run_with"]),
            version=merged["version"],
            args=_coerce_args(merged["args"]),
            install_dir=_coerce_path(merged["install_dir"]),
        )
