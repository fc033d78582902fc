"""Configuration providers for process-wide pagefindex settings."""

from __future__ import annotations

import os
import shlex
from collections.abc import Mapping
from typing import Any


class EnvironmentConfigProvider:
    """Default implementation: read settings from PAGEFINDEX_* environment variables.

    Variables:
        PAGEFINDEX_SITE: Directory to index.
        PAGEFINDEX_RUN_WITH: One of auto, bun, pnpm, npm, global, local.
        PAGEFINDEX_COMMAND: Custom command line, shell-split. Takes
            precedence over PAGEFINDEX_RUN_WITH.
        PAGEFINDEX_VERSION: ``latest`` or an exact version.
        PAGEFINDEX_ARGS: Extra pagefind arguments, shell-split.
        PAGEFINDEX_INSTALL_DIR: Base directory for the local binary.
    """

    _SCALARS = {
        "PAGEFINDEX_SITE": "site",
        "PAGEFINDEX_RUN_WITH": "run_with",
        "PAGEFINDEX_VERSION": "version",
        "PAGEFINDEX_INSTALL_DIR": "install_dir",
    }

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Initialize the provider.

        Args:
            environ: Mapping to read instead of os.environ (testing).
        """
        self._environ = environ

    def get_config(self) -> dict[str, Any]:
        environ = os.environ if self._environ is None else self._environ
        config: dict[str, Any] = {}

        for variable, key in self._SCALARS.items():
            value = environ.get(variable, "").strip()
            if value:
                config[key] = value

        command = environ.get("PAGEFINDEX_COMMAND", "").strip()
        if command:
            config["run_with"] = shlex.split(command)

        args = environ.get("PAGEFINDEX_ARGS", "").strip()
        if args:
            config["args"] = shlex.split(args)

        return config


class StaticConfigProvider:
    """Provider backed by an explicit mapping.

    Example:
        >>> provider = StaticConfigProvider({"run_with": "npm"})
        >>> provider.get_config()
        {'run_with': 'npm'}
    """

    def __init__(self, config: Mapping[str, Any] | None = None) -> None:
        self._config = dict(config or {})

    def set_config(self, config: Mapping[str, Any]) -> None:
        """Replace the mapping returned by get_config()."""
        self._config = dict(config)

    def get_config(self) -> dict[str, Any]:
        return dict(self._config)
