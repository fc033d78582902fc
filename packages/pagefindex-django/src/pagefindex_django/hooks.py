"""Site-build hook: index the output directory after each ``site_built`` signal."""

from __future__ import annotations

import dataclasses
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from pagefindex.api import Pagefindex
from pagefindex.domain.exceptions import PagefindConfigError, PagefindError
from pagefindex.domain.settings import PagefindSettings
from pagefindex.usecases.output_formatter import (
    format_error_message,
    format_success_message,
)
from pagefindex_django.exceptions import PagefindIndexError
from pagefindex_django.settings import (
    DjangoSettingsConfigProvider,
    get_hook_settings,
    read_django_pagefind_settings,
)

logger = logging.getLogger(__name__)

ON_ERROR_MODES = ("fail", "ignore", "warn")


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


@dataclass(frozen=True)
class PagefindHookSettings:
    """Options of the site-build hook.

    Attributes:
        enabled: Whether the hook indexes at all.
        debounce_ms: Minimum interval between two indexer runs.
        on_error: What a failed run does: "fail" raises, "warn" logs a warning,
            "ignore" does nothing.
    """

    enabled: bool = False
    debounce_ms: int = 2000
    on_error: str = "warn"

    def __post_init__(self) -> None:
        if not isinstance(self.enabled, bool):
            raise PagefindConfigError(
                f"invalid :enabled value {self.enabled!r}, expected boolean"
            )
        if (
            not isinstance(self.debounce_ms, int)
            or isinstance(self.debounce_ms, bool)
            or self.debounce_ms < 0
        ):
            raise PagefindConfigError(
                f"invalid :debounce_ms value {self.debounce_ms!r}, "
                "expected non-negative integer"
            )
        if self.on_error not in ON_ERROR_MODES:
            raise PagefindConfigError(
                f"invalid :on_error value {self.on_error!r}, "
                f"expected one of {list(ON_ERROR_MODES)!r}"
            )


class DebounceGate:
    """Lets a run through when none happened within ``threshold_ms``."""

    def __init__(self, threshold_ms: int) -> None:
        self.threshold_ms = threshold_ms
        self.last_run: int | None = None

    def should_run(self, now_ms: int) -> bool:
        if self.last_run is None or now_ms - self.last_run >= self.threshold_ms:
            self.last_run = now_ms
            return True
        return False


class PagefindSiteHook:
    """Receiver for ``site_built`` that runs pagefind over the built site.

    Runs are debounced, so a burst of rebuilds from a dev server triggers one
    indexer run. ``out_dir`` from the signal overrides the configured site.
    """

    def __init__(
        self,
        hook_settings: PagefindHookSettings,
        settings: PagefindSettings,
        app: Pagefindex | None = None,
        clock: Callable[[], int] = _monotonic_ms,
    ) -> None:
        self.hook_settings = hook_settings
        self.settings = settings
        self.app = app or Pagefindex()
        self.clock = clock
        self.gate = DebounceGate(hook_settings.debounce_ms)

    @classmethod
    def from_django_settings(cls, app: Pagefindex | None = None) -> PagefindSiteHook:
        """Build the hook from the ``PAGEFIND`` Django settings dict.

        Raises:
            PagefindConfigError: If any hook or core setting is invalid.
        """
        app = app or Pagefindex(config_provider=DjangoSettingsConfigProvider())
        hook_settings = PagefindHookSettings(
            **get_hook_settings(read_django_pagefind_settings())
        )
        return cls(hook_settings, app.config(), app=app)

    def on_site_built(
        self,
        sender: Any,
        out_dir: str | Path | None = None,
        server: bool = False,
        **kwargs: Any,
    ) -> None:
        """Handle a ``site_built`` signal.

        Raises:
            PagefindIndexError: If indexing fails, ``on_error`` is "fail" and
                the sender is not a dev server.
        """
        if not self.hook_settings.enabled:
            return
        if not self.gate.should_run(self.clock()):
            logger.debug(f"Skipping pagefind run for {out_dir}: debounced")
            return

        site = str(out_dir) if out_dir is not None else self.settings.site
        settings = dataclasses.replace(self.settings, site=site)

        try:
            result = self.app.run_indexer(settings)
        except PagefindError as e:
            self._handle_failure(str(e), server)
            return

        if result.success:
            logger.info(f"[Pagefindex] {format_success_message(result.output)}")
        else:
            assert result.failure is not None
            self._handle_failure(format_error_message(result.failure), server)

    def _handle_failure(self, report: str, server: bool) -> None:
        mode = self.hook_settings.on_error
        if mode == "fail":
            if server:
                logger.error(report)
            else:
                raise PagefindIndexError(report)
        elif mode == "warn":
            logger.warning(report)
