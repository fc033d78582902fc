"""Django app configuration for pagefindex."""

import logging
from typing import Callable

from django.apps import AppConfig

from pagefindex.domain.exceptions import PagefindConfigError
from pagefindex_django.hooks import PagefindSiteHook
from pagefindex_django.settings import read_django_pagefind_settings
from pagefindex_django.signals import site_built

logger = logging.getLogger(__name__)

SITE_BUILT_DISPATCH_UID = "pagefindex_django.site_built"


def _default_site_hook_factory() -> PagefindSiteHook:
    """Default factory for creating PagefindSiteHook instances."""
    return PagefindSiteHook.from_django_settings()


class PagefindDjangoConfig(AppConfig):
    """Django app configuration for the pagefindex adapter."""

    name = "pagefindex_django"
    verbose_name = "Pagefind search indexing"

    # Dependency injection factory (can be overridden for testing)
    site_hook_factory: Callable[[], PagefindSiteHook] = _default_site_hook_factory

    hook: PagefindSiteHook | None = None

    def ready(self) -> None:
        """Connect the site-build hook when ``PAGEFIND["ENABLED"]`` is true."""
        pagefind_config = read_django_pagefind_settings()
        if not pagefind_config.get("ENABLED", False):
            logger.debug("Pagefind site-build hook is disabled in settings.")
            return

        try:
            self.hook = type(self).site_hook_factory()
        except PagefindConfigError as e:
            logger.error(f"Invalid PAGEFIND settings, site-build hook not connected: {e}")
            return

        site_built.connect(
            self.hook.on_site_built,
            dispatch_uid=SITE_BUILT_DISPATCH_UID,
        )
        logger.info("Pagefind site-build hook connected.")
