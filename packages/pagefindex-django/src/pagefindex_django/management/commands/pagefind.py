"""Django management command to index the built site with pagefind."""

from __future__ import annotations

import dataclasses
import sys
from typing import Any, Callable

from django.core.management.base import BaseCommand, CommandError, CommandParser

import pagefindex
from pagefindex.api import Pagefindex
from pagefindex.domain.exceptions import PagefindConfigError, PagefindError
from pagefindex.domain.settings import PagefindSettings, RunWith
from pagefindex.usecases.output_formatter import (
    format_error_message,
    format_success_message,
)
from pagefindex_django.settings import DjangoSettingsConfigProvider

DEFAULT_SITE = "_site"

# Short options that belong to pagefind (-v is --verbose there), not Django
PAGEFIND_OWNED_OPTIONS = frozenset({"-v"})


def _default_app_factory() -> Pagefindex:
    """Default factory for creating the Pagefindex façade."""
    return Pagefindex(config_provider=DjangoSettingsConfigProvider())


def _parse_passthrough(parser: CommandParser, args: Any = None, namespace: Any = None) -> Any:
    """Parse known options and collect everything else for pagefind.

    Unrecognised tokens keep their order. Everything after the first bare
    ``--`` is passed through, even if it looks like one of our options.
    ``-v``, ``-h`` and ``--help`` are pagefind's, so they pass through too.
    """
    tokens = list(args) if args is not None else sys.argv[1:]
    if "--" in tokens:
        split = tokens.index("--")
        head, tail = tokens[:split], tokens[split + 1 :]
    else:
        head, tail = tokens, []
    owned = [token for token in head if token in PAGEFIND_OWNED_OPTIONS]
    head = [token for token in head if token not in PAGEFIND_OWNED_OPTIONS]
    if owned or tail:
        head = [*head, "--", *owned, *tail]

    namespace, extras = parser.parse_known_args(head, namespace)
    if "--" in extras:
        extras.remove("--")
    namespace.pagefind_args = extras
    return namespace


class Command(BaseCommand):
    """Run pagefind over the built site.

    Any option not listed below (``--verbose``, ``--force-language en``, ...)
    and everything after ``--`` is passed through to pagefind, including
    ``-h``/``--help`` and ``-v``. ``manage.py help pagefind`` shows this help.
    """

    help = (
        "Index the built site for search with pagefind (exit 0 on success, 1 on failure). "
        "Unknown options, -h/--help, -v and everything after -- are passed to pagefind."
    )

    requires_system_checks: list[str] = []
    stealth_options = ("pagefind_args",)

    # Dependency injection factory (can be overridden for testing)
    app_factory: Callable[[], Pagefindex] = _default_app_factory

    def create_parser(self, prog_name: str, subcommand: str, **kwargs: Any) -> CommandParser:
        """Create a parser that replaces Django's --version and passes unknown options on."""
        kwargs.setdefault("conflict_handler", "resolve")
        kwargs.setdefault("allow_abbrev", False)
        kwargs.setdefault("add_help", False)
        parser = super().create_parser(prog_name, subcommand, **kwargs)
        parser.parse_args = lambda args=None, namespace=None: _parse_passthrough(
            parser, args, namespace
        )
        return parser

    def add_arguments(self, parser: Any) -> None:
        """Add command-line arguments."""
        parser.add_argument(
            "--site",
            dest="site",
            help=f"Directory to index (default: PAGEFIND['SITE'] or {DEFAULT_SITE!r})",
        )
        parser.add_argument(
            "--run-with",
            dest="run_with",
            metavar="MODE",
            help=f"Override run_with: {', '.join(RunWith.names())}",
        )
        parser.add_argument(
            "--use-version",
            dest="use_version",
            metavar="VERSION",
            help="Override the required pagefind version",
        )
        parser.add_argument(
            "--version",
            action="store_true",
            dest="show_version",
            default=False,
            help="Show pagefindex and pagefind versions and exit",
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the command.

        Raises:
            CommandError: With exit code 1 on invalid options or configuration,
                when pagefind cannot be resolved, or when pagefind fails.
        """
        if options.get("show_version"):
            self.stdout.write(f"Pagefindex version: {pagefindex.__version__}")

        app = type(self).app_factory()
        settings = self._load_settings(app, options)

        if options.get("show_version"):
            self._show_version_info(app, settings)
            return

        site = options.get("site") or settings.site or DEFAULT_SITE
        passthrough = tuple(options.get("pagefind_args") or ())
        try:
            settings = dataclasses.replace(
                settings, site=site, args=(*settings.args, *passthrough)
            )
        except PagefindConfigError as e:
            raise CommandError(f"Configuration error: {e}", returncode=1) from e

        try:
            result = app.run_indexer(settings)
        except PagefindError as e:
            raise CommandError(str(e), returncode=1) from e

        if not result.success:
            assert result.failure is not None
            raise CommandError(format_error_message(result.failure), returncode=1)

        self.stdout.write(result.output or "")
        self.stdout.write(
            self.style.SUCCESS(f"[Pagefindex] {format_success_message(result.output)}")
        )

    def _load_settings(self, app: Pagefindex, options: dict[str, Any]) -> PagefindSettings:
        """Merge configured settings with --run-with and --use-version."""
        overrides: dict[str, Any] = {}

        run_with = options.get("run_with")
        if run_with is not None:
            if run_with not in RunWith.names():
                raise CommandError(
                    f"Invalid run_with: {run_with}. "
                    f"Valid options: {', '.join(RunWith.names())}",
                    returncode=1,
                )
            overrides["run_with"] = run_with

        if options.get("use_version") is not None:
            overrides["version"] = options["use_version"]

        try:
            return app.config(overrides)
        except PagefindConfigError as e:
            raise CommandError(f"Configuration error: {e}", returncode=1) from e

    def _show_version_info(self, app: Pagefindex, settings: PagefindSettings) -> None:
        try:
            actual = app.pagefind_version(settings)
        except PagefindError as e:
            actual = None
            self.stdout.write(f"Pagefind: {e}")
        else:
            self.stdout.write(f"Pagefind version: {actual}")

        if not settings.is_latest and settings.version != actual:
            self.stdout.write(f"Configured version: {settings.version}")
