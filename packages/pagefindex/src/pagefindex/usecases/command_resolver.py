"""Command resolver use case: decide how pagefind is invoked."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from pagefindex.adapters.ports import SystemPort
from pagefindex.domain.exceptions import (
    PagefindError,
    PagefindNotFoundError,
    PagefindVersionError,
)
from pagefindex.domain.results import ResolvedInvocation
from pagefindex.domain.settings import CustomCommand, PagefindSettings, RunWith
from pagefindex.domain.version import LATEST, check_compatibility
from pagefindex.usecases.installer import LocalInstaller

logger = logging.getLogger(__name__)

PAGEFIND = "pagefind"

SITE_FLAGS = frozenset({"--site", "-s"})

# Lockfiles checked by AUTO, in priority order
LOCKFILE_RUNNERS: tuple[tuple[str, RunWith], ...] = (
    ("bun.lockb", RunWith.BUN),
    ("bun.lock", RunWith.BUN),
    ("pnpm-lock.yaml", RunWith.PNPM),
    ("package-lock.json", RunWith.NPM),
)

PACKAGE_RUNNERS: dict[RunWith, str] = {
    RunWith.BUN: "bunx",
    RunWith.PNPM: "pnpx",
    RunWith.NPM: "npx",
}

_VERSION_IN_OUTPUT = re.compile(r"(?:pagefind )?(\d+\.\d+\.\d+)")


def sanitize_args(args: Iterable[str]) -> list[str]:
    """Remove ``--site``/``-s`` flags together with their values.

    The configured site is always passed separately, so any site flag in
    user-supplied arguments would conflict with it.

    Example:
        >>> sanitize_args(["--site", "old", "--verbose"])
        ['--verbose']
    """
    result: list[str] = []
    skip_next = False
    for arg in args:
        if skip_next:
            skip_next = False
            continue
        if arg in SITE_FLAGS:
            skip_next = True
            continue
        result.append(arg)
    return result


def parse_version_output(output: str, exit_code: int) -> str:
    """Extract a version number from ``pagefind --version`` output.

    Raises:
        PagefindVersionError: If the command failed or printed no version.
    """
    if exit_code != 0:
        raise PagefindVersionError(f"failed to get version: {output}")

    trimmed = output.strip()
    match = _VERSION_IN_OUTPUT.search(trimmed)
    if match is None:
        raise PagefindVersionError(f"could not parse version from: {trimmed!r}")
    return match.group(1)


class CommandResolver:
    """Use case for choosing the pagefind executable and leading arguments.

    Decision table for ``settings.run_with``:
    1. AUTO: bun, pnpm or npm lockfile in the working directory selects that
       package runner; otherwise a global pagefind; otherwise an error.
       AUTO never downloads a local binary.
    2. BUN/PNPM/NPM: ``bunx``/``pnpx``/``npx pagefind[@version]``.
    3. GLOBAL: ``pagefind`` from PATH, version-checked when requested.
    4. LOCAL: managed binary, installed on first use.
    5. CustomCommand: used verbatim.
    """

    def __init__(self, system: SystemPort, installer: LocalInstaller) -> None:
        """Initialize the resolver.

        Args:
            system: Process and filesystem gateway.
            installer: Installer used by LOCAL mode.
        """
        self._system = system
        self._installer = installer

    def resolve(
        self, settings: PagefindSettings, validate: bool = True
    ) -> ResolvedInvocation:
        """Resolve the invocation for the configured run_with mode.

        Args:
            settings: Validated settings.
            validate: Check a global pagefind against the configured version.

        Returns:
            ResolvedInvocation with the command and leading arguments.

        Raises:
            PagefindError: If no usable pagefind can be resolved.
        """
        run_with = settings.run_with

        if isinstance(run_with, CustomCommand):
            return ResolvedInvocation(run_with.command, run_with.args)
        if run_with is RunWith.AUTO:
            return self._resolve_auto(settings, validate)
        if run_with in PACKAGE_RUNNERS:
            return self._package_runner(run_with, settings.version)
        if run_with is RunWith.GLOBAL:
            return self._resolve_global(settings, validate)
        if run_with is RunWith.LOCAL:
            return self._resolve_local(settings)

        raise AssertionError(f"unhandled run_with: {run_with!r}")

    def query_version(self, command: str, args: Sequence[str] = ()) -> str:
        """Run ``command *args --version`` and return the reported version.

        Raises:
            PagefindVersionError: If the command fails or its output has no version.
        """
        result = self._system.run(command, [*args, "--version"])
        return parse_version_output(result.output, result.exit_code)

    def _resolve_auto(
        self, settings: PagefindSettings, validate: bool
    ) -> ResolvedInvocation:
        for lockfile, run_with in LOCKFILE_RUNNERS:
            if self._system.file_exists(lockfile):
                logger.debug(f"Found {lockfile}, running pagefind with {run_with.value}")
                return self._package_runner(run_with, settings.version)

        try:
            return self._resolve_global(settings, validate)
        except PagefindError as e:
            logger.debug(f"Global pagefind unavailable: {e}")
            raise PagefindNotFoundError("No pagefind installation found") from e

    def _package_runner(self, run_with: RunWith, version: str) -> ResolvedInvocation:
        package = PAGEFIND if version == LATEST else f"{PAGEFIND}@{version}"
        return ResolvedInvocation(PACKAGE_RUNNERS[run_with], (package,))

    def _resolve_global(
        self, settings: PagefindSettings, validate: bool
    ) -> ResolvedInvocation:
        binary = self._system.find_executable(PAGEFIND)
        if binary is None:
            raise PagefindNotFoundError("pagefind not found in PATH")

        if validate:
            found = self.query_version(binary)
            warning = check_compatibility(found, settings.version)
            if warning is not None:
                logger.warning(warning)

        return ResolvedInvocation(binary)

    def _resolve_local(self, settings: PagefindSettings) -> ResolvedInvocation:
        descriptor = self._installer.ensure(settings.version, base_path=settings.install_dir)
        return ResolvedInvocation(str(descriptor.binary))
