"""Configuration value objects for running pagefind."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from pagefindex.domain.exceptions import PagefindConfigError
from pagefindex.domain.version import LATEST, is_exact_version


class RunWith(Enum):
    """How pagefind is invoked.

    AUTO picks a package runner from lockfiles, falling back to GLOBAL.
    BUN, PNPM and NPM run pagefind through ``bunx``, ``pnpx`` and ``npx``.
    GLOBAL uses ``pagefind`` from ``PATH``; LOCAL downloads a managed binary.
    """

    AUTO = "auto"
    BUN = "bun"
    PNPM = "pnpm"
    NPM = "npm"
    GLOBAL = "global"
    LOCAL = "local"

    @classmethod
    def names(cls) -> list[str]:
        """Return the accepted string values in declaration order."""
        return [member.value for member in cls]


@dataclass(frozen=True)
class CustomCommand:
    """A user-supplied command line used to run pagefind.

    For example ``CustomCommand(("mise", "run", "pagefind"))`` if a mise task
    wraps pagefind.

    Attributes:
        argv: Executable followed by its leading arguments. Never empty.
    """

    argv: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate the command line."""
        if not self.argv or not all(isinstance(arg, str) for arg in self.argv):
            raise PagefindConfigError(
                f"invalid :run_with value {list(self.argv)!r}, expected a non-empty "
                "command list like ['command', 'arg', ...]"
            )

    @property
    def command(self) -> str:
        return self.argv[0]

    @property
    def args(self) -> tuple[str, ...]:
        return self.argv[1:]


RunWithValue = Union[RunWith, CustomCommand]


@dataclass(frozen=True)
class PagefindSettings:
    """Validated pagefindex configuration.

    Immutable value object. Invalid values are rejected at construction,
    never at execution time.

    Attributes:
        site: Directory to index. Only required when pagefind is run.
        run_with: Invocation mode or custom command.
        version: ``"latest"`` or an exact version such as ``"1.4.0"``.
        args: Additional arguments passed to pagefind. ``--site``/``-s``
            pairs are removed before use.
        install_dir: Base directory for the locally managed binary, or None
            for the per-user cache directory.
    """

    site: str | None = None
    run_with: RunWithValue = RunWith.AUTO
    version: str = LATEST
    args: tuple[str, ...] = field(default_factory=tuple)
    install_dir: str | None = None

    def __post_init__(self) -> None:
        """Validate settings in a fixed order, stopping at the first failure."""
        self._validate_run_with()
        self._validate_version()
        self._validate_args()

    def _validate_run_with(self) -> None:
        if not isinstance(self.run_with, (RunWith, CustomCommand)):
            raise PagefindConfigError(invalid_run_with_message(self.run_with))

    def _validate_version(self) -> None:
        if self.version == LATEST:
            return
        if isinstance(self.version, str):
            if not is_exact_version(self.version):
                raise PagefindConfigError(
                    f"invalid :version value {self.version!r}, expected exact version "
                    "like '1.4.0' or '1.4.0-alpha.1'"
                )
            return
        raise PagefindConfigError(
            f"invalid :version value {self.version!r}, expected 'latest' or exact version string"
        )

    def _validate_args(self) -> None:
        if not isinstance(self.args, tuple) or not all(
            isinstance(arg, str) for arg in self.args
        ):
            raise PagefindConfigError(
                f"invalid :args value {self.args!r}, expected list of strings"
            )

    @property
    def is_latest(self) -> bool:
        """True when no exact pagefind version is configured."""
        return self.version == LATEST


def invalid_run_with_message(value: object) -> str:
    """Build the error message for an unsupported run_with value."""
    return (
        f"invalid :run_with value {value!r}, expected one of {RunWith.names()!r} "
        "or a command list like ['command', 'arg', ...]"
    )
