"""Result value objects for command resolution and indexer runs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandOutput:
    """Captured output of one process invocation.

    Attributes:
        output: Combined stdout and stderr text.
        exit_code: Process exit status.
    """

    output: str
    exit_code: int


@dataclass(frozen=True)
class ResolvedInvocation:
    """Executable and leading arguments chosen by the command resolver.

    Attributes:
        command: Executable name or path.
        args: Leading arguments placed before ``--site``.
    """

    command: str
    args: tuple[str, ...] = ()


@dataclass(frozen=True)
class IndexerFailure:
    """Context of a failed pagefind run.

    Attributes:
        command: Executable that was run.
        args: Full argument list passed to it.
        output: Combined stdout and stderr text.
        exit_code: Non-zero exit status.
    """

    command: str
    args: tuple[str, ...]
    output: str
    exit_code: int


@dataclass(frozen=True)
class IndexerResult:
    """Outcome of a single pagefind run.

    Attributes:
        success: True if pagefind exited with status 0.
        output: Captured output on success, None otherwise.
        failure: Invocation context on failure, None otherwise.
    """

    success: bool
    output: str | None
    failure: IndexerFailure | None

    @classmethod
    def create_success(cls, output: str) -> IndexerResult:
        return cls(success=True, output=output, failure=None)

    @classmethod
    def create_failure(cls, failure: IndexerFailure) -> IndexerResult:
        return cls(success=False, output=None, failure=failure)
