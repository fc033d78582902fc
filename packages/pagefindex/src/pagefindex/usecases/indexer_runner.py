"""Indexer runner use case: run pagefind once and capture the outcome."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pagefindex.adapters.ports import SystemPort
from pagefindex.domain.results import IndexerFailure, IndexerResult

logger = logging.getLogger(__name__)


class IndexerRunner:
    """Runs a resolved pagefind command exactly once.

    Exit status 0 is a success carrying the captured output; anything else
    is a failure carrying the full invocation context. There is no retry
    and no timeout at this layer.
    """

    def __init__(self, system: SystemPort) -> None:
        self._system = system

    def run(self, command: str, args: Sequence[str]) -> IndexerResult:
        logger.debug(f"Running {command} {' '.join(args)}")
        result = self._system.run(command, args)

        if result.exit_code == 0:
            return IndexerResult.create_success(result.output)

        return IndexerResult.create_failure(
            IndexerFailure(
                command=command,
                args=tuple(args),
                output=result.output,
                exit_code=result.exit_code,
            )
        )
