"""Use cases: Application logic layer."""

from pagefindex.usecases.command_resolver import (
    CommandResolver,
    parse_version_output,
    sanitize_args,
)
from pagefindex.usecases.config_loader import ConfigLoader, coerce_run_with
from pagefindex.usecases.indexer_runner import IndexerRunner
from pagefindex.usecases.installer import LocalInstaller
from pagefindex.usecases.output_formatter import (
    format_error_message,
    format_success_message,
)

__all__ = [
    "CommandResolver",
    "ConfigLoader",
    "IndexerRunner",
    "LocalInstaller",
    "coerce_run_with",
    "format_error_message",
    "format_success_message",
    "parse_version_output",
    "sanitize_args",
]
