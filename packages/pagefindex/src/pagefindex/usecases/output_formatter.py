"""Formatting of pagefind output for logs and terminals."""

from __future__ import annotations

import re

from pagefindex.domain.results import IndexerFailure

# "Indexed 46 pages" with a non-zero count
_INDEXED_LINE = re.compile(r"^\s*Indexed\s+[1-9]\d*\s+\w")
_INDEXED_PREFIX = re.compile(r"\s*Indexed ")


def format_success_message(output: str) -> str:
    """Summarise pagefind's ``Indexed N things`` lines.

    Zero counts are dropped and the rest are joined in a sentence.

    Example:
        >>> format_success_message("Indexed 1 language\\nIndexed 46 pages\\nIndexed 0 sorts")
        '1 language and 46 pages'
    """
    items = [
        _INDEXED_PREFIX.sub("", line)
        for line in output.split("\n")
        if _INDEXED_LINE.match(line)
    ]

    if not items:
        return "No output"
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"


def format_error_message(failure: IndexerFailure) -> str:
    """Format a failed pagefind run for display."""
    command_line = " ".join([failure.command, *failure.args])
    return (
        f"[Pagefindex] Failed with exit code {failure.exit_code}\n"
        f"Command: {command_line}\n"
        "Output:\n"
        "\n"
        f"{failure.output}\n"
    )
