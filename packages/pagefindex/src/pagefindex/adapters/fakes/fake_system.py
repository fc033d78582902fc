"""Fake system gateway for testing.

Provides an in-memory test double for SystemPort: no processes are spawned
and nothing touches the real filesystem.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pagefindex.domain.results import CommandOutput


class FakeSystem:
    """Fake implementation of SystemPort for testing.

    Executables, existing files and command responses are configured up
    front; every call is recorded for assertion.

    Responses are matched on the exact (command, args) pair first, then on
    the command alone, then fall back to the default response.

    Example:
        >>> fake = FakeSystem()
        >>> fake.add_executable("pagefind", "/usr/bin/pagefind")
        >>> fake.set_response("/usr/bin/pagefind", "pagefind 1.4.0", args=["--version"])
        >>> fake.run("/usr/bin/pagefind", ["--version"]).output
        'pagefind 1.4.0'
    """

    def __init__(self) -> None:
        self._executables: dict[str, str] = {}
        self._files: set[str] = set()
        self._exact: dict[tuple[str, tuple[str, ...]], CommandOutput] = {}
        self._by_command: dict[str, CommandOutput] = {}
        self._default = CommandOutput(output="", exit_code=0)
        self._calls: list[tuple[str, tuple[str, ...]]] = []
        self.written: dict[Path, bytes] = {}
        self.directories: list[Path] = []

    @property
    def calls(self) -> list[tuple[str, tuple[str, ...]]]:
        """Return recorded (command, args) tuples from run() calls."""
        return list(self._calls)

    def add_executable(self, name: str, path: str | None = None) -> None:
        """Make name resolvable on the fake PATH."""
        self._executables[name] = path or f"/usr/local/bin/{name}"

    def add_file(self, path: str | Path) -> None:
        """Mark path as an existing file."""
        self._files.add(str(path))

    def set_response(
        self,
        command: str,
        output: str,
        exit_code: int = 0,
        args: Sequence[str] | None = None,
    ) -> None:
        """Configure the output of a command.

        Args:
            command: Command to match.
            output: Captured text to return.
            exit_code: Exit status to return.
            args: Exact arguments to match, or None to match any arguments.
        """
        response = CommandOutput(output=output, exit_code=exit_code)
        if args is None:
            self._by_command[command] = response
        else:
            self._exact[(command, tuple(args))] = response

    def set_default_response(self, output: str, exit_code: int = 0) -> None:
        self._default = CommandOutput(output=output, exit_code=exit_code)

    def run(self, command: str, args: Sequence[str]) -> CommandOutput:
        key = (command, tuple(args))
        self._calls.append(key)
        if key in self._exact:
            return self._exact[key]
        return self._by_command.get(command, self._default)

    def find_executable(self, name: str) -> str | None:
        return self._executables.get(name)

    def file_exists(self, path: str | Path) -> bool:
        return str(path) in self._files

    def make_dirs(self, path: Path) -> None:
        self.directories.append(path)

    def write_executable(self, path: Path, data: bytes) -> None:
        self.written[path] = data
        self._files.add(str(path))
