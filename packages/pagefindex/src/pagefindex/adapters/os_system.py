"""Operating system adapter for the SystemPort.

Runs processes with subprocess, looks up executables with shutil.which and
writes files with pathlib.
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from pagefindex.adapters.ports import SystemPort
from pagefindex.domain.results import CommandOutput


class OsSystem:
    """Adapter that talks to the real operating system.

    Implements SystemPort. Process invocations block until the child exits;
    no timeout is applied.
    """

    def run(self, command: str, args: Sequence[str]) -> CommandOutput:
        """Run command with args, merging stderr into stdout.

        Args:
            command: Executable name or path.
            args: Arguments passed to the executable.

        Returns:
            CommandOutput with decoded output and exit status. A missing
            executable is reported as exit status 127, any other launch
            failure as 126, rather than raised.
        """
        try:
            completed = subprocess.run(
                [command, *args],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
            )
        except FileNotFoundError as e:
            return CommandOutput(output=str(e), exit_code=127)
        except OSError as e:
            # Not executable, or not a binary this machine can run
            return CommandOutput(output=str(e), exit_code=126)

        output = completed.stdout.decode("utf-8", errors="replace")
        return CommandOutput(output=output, exit_code=completed.returncode)

    def find_executable(self, name: str) -> str | None:
        return shutil.which(name)

    def file_exists(self, path: str | Path) -> bool:
        return Path(path).exists()

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def write_executable(self, path: Path, data: bytes) -> None:
        """Replace path with data and set mode 0o755.

        Args:
            path: Destination file. The parent directory must exist.
            data: File contents.
        """
        if path.exists():
            path.unlink()
        path.write_bytes(data)
        path.chmod(0o755)


# Runtime protocol check
assert isinstance(OsSystem(), SystemPort)
