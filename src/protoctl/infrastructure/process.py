"""Process runner — the narrow seam between orchestrators and external tools.

Orchestrators only ever need "run this command with these arguments and
tell me the exit status". Output is never captured: the child inherits
the caller's streams unless a runner is built with explicit ones.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import IO, Any, Protocol

from protoctl.errors import ToolStartError


class ProcessRunner(Protocol):
    """Anything that can run a command synchronously and return its status."""

    def run(self, command: str, args: Sequence[str]) -> int: ...


class SubprocessRunner:
    """Run external tools via :func:`subprocess.run`, blocking, no timeout.

    ``KeyboardInterrupt`` raised while waiting is propagated after the
    subprocess module has torn the child down.
    """

    def __init__(
        self,
        *,
        stdout: IO[Any] | None = None,
        stderr: IO[Any] | None = None,
        cwd: Path | None = None,
    ) -> None:
        self._stdout = stdout
        self._stderr = stderr
        self._cwd = cwd

    def run(self, command: str, args: Sequence[str]) -> int:
        try:
            completed = subprocess.run(
                [command, *args],
                cwd=self._cwd,
                stdout=self._stdout,
                stderr=self._stderr,
                check=False,
            )
        except OSError as exc:
            raise ToolStartError(command, args, exc.strerror or str(exc)) from exc
        return completed.returncode
