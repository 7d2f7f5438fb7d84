"""Exception taxonomy for the orchestration pipeline.

Infrastructure modules raise these; services catch :class:`ProtoctlError`
at their boundary and convert the first failure into a failed
:class:`~protoctl.services.result.ServiceResult`.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class ProtoctlError(Exception):
    """Base for every failure the orchestrators know how to report."""

    code = "PROTOCTL_ERROR"

    def detail(self) -> dict[str, object]:
        return {}


class DiscoveryError(ProtoctlError, OSError):
    """The schema directory walk could not complete."""

    code = "DISCOVERY_FAILED"

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot walk {path}: {reason}")
        self.path = path
        self.reason = reason

    def detail(self) -> dict[str, object]:
        return {"path": str(self.path)}


class ToolError(ProtoctlError):
    """Base for external tool invocation failures."""

    def __init__(self, message: str, command: str, args: Sequence[str]) -> None:
        super().__init__(message)
        self.command = command
        self.args_list = list(args)

    def detail(self) -> dict[str, object]:
        return {"tool": self.command, "args": self.args_list}


class ToolStartError(ToolError):
    """The external tool could not be started (missing binary, no permission)."""

    code = "TOOL_NOT_FOUND"

    def __init__(self, command: str, args: Sequence[str], reason: str) -> None:
        super().__init__(f"Failed to start {command}: {reason}", command, args)


class ToolFailedError(ToolError):
    """The external tool ran and exited with a non-zero status."""

    code = "TOOL_FAILED"

    def __init__(self, command: str, args: Sequence[str], returncode: int) -> None:
        super().__init__(f"{command} exited with status {returncode}", command, args)
        self.returncode = returncode

    def detail(self) -> dict[str, object]:
        return {**super().detail(), "returncode": self.returncode}


class WorkspaceError(ProtoctlError, OSError):
    """Temporary build workspace could not be created or removed."""

    code = "WORKSPACE_ERROR"
