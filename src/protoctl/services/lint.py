"""LintService — run the two external linters over the schema tree.

The linters run in sequence and the first failure ends the run. Their
reports are whatever they print to the inherited streams; nothing is
merged or parsed here.
"""

from __future__ import annotations

from protoctl.errors import ProtoctlError
from protoctl.services.base import BaseService
from protoctl.services.result import ServiceResult


class LintService(BaseService):
    """Lint schema files with api-linter, then buf."""

    def api_linter_args(self, files: list[str]) -> list[str]:
        return [
            "--set-exit-status",
            "--config",
            self._settings.lint.config,
            "-I",
            ".",
            *files,
        ]

    def lint(self) -> ServiceResult:
        op = "lint"
        tools = self._settings.tools
        warnings: list[str] = []
        try:
            files = [str(p) for p in self._discover(warnings)]
            self._run_tool(tools.api_linter, self.api_linter_args(files))
            self._run_tool(tools.buf, ["lint"])
        except ProtoctlError as exc:
            return ServiceResult.failure(op, exc, warnings=warnings)
        return ServiceResult(ok=True, op=op, data={"files": len(files)}, warnings=warnings)
