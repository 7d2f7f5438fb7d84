"""BuildCheckService — compile the schema tree for every target language.

Generated code is thrown away: each language gets its own directory in
a temporary workspace that is removed when the run ends, whatever the
outcome. Languages are compiled in order and the first failure stops
the run.
"""

from __future__ import annotations

from pathlib import Path

from protoctl.errors import ProtoctlError
from protoctl.infrastructure.workspace import build_workspace
from protoctl.services.base import BaseService
from protoctl.services.result import ServiceResult


class BuildCheckService(BaseService):
    """Verify schemas build cleanly with protoc for each target language."""

    def protoc_args(self, lang: str, out_dir: Path, files: list[str]) -> list[str]:
        return [
            "--fatal_warnings",
            f"--{lang}_out",
            str(out_dir),
            "-I",
            str(self._settings.project_root),
            *files,
        ]

    def test(self) -> ServiceResult:
        op = "test"
        build = self._settings.build
        compiled: list[str] = []
        warnings: list[str] = []
        try:
            files = [str(p) for p in self._discover(warnings)]
            with build_workspace(build.temp_prefix) as workspace:
                self._log.debug("Created build workspace", path=str(workspace.root))
                for lang in build.languages:
                    out_dir = workspace.language_dir(lang)
                    args = self.protoc_args(lang, out_dir, files)
                    self._run_tool(self._settings.tools.protoc, args)
                    compiled.append(lang)
        except ProtoctlError as exc:
            return ServiceResult.failure(op, exc, warnings=warnings, languages=compiled)
        data = {"files": len(files), "languages": compiled}
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
