"""BaseService — shared foundation for the orchestration services.

Every service receives the resolved settings, a process runner and a
logger at construction time. Nothing is looked up from ambient state,
so tests can hand in a fake runner and a capturing logger.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from protoctl.errors import ToolFailedError
from protoctl.infrastructure.discovery import SchemaDiscoverer

if TYPE_CHECKING:
    from pathlib import Path

    from protoctl.config.settings import ProtoSettings
    from protoctl.infrastructure.process import ProcessRunner


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class LintService(BaseService):
            def lint(self) -> ServiceResult:
                warnings: list[str] = []
                files = self._discover(warnings)
                self._run_tool(self._settings.tools.buf, ["lint"])
                ...
    """

    def __init__(self, settings: ProtoSettings, runner: ProcessRunner, logger: Any) -> None:
        self._settings = settings
        self._runner = runner
        self._log = logger

    def _discover(self, warnings: list[str]) -> list[Path]:
        """Collect the schema file set for this run.

        An empty set is not an error, but it is reported in *warnings*.
        """
        schemas = self._settings.schemas
        discoverer = SchemaDiscoverer(self._settings.project_root, schemas.dir, schemas.suffix)
        files = discoverer.discover()
        self._log.debug("Discovered schema files", dir=str(discoverer.search_dir), count=len(files))
        if not files:
            message = f"No {schemas.suffix} files found under {discoverer.search_dir}"
            self._log.warning(message)
            warnings.append(message)
        return files

    def _run_tool(self, command: str, args: Sequence[str]) -> None:
        """Run *command* and raise :class:`ToolFailedError` on non-zero exit."""
        self._log.info("Running tool", tool=command, args=list(args))
        returncode = self._runner.run(command, args)
        if returncode != 0:
            raise ToolFailedError(command, args, returncode)
