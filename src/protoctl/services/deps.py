"""DependencyService — install the pinned tool dependencies."""

from __future__ import annotations

from protoctl.errors import ProtoctlError
from protoctl.services.base import BaseService
from protoctl.services.result import ServiceResult


class DependencyService(BaseService):
    """Install each ``module@version`` in order, stopping at the first failure.

    No retries. Re-running is left to the installer's own idempotency.
    """

    def install_deps(self) -> ServiceResult:
        op = "install_deps"
        installed: list[str] = []
        try:
            for dep in self._settings.deps.packages:
                self._log.info("Installing dependency", dep=dep)
                self._run_tool(self._settings.tools.installer, ["install", dep])
                installed.append(dep)
        except ProtoctlError as exc:
            return ServiceResult.failure(op, exc, installed=installed)
        return ServiceResult(ok=True, op=op, data={"installed": installed})
