"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns the process runner, builds the per-command
logger and turns a ServiceResult into output and an exit code.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

import click

from protoctl.infrastructure.process import SubprocessRunner
from protoctl.output.formatters import format_result

if TYPE_CHECKING:
    from protoctl.config.settings import ProtoSettings
    from protoctl.infrastructure.process import ProcessRunner
    from protoctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The logger is only built once a subcommand runs, so ``--help`` and
    ``--version`` never touch logging configuration.
    """

    def __init__(self, settings: ProtoSettings) -> None:
        self.settings = settings
        self.quiet = False
        self._runner: ProcessRunner | None = None
        self._log: Any = None

    @property
    def runner(self) -> ProcessRunner:
        """The process runner (created lazily on first access).

        Tools run from the project root so relative paths such as the
        lint config and ``-I .`` resolve the same way wherever protoctl
        is invoked from.
        """
        if self._runner is None:
            self._runner = SubprocessRunner(cwd=self.settings.project_root)
        return self._runner

    def logger(self, *, verbose: bool = False, quiet: bool = False, log_json: bool = False) -> Any:
        """Configure logging from the command's flags and return the logger."""
        from protoctl.config.logging import configure_logging

        self.quiet = quiet
        self._log = configure_logging(verbose=verbose, quiet=quiet, log_json=log_json)
        return self._log

    def emit(self, result: ServiceResult) -> None:
        """Report a ServiceResult with correct exit semantics.

        * Success: summary line to stdout (suppressed by ``--quiet``),
          returns normally.
        * Failure: logs the error at critical level, writes the summary to
          stderr and exits with code 1.
        """
        no_color = not sys.stdout.isatty()
        if result.ok:
            if not self.quiet:
                click.echo(format_result(result, no_color=no_color))
            return
        if self._log is not None and result.error is not None:
            self._log.critical(
                result.error.message,
                op=result.op,
                code=result.error.code,
                **result.error.detail,
            )
        click.echo(format_result(result, no_color=True), err=True)
        raise SystemExit(1)
