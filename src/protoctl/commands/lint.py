"""Command: lint schema files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from protoctl.commands._options import logging_options

if TYPE_CHECKING:
    from protoctl.commands._context import AppContext


@click.command()
@logging_options
@click.pass_obj
def lint(app: AppContext, verbose: bool, quiet: bool, log_json: bool) -> None:
    """Lint proto files with api-linter, then buf."""
    from protoctl.services.lint import LintService

    log = app.logger(verbose=verbose, quiet=quiet, log_json=log_json)
    app.emit(LintService(app.settings, app.runner, log).lint())
