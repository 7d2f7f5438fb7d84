"""Command: test-build schema files for every target language."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from protoctl.commands._options import logging_options

if TYPE_CHECKING:
    from protoctl.commands._context import AppContext


@click.command("test")
@logging_options
@click.pass_obj
def verify(app: AppContext, verbose: bool, quiet: bool, log_json: bool) -> None:
    """Test build proto files with protoc in a throwaway directory."""
    from protoctl.services.build import BuildCheckService

    log = app.logger(verbose=verbose, quiet=quiet, log_json=log_json)
    app.emit(BuildCheckService(app.settings, app.runner, log).test())
