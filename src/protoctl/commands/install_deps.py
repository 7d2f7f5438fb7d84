"""Command: install pinned tool dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from protoctl.commands._options import logging_options

if TYPE_CHECKING:
    from protoctl.commands._context import AppContext


@click.command("install-deps")
@logging_options
@click.pass_obj
def install_deps(app: AppContext, verbose: bool, quiet: bool, log_json: bool) -> None:
    """Install tool dependencies."""
    from protoctl.services.deps import DependencyService

    log = app.logger(verbose=verbose, quiet=quiet, log_json=log_json)
    app.emit(DependencyService(app.settings, app.runner, log).install_deps())
