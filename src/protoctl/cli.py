"""Root CLI group for protoctl with global options and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from protoctl import __version__
from protoctl.commands import register_commands
from protoctl.commands._context import AppContext
from protoctl.config.settings import ProtoSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="protoctl")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--root",
    "project_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: directory of protoctl.toml, else cwd).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, project_root: Path | None) -> None:
    """protoctl — scripts for the protocol-schema API repo."""
    settings = ProtoSettings.from_cli(config_path=config_path, project_root=project_root)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def main() -> None:
    cli()
