"""Subcommand modules for protoctl.

Provides register_commands() which uses deferred imports to keep
``protoctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the three standalone commands on the root CLI group."""
    from protoctl.commands.install_deps import install_deps
    from protoctl.commands.lint import lint
    from protoctl.commands.verify import verify

    cli.add_command(lint)
    cli.add_command(verify)
    cli.add_command(install_deps)
