"""Options shared by every protoctl subcommand."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])

_LOGGING_OPTIONS = (
    click.option("-v", "--verbose", is_flag=True, help="Debug-level logging."),
    click.option("-q", "--quiet", is_flag=True, help="Warnings and errors only."),
    click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr."),
)


def logging_options(func: F) -> F:
    """Add ``-v/--verbose``, ``-q/--quiet`` and ``--log-json`` to a command.

    The command receives them as ``verbose``, ``quiet`` and ``log_json``
    and hands them to :meth:`AppContext.logger`.
    """
    for option in reversed(_LOGGING_OPTIONS):
        func = option(func)
    return func
