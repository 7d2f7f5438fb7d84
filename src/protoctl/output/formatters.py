"""Human-readable rendering of ServiceResult.

One summary line per run, plus any warnings. Tool reports are never
reformatted; they have already gone straight to the terminal.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

if TYPE_CHECKING:
    from protoctl.services.result import ServiceResult

STATUS_THEME = Theme(
    {
        "status.ok": "bold green",
        "status.error": "bold red",
        "status.warning": "bold yellow",
        "status.op": "bold cyan",
        "status.key": "dim",
    }
)


def _format_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value) or "-"
    return str(value)


def format_result(result: ServiceResult, *, no_color: bool = False) -> str:
    """Format a ServiceResult as a status line followed by warning lines."""
    buffer = StringIO()
    console = Console(
        file=buffer, theme=STATUS_THEME, no_color=no_color, highlight=False, soft_wrap=True
    )
    op = escape(result.op)
    if result.ok:
        pairs = "  ".join(
            f"[status.key]{escape(key)}[/]={escape(_format_value(value))}"
            for key, value in result.data.items()
        )
        console.print(f"[status.ok]OK[/]: [status.op]{op}[/]  {pairs}".rstrip())
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(f"[status.error]ERROR[/]: [status.op]{op}[/] - {escape(message)}")
    for warning in result.warnings:
        console.print(f"[status.warning]WARNING[/]: {escape(warning)}")
    return buffer.getvalue().rstrip("\n")
