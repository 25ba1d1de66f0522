"""Terminal output helpers built on ``rich``.

Plain command output (provider names, paths, scripts) goes through
``typer.echo`` so it stays byte-exact for shell pipelines; these helpers
are for human-facing messages on stderr.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

_err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def print_error(message: str) -> None:
    _err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_usage(message: str) -> None:
    _err_console.print(escape(message))
