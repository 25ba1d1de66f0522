"""search CLI entry point."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import Annotated, Optional

import click
import typer
from typer.completion import completion_init
from typer.core import TyperGroup

from searchcli import commands
from searchcli.commands import Shell
from searchcli.errors import SearchError, UsageError
from searchcli.providers.schema import Config

EXTERNAL_COMMAND = "__external__"

EXAMPLES = """\
Examples:

    search google <word>    search word

    search google -         search word from stdin

    search g <word>         alias

    search config -p        print config file path

    search list             list providers
"""


class SearchGroup(TyperGroup):
    """Routes unknown subcommands to the ``[PROVIDER] WORD`` shorthand."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[Optional[str], Optional[click.Command], list[str]]:
        if args and self.get_command(ctx, args[0]) is None:
            return EXTERNAL_COMMAND, self.get_command(ctx, EXTERNAL_COMMAND), args
        return super().resolve_command(ctx, args)


app = typer.Typer(
    name=commands.PROG_NAME,
    cls=SearchGroup,
    help="Open a web search for a word with a configurable search provider.",
    epilog=EXAMPLES,
    no_args_is_help=True,
    add_completion=False,
)

# Script generation and the runtime _SEARCH_COMPLETE handler share typer's shell classes
completion_init()


def _version() -> str:
    try:
        return version("search-cli")
    except PackageNotFoundError:
        return "unknown"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{commands.PROG_NAME} {_version()}")
        raise typer.Exit()


def _load_config() -> Config:
    from searchcli.providers.store import ConfigStore

    return ConfigStore().load_or_create()


def _fail(exc: SearchError) -> typer.Exit:
    from searchcli.reporting.console import print_error, print_usage

    if isinstance(exc, UsageError):
        print_usage(str(exc))
    else:
        print_error(str(exc))
    return typer.Exit(exc.exit_code)


@app.callback()
def main(
    debug: Annotated[
        bool, typer.Option("--debug", help="Log debug output to stderr")
    ] = False,
    show_version: Annotated[
        Optional[bool],
        typer.Option(
            "--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit"
        ),
    ] = None,
) -> None:
    from searchcli.config import log_config
    from searchcli.reporting.log import setup_logging

    setup_logging("DEBUG" if debug else log_config.level)


@app.command(no_args_is_help=True)
def config(
    path: Annotated[bool, typer.Option("--path", "-p", help="Print config file path")] = False,
) -> None:
    """Configuration."""
    try:
        commands.config(_load_config(), path=path)
    except SearchError as e:
        raise _fail(e) from e


@app.command("list")
def list_(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show aliases")] = False,
) -> None:
    """List search providers."""
    try:
        commands.list_providers(_load_config(), verbose=verbose)
    except SearchError as e:
        raise _fail(e) from e


@app.command("open", no_args_is_help=True)
def open_(
    word: Annotated[str, typer.Argument(help="Search words, or '-' to read them from stdin")],
    provider: Annotated[
        Optional[str], typer.Option("--provider", "-p", help="Search provider name or alias")
    ] = None,
) -> None:
    """Search words."""
    try:
        commands.open_search(_load_config(), provider, word)
    except SearchError as e:
        raise _fail(e) from e


@app.command(
    no_args_is_help=True,
    epilog="Examples:\n\n    search completion bash\n\n    search completion zsh\n\n    search completion fish",
)
def completion(
    shell: Annotated[Shell, typer.Argument(help="Shell to generate the script for")],
) -> None:
    """Generate completion scripts."""
    try:
        commands.completion(typer.main.get_command(app), shell)
    except SearchError as e:
        raise _fail(e) from e


@app.command()
def jsonschema() -> None:
    """Show config.yaml schema."""
    commands.jsonschema()


@app.command(
    EXTERNAL_COMMAND,
    hidden=True,
    context_settings={"ignore_unknown_options": True},
)
def external(
    tokens: Annotated[Optional[list[str]], typer.Argument()] = None,
) -> None:
    try:
        commands.external(_load_config(), tokens or [])
    except SearchError as e:
        raise _fail(e) from e


if __name__ == "__main__":
    app()
