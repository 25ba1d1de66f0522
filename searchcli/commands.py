"""Command implementations behind the CLI.

Each command receives the loaded Config (when it needs one) and writes its
output with ``typer.echo``. Failures are raised as SearchError subclasses;
turning them into exit codes is the CLI's job.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from enum import Enum
from typing import TextIO

import click
import typer
from loguru import logger

from searchcli.config import config_path
from searchcli.errors import UsageError
from searchcli.providers.resolver import resolve_provider
from searchcli.providers.schema import Config
from searchcli.tools.browser import launch, select_browser
from searchcli.tools.template import render_url

PROG_NAME = "search"
STDIN_WORD = "-"
EXTERNAL_USAGE = f"Usage: {PROG_NAME} [PROVIDER] WORD"


class Shell(str, Enum):
    bash = "bash"
    zsh = "zsh"
    fish = "fish"
    powershell = "powershell"
    pwsh = "pwsh"


def config(cfg: Config, path: bool = False) -> None:
    if path:
        typer.echo(str(config_path()))


def read_word(word: str, stdin: TextIO | None = None) -> str:
    """Return ``word``, or the contents of stdin when ``word`` is ``-``."""
    if word != STDIN_WORD:
        return word
    stream = stdin if stdin is not None else sys.stdin
    return stream.read().rstrip("\r\n")


def open_search(
    cfg: Config, provider: str | None, word: str, stdin: TextIO | None = None
) -> str:
    """Resolve, render and launch one search. Returns the opened URL."""
    target = resolve_provider(cfg, provider)
    query = read_word(word, stdin)
    url = render_url(target.url, query)
    browser = select_browser(target.browser, cfg.default)
    logger.debug("Provider '{}' rendered {!r} -> {}", target.name, query, url)
    launch(url, browser)
    return url


def list_providers(cfg: Config, verbose: bool = False) -> None:
    for provider in cfg.providers:
        if verbose:
            aliases = ", ".join(provider.alias_list())
            typer.echo(f"{provider.name:20} alias: [{aliases}]")
        else:
            typer.echo(provider.name)


def completion(command: click.Command, shell: Shell) -> None:
    """Print the completion script for ``shell``."""
    from click.shell_completion import get_completion_class

    comp_cls = get_completion_class(shell.value)
    if comp_cls is None:
        raise UsageError(f"Unsupported shell: {shell.value}")
    complete_var = f"_{PROG_NAME.replace('-', '_').upper()}_COMPLETE"
    comp = comp_cls(command, {}, PROG_NAME, complete_var)
    typer.echo(comp.source())


def jsonschema() -> None:
    typer.echo(json.dumps(Config.model_json_schema(), indent=2))


def parse_external(tokens: Sequence[str]) -> tuple[str | None, str]:
    """Interpret ``[PROVIDER] WORD`` tokens as an open request."""
    if len(tokens) == 1:
        return None, tokens[0]
    if len(tokens) == 2:
        return tokens[0], tokens[1]
    raise UsageError(EXTERNAL_USAGE)


def external(cfg: Config, tokens: Sequence[str], stdin: TextIO | None = None) -> str:
    provider, word = parse_external(tokens)
    return open_search(cfg, provider, word, stdin)
