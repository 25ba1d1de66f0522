"""Tests for the command implementations."""

from __future__ import annotations

import io
import json
import re

import pytest
from loguru import logger

import searchcli.commands as commands
from searchcli.errors import NoProvidersError, ProviderNotFoundError, UsageError
from searchcli.providers.schema import (
    Config,
    DefaultConfig,
    ExplicitBrowser,
    SystemBrowser,
)
from searchcli.providers.store import default_config


@pytest.fixture
def launched(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, object]]:
    calls: list[tuple[str, object]] = []
    monkeypatch.setattr(commands, "launch", lambda url, browser: calls.append((url, browser)))
    return calls


@pytest.fixture
def cfg() -> Config:
    return default_config()


class TestListProviders:
    def test_names(self, cfg: Config, capsys: pytest.CaptureFixture[str]) -> None:
        commands.list_providers(cfg)
        assert capsys.readouterr().out == "google\nbing\nduckduckgo\n"

    def test_verbose(self, cfg: Config, capsys: pytest.CaptureFixture[str]) -> None:
        commands.list_providers(cfg, verbose=True)
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        expected = [("google", "g"), ("bing", ""), ("duckduckgo", "d")]
        for line, (name, alias) in zip(lines, expected):
            assert re.fullmatch(rf"{name}\s+alias: \[{alias}\]", line)

    def test_verbose_pads_name(self, cfg: Config, capsys: pytest.CaptureFixture[str]) -> None:
        commands.list_providers(cfg, verbose=True)
        first = capsys.readouterr().out.splitlines()[0]
        assert first == "google               alias: [g]"


class TestReadWord:
    def test_literal(self) -> None:
        assert commands.read_word("aaa", io.StringIO("ignored")) == "aaa"

    def test_stdin(self) -> None:
        assert commands.read_word("-", io.StringIO("aaa bbb\n")) == "aaa bbb"


class TestOpenSearch:
    def test_default_provider(self, cfg: Config, launched: list) -> None:
        url = commands.open_search(cfg, None, "aaa bbb")
        assert url == "https://google.com/search?q=aaa%20bbb"
        assert launched == [(url, SystemBrowser())]

    def test_alias(self, cfg: Config, launched: list) -> None:
        url = commands.open_search(cfg, "d", "aaa")
        assert url == "https://duckduckgo.com/?q=aaa"

    def test_stdin_word(self, cfg: Config, launched: list) -> None:
        url = commands.open_search(cfg, "bing", "-", stdin=io.StringIO("from stdin\n"))
        assert url == "https://www.bing.com/search?q=from%20stdin"

    def test_debug_log_shows_stdin_word(self, cfg: Config, launched: list) -> None:
        messages: list[str] = []
        sink_id = logger.add(lambda m: messages.append(str(m)), level="DEBUG", format="{message}")
        try:
            commands.open_search(cfg, "bing", "-", stdin=io.StringIO("from stdin\n"))
        finally:
            logger.remove(sink_id)
        rendered = [m for m in messages if "rendered" in m]
        assert len(rendered) == 1
        assert "'from stdin'" in rendered[0]
        assert "'-'" not in rendered[0]

    def test_config_default_browser(self, cfg: Config, launched: list) -> None:
        cfg = cfg.model_copy(update={"default": DefaultConfig(browser="chromium")})
        commands.open_search(cfg, "g", "aaa")
        assert launched[0][1] == ExplicitBrowser(path="chromium")

    def test_unknown_provider(self, cfg: Config, launched: list) -> None:
        with pytest.raises(ProviderNotFoundError):
            commands.open_search(cfg, "yahoo", "aaa")
        assert launched == []

    def test_no_providers(self, launched: list) -> None:
        with pytest.raises(NoProvidersError):
            commands.open_search(Config(version="v1.0"), None, "aaa")


class TestExternal:
    def test_word_only(self) -> None:
        assert commands.parse_external(["aaa"]) == (None, "aaa")

    def test_provider_and_word(self) -> None:
        assert commands.parse_external(["g", "aaa"]) == ("g", "aaa")

    @pytest.mark.parametrize("tokens", [[], ["a", "b", "c"], ["a", "b", "c", "d"]])
    def test_bad_arity(self, tokens: list[str]) -> None:
        with pytest.raises(UsageError, match=re.escape("Usage: search [PROVIDER] WORD")):
            commands.parse_external(tokens)

    def test_dispatches_to_open(self, cfg: Config, launched: list) -> None:
        url = commands.external(cfg, ["g", "aaa"])
        assert url == "https://google.com/search?q=aaa"
        assert len(launched) == 1


class TestSchemaAndCompletion:
    def test_jsonschema(self, capsys: pytest.CaptureFixture[str]) -> None:
        commands.jsonschema()
        schema = json.loads(capsys.readouterr().out)
        assert schema["title"] == "Config"
        assert "providers" in schema["properties"]

    def test_config_path(self, cfg: Config, monkeypatch: pytest.MonkeyPatch, tmp_path, capsys) -> None:
        monkeypatch.setenv("SEARCH_CONFIG_DIR", str(tmp_path))
        commands.config(cfg, path=True)
        assert capsys.readouterr().out == f"{tmp_path / 'config.yaml'}\n"

    def test_config_without_flag_prints_nothing(self, cfg: Config, capsys: pytest.CaptureFixture[str]) -> None:
        commands.config(cfg)
        assert capsys.readouterr().out == ""
