"""ConfigStore: bootstrap and load ``config.yaml``."""

from __future__ import annotations

import io
import os
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from searchcli.config import config_path
from searchcli.errors import ConfigError

from .schema import Config

yaml = YAML()
yaml.default_flow_style = False
yaml.preserve_quotes = True

SCHEMA_VERSION = "v1.0"

DEFAULT_CONFIG_YAML = f"""\
version: "{SCHEMA_VERSION}"
providers:
  - name: google
    aliases:
      - g
    url: "https://google.com/search?q={{{{ word | urlencode }}}}"
  - name: bing
    url: "https://www.bing.com/search?q={{{{ word | urlencode }}}}"
  - name: duckduckgo
    aliases:
      - d
    url: "https://duckduckgo.com/?q={{{{ word | urlencode }}}}"
"""


def default_config() -> Config:
    """Return the built-in google / bing / duckduckgo config."""
    return Config.model_validate(_to_plain(yaml.load(io.StringIO(DEFAULT_CONFIG_YAML))))


# ---------------------------------------------------------------------------
# ConfigStore
# ---------------------------------------------------------------------------


class ConfigStore:
    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else config_path()

    def ensure(self) -> bool:
        """Create the config directory and a default config file if missing.

        Returns True when a new file was written.
        """
        if self.path.is_file():
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.save(default_config())
        except OSError as e:
            raise ConfigError(self.path, f"cannot create default config: {e}") from e
        logger.info("Created default config at {}", self.path)
        return True

    def load(self) -> Config:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(self.path, str(e)) from e

        try:
            data: Any = yaml.load(io.StringIO(text))
        except YAMLError as e:
            raise ConfigError(self.path, f"YAML parse error: {e}") from e
        if data is None:
            raise ConfigError(self.path, "file is empty")

        try:
            config = Config.model_validate(_to_plain(data))
        except ValidationError as e:
            raise ConfigError(self.path, str(e)) from e

        logger.debug("Loaded {} provider(s) from {}", len(config.providers), self.path)
        return config

    def load_or_create(self) -> Config:
        self.ensure()
        return self.load()

    def save(self, config: Config) -> None:
        stream = io.StringIO()
        yaml.dump(_prune_none(config.model_dump(mode="json")), stream)
        tmp = self.path.with_suffix(".yaml.tmp")
        tmp.write_text(stream.getvalue(), encoding="utf-8")
        os.replace(tmp, self.path)


def _to_plain(data: Any) -> Any:
    """Convert ruamel's CommentedMap / CommentedSeq trees to dict / list."""
    if isinstance(data, dict):
        return {str(k): _to_plain(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_to_plain(v) for v in data]
    return data


def _prune_none(data: Any) -> Any:
    """Drop None-valued keys so optional fields stay out of the YAML file."""
    if isinstance(data, dict):
        return {k: _prune_none(v) for k, v in data.items() if v is not None}
    if isinstance(data, list):
        return [_prune_none(v) for v in data]
    return data
