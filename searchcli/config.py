"""search settings.

Settings are resolved in this priority order (highest wins):
  1. Environment variables  (SEARCH_*)
  2. Built-in defaults

  SEARCH_CONFIG_DIR   directory holding config.yaml  (default ~/.config/search)
  SEARCH_LOG_LEVEL    loguru level for stderr logs   (default WARNING)

The provider list itself lives in config.yaml; see searchcli.providers.store.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILE = "config.yaml"

_DEFAULTS: dict[str, str] = {
    "log_level": "WARNING",
}


def config_dir() -> Path:
    override = os.environ.get("SEARCH_CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "search"


def config_path() -> Path:
    return config_dir() / CONFIG_FILE


class LogConfig:
    """Resolved logging configuration."""

    def __init__(self) -> None:
        self.level: str = (
            os.environ.get("SEARCH_LOG_LEVEL")
            or _DEFAULTS["log_level"]
        ).upper()


# Module-level singleton, loaded once per process.
log_config = LogConfig()
