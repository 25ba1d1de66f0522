"""Browser selection and URL launching."""

from __future__ import annotations

import subprocess
import sys

import typer
from loguru import logger

from searchcli.errors import BrowserLaunchError
from searchcli.providers.schema import (
    BrowserSetting,
    ConfigDefaultBrowser,
    DefaultConfig,
    ExplicitBrowser,
    SystemBrowser,
)


def select_browser(
    setting: BrowserSetting, default: DefaultConfig | None
) -> SystemBrowser | ExplicitBrowser:
    """Collapse a provider's browser setting against the config default.

    The result is never ConfigDefaultBrowser: a missing config default means
    the system opener.
    """
    match setting:
        case ExplicitBrowser() | SystemBrowser():
            return setting
        case ConfigDefaultBrowser():
            if default is not None and default.browser:
                return ExplicitBrowser(path=default.browser)
            return SystemBrowser()
    raise TypeError(f"Unknown browser setting: {setting!r}")


def launch(url: str, browser: SystemBrowser | ExplicitBrowser) -> None:
    """Open ``url`` with the selected browser. Raises BrowserLaunchError."""
    match browser:
        case SystemBrowser():
            logger.info("Opening {} with the system opener", url)
            code = typer.launch(url)
            if code != 0:
                raise BrowserLaunchError(f"System URL opener exited with status {code} for {url}")
        case ExplicitBrowser(path=path):
            logger.info("Opening {} with {}", url, path)
            _open_with(url, path)


def _open_with(url: str, browser: str) -> None:
    if sys.platform == "darwin":
        cmd = ["open", "-a", browser, url]
    else:
        cmd = [browser, url]
    try:
        subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        raise BrowserLaunchError(f"Cannot launch browser '{browser}': {e}") from e
