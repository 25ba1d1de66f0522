"""Exception hierarchy for search.

Library code raises these; only the CLI turns them into an exit status.
"""

from __future__ import annotations

from pathlib import Path


class SearchError(Exception):
    """Base class for every user-facing failure."""

    exit_code = 1


class ConfigError(SearchError):
    """The config file could not be created, read or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid config file {path}: {reason}")
        self.path = path
        self.reason = reason


class NoProvidersError(SearchError):
    def __init__(self) -> None:
        super().__init__("Providers is not found.")


class ProviderNotFoundError(SearchError):
    def __init__(self, name: str) -> None:
        super().__init__(f"The Provider does not exists: '{name}'")
        self.name = name


class TemplateError(SearchError):
    """A provider URL template could not be rendered."""

    def __init__(self, template: str, reason: str) -> None:
        super().__init__(f"Failed to render URL template {template!r}: {reason}")
        self.template = template
        self.reason = reason


class BrowserLaunchError(SearchError):
    pass


class UsageError(SearchError):
    pass
