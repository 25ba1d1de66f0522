"""Provider lookup by name or alias."""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from searchcli.errors import NoProvidersError, ProviderNotFoundError

from .schema import Config, Provider


def find_provider(providers: Sequence[Provider], name: str) -> Provider | None:
    """Return the first provider whose name or one of whose aliases equals ``name``.

    Providers are scanned in declaration order; matching is case-sensitive.
    """
    for provider in providers:
        if provider.name == name:
            return provider
        if provider.aliases and name in provider.aliases:
            return provider
    return None


def resolve_provider(config: Config, name: str | None) -> Provider:
    """Pick the provider for an ``open`` request.

    With no name the first declared provider is the default.
    """
    if not config.providers:
        raise NoProvidersError()

    if name is None:
        provider = config.providers[0]
        logger.debug("No provider given, using first provider '{}'", provider.name)
        return provider

    provider = find_provider(config.providers, name)
    if provider is None:
        raise ProviderNotFoundError(name)
    logger.debug("Resolved '{}' to provider '{}'", name, provider.name)
    return provider
