"""Process-wide default registry hook.

The domain never loads registry data itself. An outer layer installs a
zero-argument provider (the package root installs the bundled-registry
loader); callers that pass a registry explicitly never reach it.
"""

from __future__ import annotations

from collections.abc import Callable

from iban_engine.domain.registry.country_registry import CountryRegistry

RegistryProvider = Callable[[], CountryRegistry]

_provider: RegistryProvider | None = None


def install_registry_provider(provider: RegistryProvider | None) -> None:
    """Set (or with None, remove) the provider of the default registry."""
    global _provider
    _provider = provider


def resolve_registry(registry: CountryRegistry | None = None) -> CountryRegistry:
    """Return ``registry``, falling back to the installed provider.

    Raises
    ------
    RuntimeError
        If no registry is given and no provider is installed.
    """
    if registry is not None:
        return registry
    if _provider is None:
        msg = "No default country registry installed; pass a registry explicitly"
        raise RuntimeError(msg)
    return _provider()
