"""Registry domain package.

Value objects describing per-country IBAN structure and the immutable
registry that maps country codes to them.
"""

from iban_engine.domain.registry.country_registry import CountryRegistry
from iban_engine.domain.registry.exceptions import (
    CountryNotFoundError,
    InvalidCountryInfoError,
)
from iban_engine.domain.registry.registry_provider import (
    RegistryProvider,
    install_registry_provider,
    resolve_registry,
)
from iban_engine.domain.registry.value_objects import (
    IBAN_PREFIX_LENGTH,
    CharacterType,
    CountryInfo,
    PatternRun,
    Span,
)

__all__ = [
    "IBAN_PREFIX_LENGTH",
    "CharacterType",
    "CountryInfo",
    "CountryNotFoundError",
    "CountryRegistry",
    "InvalidCountryInfoError",
    "PatternRun",
    "RegistryProvider",
    "Span",
    "install_registry_provider",
    "resolve_registry",
]
