"""Registry data source: bundled IBAN registry file and its loader."""

from iban_engine.infrastructure.registry.exceptions import (
    RegistryError,
    RegistryFileNotFoundError,
    RegistryParseError,
)
from iban_engine.infrastructure.registry.registry_loader import (
    bundled_registry_text,
    clear_default_registry_cache,
    get_default_registry,
    load_registry,
    load_registry_from_text,
    parse_registry_row,
)
from iban_engine.infrastructure.registry.swift_format import compile_swift_format

__all__ = [
    "RegistryError",
    "RegistryFileNotFoundError",
    "RegistryParseError",
    "bundled_registry_text",
    "clear_default_registry_cache",
    "compile_swift_format",
    "get_default_registry",
    "load_registry",
    "load_registry_from_text",
    "parse_registry_row",
]
