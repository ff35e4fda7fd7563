"""IBAN validation and BBAN decomposition engine.

Typical use::

    from iban_engine import Iban

    iban = Iban("GB82 WEST 1234 5698 7654 32")
    iban.country_code          # "GB"
    iban.bban_view.bank_identifier  # "WEST"
"""

from iban_engine.domain.iban import (
    Bban,
    Iban,
    compute_check_digits,
    format_electronic,
    format_spaced,
    generate_iban,
    is_valid_checksum,
    is_valid_iban,
    matches,
    parse_iban,
    validate_iban,
)
from iban_engine.domain.iban.exceptions import IbanParseError
from iban_engine.domain.registry import (
    CountryInfo,
    CountryRegistry,
    install_registry_provider,
)
from iban_engine.infrastructure.registry import get_default_registry, load_registry

# Iban() without an explicit registry uses the bundled (or REGISTRY_FILE) one
install_registry_provider(get_default_registry)

__all__ = [
    "Bban",
    "CountryInfo",
    "CountryRegistry",
    "Iban",
    "IbanParseError",
    "compute_check_digits",
    "format_electronic",
    "format_spaced",
    "generate_iban",
    "get_default_registry",
    "is_valid_checksum",
    "is_valid_iban",
    "load_registry",
    "matches",
    "parse_iban",
    "validate_iban",
]
