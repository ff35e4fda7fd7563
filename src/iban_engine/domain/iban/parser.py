"""IBAN parsing: canonicalization and structural validation.

``parse_structure`` runs every check in order and raises the exception
for the first failing step:

1. only ASCII letters, digits and spaces (spaces are removed)
2. overall length between 5 and 34
3. two-letter country code
4. two-digit check digits
5. country known to the registry
6. BBAN length matches the country
7. BBAN matches the country's pattern
8. MOD 97-10 checksum
"""

from __future__ import annotations

import string

from iban_engine.domain.iban.checksum import is_valid_checksum
from iban_engine.domain.iban.exceptions import (
    InvalidBbanError,
    InvalidBbanLengthError,
    InvalidCharacterError,
    InvalidCheckDigitsError,
    InvalidChecksumError,
    InvalidCountryCodeError,
    InvalidLengthError,
    UnknownCountryError,
)
from iban_engine.domain.iban.formatting import SEPARATOR
from iban_engine.domain.iban.pattern_matcher import matches
from iban_engine.domain.registry import (
    IBAN_PREFIX_LENGTH,
    CountryInfo,
    CountryRegistry,
)

# ISO 13616
IBAN_MIN_LENGTH = 5
IBAN_MAX_LENGTH = 34

_ALLOWED_CHARACTERS = frozenset(string.ascii_letters + string.digits + SEPARATOR)
_UPPERCASE = frozenset(string.ascii_uppercase)
_DIGITS = frozenset(string.digits)


def normalize_iban(value: str) -> str:
    """Canonicalize to electronic format: drop spaces, uppercase.

    Raises
    ------
    InvalidCharacterError
        If the input contains anything other than ASCII letters, digits
        and spaces (tabs, dashes and non-ASCII letters are rejected).
    """
    for position, char in enumerate(value):
        if char not in _ALLOWED_CHARACTERS:
            raise InvalidCharacterError(value, position)
    return value.replace(SEPARATOR, "").upper()


def parse_structure(value: str, registry: CountryRegistry) -> tuple[str, CountryInfo]:
    """Validate ``value`` and return its electronic form and registry entry.

    Raises
    ------
    IbanParseError
        The subclass for the first check that fails.
    """
    if not isinstance(value, str):
        msg = f"IBAN must be a string, got {type(value).__name__}"
        raise TypeError(msg)

    iban = normalize_iban(value)

    if not IBAN_MIN_LENGTH <= len(iban) <= IBAN_MAX_LENGTH:
        raise InvalidLengthError(iban, IBAN_MIN_LENGTH, IBAN_MAX_LENGTH)

    country_code = iban[:2]
    if not all(char in _UPPERCASE for char in country_code):
        raise InvalidCountryCodeError(iban)

    if not all(char in _DIGITS for char in iban[2:4]):
        raise InvalidCheckDigitsError(iban)

    country_info = registry.lookup(country_code)
    if country_info is None:
        raise UnknownCountryError(iban)

    bban = iban[IBAN_PREFIX_LENGTH:]
    if len(bban) != country_info.bban_length:
        raise InvalidBbanLengthError(iban, country_info.bban_length)

    if not matches(bban, country_info.bban_pattern):
        raise InvalidBbanError(iban, country_info.bban_format)

    if not is_valid_checksum(iban):
        raise InvalidChecksumError(iban)

    return iban, country_info
