"""IBAN domain package.

Parsing and validation of IBANs (pattern matcher, MOD 97-10 checksum,
``Iban`` value object), the BBAN field view, display rendering and
random generation.
"""

from iban_engine.domain.iban.bban import Bban
from iban_engine.domain.iban.checksum import (
    compute_check_digits,
    is_valid_checksum,
    mod97,
)
from iban_engine.domain.iban.exceptions import (
    IbanParseError,
    InvalidBbanError,
    InvalidBbanLengthError,
    InvalidCharacterError,
    InvalidCheckDigitsError,
    InvalidChecksumError,
    InvalidCountryCodeError,
    InvalidLengthError,
    UnknownCountryError,
)
from iban_engine.domain.iban.formatting import format_electronic, format_spaced
from iban_engine.domain.iban.generator import generate_iban, random_bban
from iban_engine.domain.iban.iban import (
    Iban,
    is_valid_iban,
    parse_iban,
    validate_iban,
)
from iban_engine.domain.iban.parser import (
    IBAN_MAX_LENGTH,
    IBAN_MIN_LENGTH,
    normalize_iban,
    parse_structure,
)
from iban_engine.domain.iban.pattern_matcher import matches

__all__ = [
    "IBAN_MAX_LENGTH",
    "IBAN_MIN_LENGTH",
    "Bban",
    "Iban",
    "IbanParseError",
    "InvalidBbanError",
    "InvalidBbanLengthError",
    "InvalidCharacterError",
    "InvalidCheckDigitsError",
    "InvalidChecksumError",
    "InvalidCountryCodeError",
    "InvalidLengthError",
    "UnknownCountryError",
    "compute_check_digits",
    "format_electronic",
    "format_spaced",
    "generate_iban",
    "is_valid_checksum",
    "is_valid_iban",
    "matches",
    "mod97",
    "normalize_iban",
    "parse_iban",
    "parse_structure",
    "random_bban",
    "validate_iban",
]
