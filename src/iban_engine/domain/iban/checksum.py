"""ISO 7064 MOD 97-10 checksum over a full IBAN.

The IBAN is rearranged (first four characters moved to the end), each
letter is replaced by two digits (A=10 ... Z=35) and the resulting
numeral taken modulo 97. The numeral can exceed 70 digits, so it is
reduced while streaming instead of being built as one integer.
"""

import string

MODULUS = 97
EXPECTED_REMAINDER = 1

# Smallest IBAN: country code + check digits + one BBAN character
MIN_CHECKSUM_LENGTH = 5

# Reduce once the running value exceeds seven digits
_REDUCE_ABOVE = 9_999_999

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)


def _char_value(char: str) -> int:
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    return ord(char.upper()) - ord("A") + 10


def mod97(value: str) -> int:
    """Return the numeral of ``value`` (letters expanded) modulo 97."""
    remainder = 0
    for char in value:
        digit_value = _char_value(char)
        remainder = remainder * (10 if digit_value < 10 else 100) + digit_value
        if remainder > _REDUCE_ABOVE:
            remainder %= MODULUS
    return remainder % MODULUS


def is_valid_checksum(iban: str) -> bool:
    """Validate the MOD 97-10 checksum of a full electronic-format IBAN.

    Returns False for input shorter than five characters or containing
    anything other than ASCII letters and digits.
    """
    if len(iban) < MIN_CHECKSUM_LENGTH:
        return False
    if not all(char in _ALPHANUMERIC for char in iban):
        return False
    return mod97(iban[4:] + iban[:4]) == EXPECTED_REMAINDER


def compute_check_digits(country_code: str, bban: str) -> str:
    """Compute the two check digits making ``country_code + cd + bban`` valid.

    Solves the checksum for remainder 1: with placeholder digits ``00`` the
    check value is ``98 - remainder``, always in the range 02..98.
    """
    remainder = mod97(bban + country_code + "00")
    return f"{MODULUS + 1 - remainder:02d}"
