"""Character classes used by BBAN format runs."""

import string
from enum import Enum

_DIGITS = frozenset(string.digits)
_ALPHA = frozenset(string.ascii_uppercase)
_ALPHANUMERIC = _ALPHA | _DIGITS


class CharacterType(str, Enum):
    """Character class of a BBAN pattern run.

    Values are the SWIFT registry format symbols. Only uppercase ASCII
    letters count as alphabetic; callers normalize case before matching.
    """

    ALPHA = "a"
    DIGIT = "n"
    ALPHANUMERIC = "c"

    @classmethod
    def from_swift(cls, symbol: str) -> "CharacterType":
        """Map a SWIFT format symbol (``a``, ``n``, ``c`` or ``i``) to a class."""
        # "i" (IIBAN) permits the same characters as "c" once uppercased
        if symbol == "i":
            return cls.ALPHANUMERIC
        return cls(symbol)

    @property
    def alphabet(self) -> str:
        """All characters permitted by this class, in a stable order."""
        if self is CharacterType.ALPHA:
            return string.ascii_uppercase
        if self is CharacterType.DIGIT:
            return string.digits
        return string.digits + string.ascii_uppercase

    def accepts(self, char: str) -> bool:
        if self is CharacterType.ALPHA:
            return char in _ALPHA
        if self is CharacterType.DIGIT:
            return char in _DIGITS
        return char in _ALPHANUMERIC
