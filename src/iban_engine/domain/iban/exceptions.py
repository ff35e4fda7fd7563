"""IBAN parsing exceptions.

Each parse failure has its own exception class and stable ``ErrorCode``,
so callers can either catch a specific class or inspect ``exc.code``.
All of them derive from ``ValueError`` as well, which lets pydantic
report them as ordinary validation errors.
"""

from iban_engine.domain.shared.exceptions import ErrorCode, ValidationError


class IbanParseError(ValidationError, ValueError):
    """Base class for every reason an IBAN string is rejected."""

    def __init__(self, message: str, code: ErrorCode, value: str) -> None:
        super().__init__(message, code, details={"value": value})
        self.value = value


class InvalidCharacterError(IbanParseError):
    """Input contains something other than ASCII letters, digits or spaces."""

    def __init__(self, value: str, position: int) -> None:
        self.position = position
        super().__init__(
            f"Invalid character {value[position]!r} at position {position}",
            ErrorCode.INVALID_CHARACTER,
            value,
        )


class InvalidLengthError(IbanParseError):
    """IBAN length outside the ISO 13616 range."""

    def __init__(self, value: str, min_length: int, max_length: int) -> None:
        super().__init__(
            f"IBAN must be between {min_length} and {max_length} characters, "
            f"got {len(value)}",
            ErrorCode.INVALID_LENGTH,
            value,
        )


class InvalidCountryCodeError(IbanParseError):
    """First two characters are not uppercase letters."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"IBAN must start with a two-letter country code: {value[:2]!r}",
            ErrorCode.INVALID_COUNTRY_CODE,
            value,
        )


class InvalidCheckDigitsError(IbanParseError):
    """Characters three and four are not digits."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"IBAN check digits must be two digits: {value[2:4]!r}",
            ErrorCode.INVALID_CHECK_DIGITS,
            value,
        )


class UnknownCountryError(IbanParseError):
    """Country code has no IBAN structure in the registry."""

    def __init__(self, value: str) -> None:
        self.country_code = value[:2]
        super().__init__(
            f"Unknown IBAN country: {self.country_code}",
            ErrorCode.UNKNOWN_COUNTRY,
            value,
        )


class InvalidBbanLengthError(IbanParseError):
    """BBAN length differs from the country's registered length."""

    def __init__(self, value: str, expected: int) -> None:
        self.expected = expected
        super().__init__(
            f"BBAN for {value[:2]} must be {expected} characters, "
            f"got {len(value) - 4}",
            ErrorCode.INVALID_BBAN_LENGTH,
            value,
        )


class InvalidBbanError(IbanParseError):
    """BBAN does not match the country's format."""

    def __init__(self, value: str, expected_format: str) -> None:
        self.expected_format = expected_format
        super().__init__(
            f"BBAN does not match the {value[:2]} format {expected_format}",
            ErrorCode.INVALID_BBAN,
            value,
        )


class InvalidChecksumError(IbanParseError):
    """ISO 7064 MOD 97-10 check failed."""

    def __init__(self, value: str) -> None:
        super().__init__(
            "IBAN checksum validation failed",
            ErrorCode.INVALID_CHECKSUM,
            value,
        )
