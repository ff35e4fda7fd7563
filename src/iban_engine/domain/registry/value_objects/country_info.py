"""Country registry entry value object."""

from dataclasses import dataclass

from iban_engine.domain.registry.exceptions import InvalidCountryInfoError
from iban_engine.domain.registry.value_objects.pattern_run import PatternRun
from iban_engine.domain.registry.value_objects.span import Span

# Country code (2) + check digits (2)
IBAN_PREFIX_LENGTH = 4


@dataclass(frozen=True)
class CountryInfo:
    """
    IBAN structure of one country as declared by the registry.

    Holds the BBAN layout (length and typed runs) and the optional
    positions of the bank identifier, branch identifier and national
    checksum inside the BBAN. Instances are shared read-only by every
    ``Iban`` of that country.
    """

    country_code: str
    bban_length: int
    bban_pattern: tuple[PatternRun, ...]
    bank_identifier_span: Span | None = None
    branch_identifier_span: Span | None = None
    checksum_span: Span | None = None
    country_name: str = ""

    def __post_init__(self) -> None:
        code = self.country_code
        is_letters = code.isascii() and code.isalpha() and code.isupper()
        if len(code) != 2 or not is_letters:
            msg = f"Country code must be two uppercase letters: {code!r}"
            raise InvalidCountryInfoError(msg)

        # Accept lists from callers but store an immutable tuple
        object.__setattr__(self, "bban_pattern", tuple(self.bban_pattern))

        pattern_length = sum(run.length for run in self.bban_pattern)
        if pattern_length != self.bban_length:
            msg = (
                f"BBAN length {self.bban_length} for {code} does not match "
                f"its pattern length {pattern_length}"
            )
            raise InvalidCountryInfoError(msg)

        for name, span in self.spans.items():
            if span is not None and span.end > self.bban_length:
                msg = (
                    f"{name} span {span.offset}+{span.length} for {code} "
                    f"exceeds BBAN length {self.bban_length}"
                )
                raise InvalidCountryInfoError(msg)

    @property
    def iban_length(self) -> int:
        return self.bban_length + IBAN_PREFIX_LENGTH

    @property
    def spans(self) -> dict[str, Span | None]:
        return {
            "bank_identifier": self.bank_identifier_span,
            "branch_identifier": self.branch_identifier_span,
            "checksum": self.checksum_span,
        }

    @property
    def bban_format(self) -> str:
        """BBAN format in SWIFT notation, e.g. ``4!a6!n8!n``."""
        return "".join(str(run) for run in self.bban_pattern)

    @property
    def iban_format(self) -> str:
        return f"{self.country_code}2!n{self.bban_format}"

    def __str__(self) -> str:
        return f"{self.country_code} ({self.iban_format})"
