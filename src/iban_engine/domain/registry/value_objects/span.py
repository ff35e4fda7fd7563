"""Span value object for BBAN sub-fields."""

from dataclasses import dataclass

from iban_engine.domain.registry.exceptions import InvalidCountryInfoError


@dataclass(frozen=True)
class Span:
    """Half-open ``[offset, offset + length)`` range inside a BBAN."""

    offset: int
    length: int

    def __post_init__(self) -> None:
        if self.offset < 0:
            msg = f"Span offset cannot be negative: {self.offset}"
            raise InvalidCountryInfoError(msg)
        if self.length <= 0:
            msg = f"Span length must be positive: {self.length}"
            raise InvalidCountryInfoError(msg)

    @classmethod
    def from_offsets(cls, start: int, stop: int) -> "Span":
        """Create a span from inclusive registry start/stop offsets."""
        return cls(offset=start, length=stop - start + 1)

    @property
    def end(self) -> int:
        return self.offset + self.length

    def extract(self, bban: str) -> str:
        return bban[self.offset : self.end]
