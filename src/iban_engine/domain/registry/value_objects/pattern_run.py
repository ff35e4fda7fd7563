"""Pattern run value object."""

from dataclasses import dataclass

from iban_engine.domain.registry.exceptions import InvalidCountryInfoError
from iban_engine.domain.registry.value_objects.character_type import CharacterType


@dataclass(frozen=True)
class PatternRun:
    """A fixed-width run of characters of a single class.

    A BBAN format is the concatenation of its runs, e.g. ``8!n10!n`` is
    eight digits followed by ten digits.
    """

    character_type: CharacterType
    length: int

    def __post_init__(self) -> None:
        if self.length <= 0:
            msg = f"Pattern run length must be positive: {self.length}"
            raise InvalidCountryInfoError(msg)

    def __str__(self) -> str:
        return f"{self.length}!{self.character_type.value}"
