from iban_engine.domain.registry.value_objects.character_type import CharacterType
from iban_engine.domain.registry.value_objects.country_info import (
    IBAN_PREFIX_LENGTH,
    CountryInfo,
)
from iban_engine.domain.registry.value_objects.pattern_run import PatternRun
from iban_engine.domain.registry.value_objects.span import Span

__all__ = [
    "IBAN_PREFIX_LENGTH",
    "CharacterType",
    "CountryInfo",
    "PatternRun",
    "Span",
]
