"""Shared fixtures for IBAN engine tests."""

import pytest

from iban_engine.domain.registry import (
    CharacterType,
    CountryInfo,
    CountryRegistry,
    PatternRun,
    Span,
)
from iban_engine.infrastructure.registry import load_registry


@pytest.fixture(scope="session")
def registry() -> CountryRegistry:
    """The bundled registry, loaded once per session."""
    return load_registry()


@pytest.fixture
def tiny_registry() -> CountryRegistry:
    """Registry with one made-up country: XX + 2 check digits + 2!a4!n."""
    return CountryRegistry(
        [
            CountryInfo(
                country_code="XX",
                bban_length=6,
                bban_pattern=(
                    PatternRun(CharacterType.ALPHA, 2),
                    PatternRun(CharacterType.DIGIT, 4),
                ),
                bank_identifier_span=Span(0, 2),
                checksum_span=Span(5, 1),
                country_name="Testland",
            ),
        ],
    )
