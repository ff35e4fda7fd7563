"""Unit tests for random IBAN generation."""

import random

import pytest

from iban_engine.domain.iban import (
    Iban,
    generate_iban,
    is_valid_iban,
    matches,
    random_bban,
)
from iban_engine.domain.registry import CountryNotFoundError


class TestRandomBban:
    """Test BBAN generation from a pattern."""

    def test_matches_country_pattern(self, registry):
        """Random BBANs should follow the country's runs."""
        rng = random.Random(7)
        for code in ["GB", "FR", "BR", "LC"]:
            info = registry[code]
            bban = random_bban(info, rng)
            assert len(bban) == info.bban_length
            assert matches(bban, info.bban_pattern)


class TestGenerateIban:
    """Test full IBAN generation."""

    def test_every_registered_country(self, registry):
        """Generated IBANs should validate for every country."""
        rng = random.Random(42)
        for code in registry.country_codes:
            iban = generate_iban(code, registry=registry, rng=rng)
            assert isinstance(iban, Iban)
            assert iban.country_code == code
            assert is_valid_iban(iban.value, registry), iban

    def test_round_trip_through_parse(self, registry):
        """Re-parsing the electronic rendering yields the same IBAN."""
        rng = random.Random(11)
        for code in registry.country_codes:
            iban = generate_iban(code, registry=registry, rng=rng)
            assert Iban(iban.electronic, registry) == iban
            assert Iban(iban.spaced, registry) == iban

    def test_seed_is_reproducible(self, registry):
        """The same seed should yield the same IBANs."""
        first = generate_iban("DE", registry=registry, rng=random.Random(3))
        second = generate_iban("DE", registry=registry, rng=random.Random(3))
        assert first == second

    def test_lowercase_country_code(self, registry):
        """Country codes should be case-insensitive."""
        iban = generate_iban("gb", registry=registry, rng=random.Random(1))
        assert iban.country_code == "GB"

    def test_default_registry_and_rng(self):
        """Without arguments the default registry and a fresh RNG are used."""
        iban = generate_iban("NO")
        assert len(iban) == 15

    def test_custom_registry(self, tiny_registry):
        """Generation should honor a custom registry."""
        iban = generate_iban("XX", registry=tiny_registry, rng=random.Random(0))
        assert iban.country_code == "XX"
        assert iban.bban[:2].isalpha()
        assert iban.bban[2:].isdigit()

    def test_unknown_country(self, registry):
        """Unregistered countries should raise CountryNotFoundError."""
        with pytest.raises(CountryNotFoundError):
            generate_iban("ZZ", registry=registry)
