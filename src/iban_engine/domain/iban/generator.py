"""Random IBAN generation.

Produces syntactically valid IBANs for test data: every BBAN run is
filled with random characters of its class and the check digits are
computed so the result passes the parser. Validation never depends on
this module.
"""

from __future__ import annotations

import random

from iban_engine.domain.iban.checksum import compute_check_digits
from iban_engine.domain.iban.iban import Iban
from iban_engine.domain.registry import (
    CountryInfo,
    CountryRegistry,
    resolve_registry,
)


def random_bban(country_info: CountryInfo, rng: random.Random) -> str:
    """Fill each pattern run of ``country_info`` with random characters."""
    return "".join(
        rng.choice(run.character_type.alphabet)
        for run in country_info.bban_pattern
        for _ in range(run.length)
    )


def generate_iban(
    country_code: str,
    *,
    registry: CountryRegistry | None = None,
    rng: random.Random | None = None,
) -> Iban:
    """Generate a random valid IBAN for ``country_code``.

    Raises
    ------
    CountryNotFoundError
        If the registry has no entry for the country.
    """
    registry = resolve_registry(registry)
    rng = rng or random.Random()

    country_info = registry.require(country_code.upper())
    bban = random_bban(country_info, rng)
    check_digits = compute_check_digits(country_info.country_code, bban)

    return Iban(f"{country_info.country_code}{check_digits}{bban}", registry)
