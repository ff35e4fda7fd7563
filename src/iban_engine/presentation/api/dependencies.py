"""FastAPI dependency injection for the IBAN API."""

import random
from typing import Annotated

from fastapi import Depends

from iban_config import get_settings
from iban_engine.domain.registry import CountryRegistry
from iban_engine.infrastructure.registry import get_default_registry


def get_registry() -> CountryRegistry:
    """Return the process-wide country registry."""
    return get_default_registry()


def get_rng() -> random.Random:
    """Random source for IBAN generation.

    Seeded from ``GENERATOR_SEED`` when configured so generated test data
    is reproducible per request.
    """
    return random.Random(get_settings().generator_seed)


Registry = Annotated[CountryRegistry, Depends(get_registry)]
Rng = Annotated[random.Random, Depends(get_rng)]
