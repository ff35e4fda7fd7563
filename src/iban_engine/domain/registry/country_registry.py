"""Immutable country code to IBAN structure lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from iban_engine.domain.registry.exceptions import (
    CountryNotFoundError,
    InvalidCountryInfoError,
)
from iban_engine.domain.registry.value_objects import CountryInfo


class CountryRegistry(Mapping[str, CountryInfo]):
    """
    Read-only mapping from ISO country code to ``CountryInfo``.

    Built once from the registry data source and never mutated afterwards,
    so a single instance can be shared between threads without locking.
    """

    __slots__ = ("_countries",)

    def __init__(self, countries: Iterable[CountryInfo]) -> None:
        index: dict[str, CountryInfo] = {}
        for info in countries:
            if info.country_code in index:
                msg = f"Duplicate registry entry for {info.country_code}"
                raise InvalidCountryInfoError(msg)
            index[info.country_code] = info
        self._countries = MappingProxyType(index)

    def lookup(self, country_code: str) -> CountryInfo | None:
        """Return the entry for ``country_code`` or None if unregistered."""
        return self._countries.get(country_code)

    def require(self, country_code: str) -> CountryInfo:
        """Return the entry for ``country_code``.

        Raises
        ------
        CountryNotFoundError
            If the country has no IBAN structure in this registry.
        """
        info = self._countries.get(country_code)
        if info is None:
            raise CountryNotFoundError(country_code)
        return info

    @property
    def country_codes(self) -> list[str]:
        return sorted(self._countries)

    def __getitem__(self, country_code: str) -> CountryInfo:
        return self._countries[country_code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._countries)

    def __len__(self) -> int:
        return len(self._countries)

    def __repr__(self) -> str:
        return f"CountryRegistry({len(self)} countries)"
