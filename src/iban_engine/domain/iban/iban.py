"""IBAN value object."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from iban_engine.domain.iban.bban import Bban
from iban_engine.domain.iban.checksum import compute_check_digits
from iban_engine.domain.iban.exceptions import IbanParseError
from iban_engine.domain.iban.formatting import format_spaced
from iban_engine.domain.iban.parser import parse_structure
from iban_engine.domain.registry import (
    CountryInfo,
    CountryRegistry,
    resolve_registry,
)
from iban_engine.domain.shared.exceptions import ErrorCode


@dataclass(frozen=True)
class Iban:
    """
    Value object representing a validated IBAN.

    Construction parses the input (spaces allowed, any case) and raises
    an ``IbanParseError`` subclass if any check fails, so an ``Iban``
    instance is always valid. The stored value is the canonical
    electronic format.

    The registry defaults to the process-wide registry; pass ``registry``
    to validate against a different one. An existing ``Iban`` is accepted
    in place of a string.
    """

    value: str
    registry: InitVar[CountryRegistry | None] = None
    country_info: CountryInfo = field(init=False, repr=False, compare=False)

    def __post_init__(self, registry: CountryRegistry | None) -> None:
        # An existing Iban is re-checked against the given registry
        value = self.value.value if isinstance(self.value, Iban) else self.value
        electronic, country_info = parse_structure(
            value,
            resolve_registry(registry),
        )

        # Replace value with canonical version (frozen dataclass workaround)
        object.__setattr__(self, "value", electronic)
        object.__setattr__(self, "country_info", country_info)

    @classmethod
    def parse(cls, value: str, registry: CountryRegistry | None = None) -> Iban:
        return cls(value, registry)

    @classmethod
    def from_bban(
        cls,
        country_code: str,
        bban: str,
        registry: CountryRegistry | None = None,
    ) -> Iban:
        """Build an IBAN from its country and BBAN, computing the check digits."""
        country_code = country_code.upper()
        bban = bban.replace(" ", "").upper()
        check_digits = compute_check_digits(country_code, bban)
        return cls(f"{country_code}{check_digits}{bban}", registry)

    @property
    def country_code(self) -> str:
        return self.value[0:2]

    @property
    def check_digits(self) -> str:
        return self.value[2:4]

    @property
    def bban(self) -> str:
        return self.value[4:]

    @property
    def bban_view(self) -> Bban:
        """Bank, branch and national checksum fields of the BBAN."""
        return Bban(self)

    @property
    def electronic(self) -> str:
        return self.value

    @property
    def spaced(self) -> str:
        return format_spaced(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Iban('{self.value}')"

    def __len__(self) -> int:
        return len(self.value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        """
        Make Iban natively compatible with Pydantic v2.

        Strings are parsed exactly like ``Iban(value)``; existing ``Iban``
        instances pass through. Serialization emits the electronic format,
        and the JSON schema is a plain string.
        """
        from_string = core_schema.no_info_after_validator_function(
            cls._from_string,
            core_schema.str_schema(),
        )
        return core_schema.json_or_python_schema(
            json_schema=from_string,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_string],
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def _from_string(cls, value: str) -> Iban:
        return cls(value)


def parse_iban(value: str, registry: CountryRegistry | None = None) -> Iban:
    """Parse ``value`` into an Iban, raising ``IbanParseError`` on failure."""
    return Iban(value, registry)


def validate_iban(
    value: str,
    registry: CountryRegistry | None = None,
) -> ErrorCode | None:
    """Return the failure code for ``value``, or None if it is a valid IBAN."""
    try:
        parse_structure(
            value,
            resolve_registry(registry),
        )
    except IbanParseError as e:
        return e.code
    return None


def is_valid_iban(value: str, registry: CountryRegistry | None = None) -> bool:
    return validate_iban(value, registry) is None
