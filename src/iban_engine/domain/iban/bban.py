"""BBAN view over a validated IBAN."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from iban_engine.domain.iban.iban import Iban
    from iban_engine.domain.registry import Span


@dataclass(frozen=True)
class Bban:
    """
    Read-only projection of an IBAN's BBAN sub-fields.

    Field positions come from the country's registry entry. Nothing is
    re-validated here: the ``Iban`` this view was built from is valid by
    construction. Each field is None when the country declares no span
    for it.

    The national checksum is extracted as-is and never verified.
    """

    iban: Iban

    @property
    def value(self) -> str:
        return self.iban.bban

    @property
    def bank_identifier(self) -> str | None:
        return self._extract(self.iban.country_info.bank_identifier_span)

    @property
    def branch_identifier(self) -> str | None:
        return self._extract(self.iban.country_info.branch_identifier_span)

    @property
    def checksum(self) -> str | None:
        return self._extract(self.iban.country_info.checksum_span)

    def _extract(self, span: Span | None) -> str | None:
        if span is None:
            return None
        return span.extract(self.iban.bban)

    def __str__(self) -> str:
        return self.value
