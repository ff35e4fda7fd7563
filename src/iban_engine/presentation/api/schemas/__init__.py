"""Pydantic schemas for API request/response models."""

from iban_engine.presentation.api.schemas.countries import (
    CountryListResponse,
    CountryResponse,
    SpanResponse,
)
from iban_engine.presentation.api.schemas.ibans import (
    BbanResponse,
    IbanGenerateRequest,
    IbanGenerateResponse,
    IbanResponse,
    IbanValidateRequest,
    IbanValidateResponse,
)

__all__ = [
    "BbanResponse",
    "CountryListResponse",
    "CountryResponse",
    "IbanGenerateRequest",
    "IbanGenerateResponse",
    "IbanResponse",
    "IbanValidateRequest",
    "IbanValidateResponse",
    "SpanResponse",
]
