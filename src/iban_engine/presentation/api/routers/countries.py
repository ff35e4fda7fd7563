"""Country registry router."""

from fastapi import APIRouter

from iban_engine.presentation.api.dependencies import Registry
from iban_engine.presentation.api.schemas.countries import (
    CountryListResponse,
    CountryResponse,
)

router = APIRouter()


@router.get(
    "",
    summary="List registered countries",
    responses={
        200: {"description": "All countries with an IBAN structure"},
    },
)
async def list_countries(registry: Registry) -> CountryListResponse:
    """List every country in the registry, sorted by country code."""
    countries = [
        CountryResponse.from_country_info(registry[code])
        for code in registry.country_codes
    ]
    return CountryListResponse(countries=countries, total=len(countries))


@router.get(
    "/{country_code}",
    summary="Get a country's IBAN structure",
    responses={
        200: {"description": "Country IBAN structure"},
        404: {"description": "Country not registered"},
    },
)
async def get_country(country_code: str, registry: Registry) -> CountryResponse:
    """Return BBAN length, format and field positions for one country."""
    return CountryResponse.from_country_info(registry.require(country_code.upper()))
