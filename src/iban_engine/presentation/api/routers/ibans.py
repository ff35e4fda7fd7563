"""IBAN router for parsing, validation and generation endpoints."""

import logging

from fastapi import APIRouter, status

from iban_engine.domain.iban import Iban, IbanParseError, generate_iban
from iban_engine.presentation.api.dependencies import Registry, Rng
from iban_engine.presentation.api.schemas.ibans import (
    IbanGenerateRequest,
    IbanGenerateResponse,
    IbanResponse,
    IbanValidateRequest,
    IbanValidateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/validate",
    summary="Validate an IBAN",
    responses={
        200: {"description": "Validation outcome (valid or not)"},
    },
)
async def validate(
    request: IbanValidateRequest,
    registry: Registry,
) -> IbanValidateResponse:
    """
    Validate an IBAN without failing the request.

    Invalid input yields ``valid: false`` together with the error code
    of the first check that failed.
    """
    try:
        iban = Iban(request.iban, registry)
    except IbanParseError as e:
        return IbanValidateResponse(valid=False, code=e.code.value, detail=e.message)

    return IbanValidateResponse(valid=True, iban=iban.electronic)


@router.post(
    "/generate",
    status_code=status.HTTP_201_CREATED,
    summary="Generate random IBANs",
    responses={
        201: {"description": "Generated IBANs"},
        404: {"description": "Country has no IBAN structure"},
    },
)
async def generate(
    request: IbanGenerateRequest,
    registry: Registry,
    rng: Rng,
) -> IbanGenerateResponse:
    """
    Generate syntactically valid random IBANs for test data.

    Generated IBANs pass checksum and format validation but do not
    belong to real accounts.
    """
    ibans = [
        generate_iban(request.country_code, registry=registry, rng=rng)
        for _ in range(request.count)
    ]
    logger.debug("Generated %d IBANs for %s", len(ibans), request.country_code)

    return IbanGenerateResponse(
        ibans=[IbanResponse.from_iban(iban) for iban in ibans],
        total=len(ibans),
    )


@router.get(
    "/{value}",
    summary="Parse an IBAN",
    responses={
        200: {"description": "Parsed IBAN with BBAN fields"},
        400: {"description": "Invalid IBAN"},
    },
)
async def parse(
    value: str,
    registry: Registry,
) -> IbanResponse:
    """
    Parse an IBAN and decompose its BBAN.

    Spaces are accepted (URL-encoded as ``%20``). Failures return 400 with
    the error code of the first failed check.
    """
    return IbanResponse.from_iban(Iban(value, registry))
