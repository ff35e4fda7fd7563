"""IBAN schemas for API request/response models."""

from pydantic import BaseModel, ConfigDict, Field

from iban_engine.domain.iban import Iban


class BbanResponse(BaseModel):
    """BBAN sub-fields as declared by the country's registry entry."""

    value: str = Field(..., description="Full BBAN")
    bank_identifier: str | None = Field(
        default=None,
        description="Bank identifier (None if the country declares none)",
    )
    branch_identifier: str | None = Field(
        default=None,
        description="Branch identifier (None if the country declares none)",
    )
    checksum: str | None = Field(
        default=None,
        description="National check digits, extracted but not verified",
    )


class IbanResponse(BaseModel):
    """Response schema for a parsed IBAN."""

    iban: Iban = Field(..., description="IBAN in electronic format")
    spaced: str = Field(..., description="IBAN in groups of four characters")
    country_code: str = Field(..., min_length=2, max_length=2)
    check_digits: str = Field(..., min_length=2, max_length=2)
    bban: BbanResponse

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "iban": "GB82WEST12345698765432",
                "spaced": "GB82 WEST 1234 5698 7654 32",
                "country_code": "GB",
                "check_digits": "82",
                "bban": {
                    "value": "WEST12345698765432",
                    "bank_identifier": "WEST",
                    "branch_identifier": "123456",
                    "checksum": None,
                },
            },
        },
    )

    @classmethod
    def from_iban(cls, iban: Iban) -> "IbanResponse":
        view = iban.bban_view
        return cls(
            iban=iban,
            spaced=iban.spaced,
            country_code=iban.country_code,
            check_digits=iban.check_digits,
            bban=BbanResponse(
                value=view.value,
                bank_identifier=view.bank_identifier,
                branch_identifier=view.branch_identifier,
                checksum=view.checksum,
            ),
        )


class IbanValidateRequest(BaseModel):
    """Request schema for validating an IBAN without failing the request."""

    iban: str = Field(
        ...,
        description="IBAN, spaces allowed; any length is checked by the parser",
    )


class IbanValidateResponse(BaseModel):
    """Validation outcome; ``code`` names the first failed check."""

    valid: bool
    iban: str | None = Field(
        default=None,
        description="Electronic format, only set when valid",
    )
    code: str | None = Field(default=None, description="Error code if invalid")
    detail: str | None = Field(default=None, description="Error message if invalid")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "valid": False,
                "iban": None,
                "code": "INVALID_CHECKSUM",
                "detail": "IBAN checksum validation failed",
            },
        },
    )


class IbanGenerateRequest(BaseModel):
    """Request schema for generating random test IBANs."""

    country_code: str = Field(..., min_length=2, max_length=2)
    count: int = Field(default=1, ge=1, le=100)


class IbanGenerateResponse(BaseModel):
    """Generated IBANs; all of them pass validation."""

    ibans: list[IbanResponse]
    total: int
