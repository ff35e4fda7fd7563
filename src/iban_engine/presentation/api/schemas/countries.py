"""Country registry schemas for API responses."""

from pydantic import BaseModel, ConfigDict, Field

from iban_engine.domain.registry import CountryInfo, Span


class SpanResponse(BaseModel):
    """Position of a field inside the BBAN."""

    offset: int = Field(..., ge=0)
    length: int = Field(..., gt=0)

    @classmethod
    def from_span(cls, span: Span | None) -> "SpanResponse | None":
        if span is None:
            return None
        return cls(offset=span.offset, length=span.length)


class CountryResponse(BaseModel):
    """IBAN structure of one country."""

    country_code: str
    country_name: str
    iban_length: int
    bban_length: int
    iban_format: str = Field(..., description="SWIFT notation, e.g. GB2!n4!a6!n8!n")
    bank_identifier: SpanResponse | None = None
    branch_identifier: SpanResponse | None = None
    checksum: SpanResponse | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "country_code": "GB",
                "country_name": "United Kingdom",
                "iban_length": 22,
                "bban_length": 18,
                "iban_format": "GB2!n4!a6!n8!n",
                "bank_identifier": {"offset": 0, "length": 4},
                "branch_identifier": {"offset": 4, "length": 6},
                "checksum": None,
            },
        },
    )

    @classmethod
    def from_country_info(cls, info: CountryInfo) -> "CountryResponse":
        return cls(
            country_code=info.country_code,
            country_name=info.country_name,
            iban_length=info.iban_length,
            bban_length=info.bban_length,
            iban_format=info.iban_format,
            bank_identifier=SpanResponse.from_span(info.bank_identifier_span),
            branch_identifier=SpanResponse.from_span(info.branch_identifier_span),
            checksum=SpanResponse.from_span(info.checksum_span),
        )


class CountryListResponse(BaseModel):
    """All registered countries."""

    countries: list[CountryResponse]
    total: int
