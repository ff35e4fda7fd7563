"""Registry domain exceptions."""

from iban_engine.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class InvalidCountryInfoError(ValueError):
    """Raised when a registry entry violates its structural invariants."""


class CountryNotFoundError(EntityNotFoundError):
    """Raised when a country code has no registry entry."""

    def __init__(self, country_code: str) -> None:
        self.country_code = country_code
        super().__init__(
            f"No IBAN structure registered for country: {country_code}",
            code=ErrorCode.COUNTRY_NOT_FOUND,
            details={"country_code": country_code},
        )
