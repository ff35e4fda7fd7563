"""Unit tests for using Iban as a Pydantic field type."""

import pydantic
import pytest
from pydantic import BaseModel

from iban_engine.domain.iban import Iban


class Payee(BaseModel):
    name: str
    iban: Iban


class TestIbanPydanticValidation:
    """Test validation of Iban fields."""

    def test_accepts_string(self):
        """Strings should be parsed into Iban."""
        payee = Payee(name="ACME", iban="gb82 west 1234 5698 7654 32")
        assert isinstance(payee.iban, Iban)
        assert payee.iban.value == "GB82WEST12345698765432"

    def test_accepts_instance(self):
        """Existing Iban instances should pass through."""
        iban = Iban("DE89370400440532013000")
        assert Payee(name="ACME", iban=iban).iban is iban

    def test_rejects_invalid(self):
        """Invalid IBANs should raise a Pydantic ValidationError."""
        with pytest.raises(pydantic.ValidationError, match="checksum"):
            Payee(name="ACME", iban="GB82WEST12345698765433")

    def test_rejects_non_string(self):
        """Non-string values should be rejected."""
        with pytest.raises(pydantic.ValidationError):
            Payee(name="ACME", iban=12345)

    def test_from_json(self):
        """JSON input should be parsed like Python input."""
        payee = Payee.model_validate_json(
            '{"name": "ACME", "iban": "DE89 3704 0044 0532 0130 00"}'
        )
        assert payee.iban == Iban("DE89370400440532013000")


class TestIbanPydanticSerialization:
    """Test serialization of Iban fields."""

    def test_model_dump(self):
        """Dumps should emit the electronic format."""
        payee = Payee(name="ACME", iban="GB82 WEST 1234 5698 7654 32")
        assert payee.model_dump() == {
            "name": "ACME",
            "iban": "GB82WEST12345698765432",
        }

    def test_model_dump_json(self):
        """JSON dumps should emit a plain string."""
        payee = Payee(name="ACME", iban="GB82WEST12345698765432")
        assert payee.model_dump_json() == (
            '{"name":"ACME","iban":"GB82WEST12345698765432"}'
        )

    def test_json_schema_is_string(self):
        """The JSON schema should describe a string."""
        schema = Payee.model_json_schema()
        assert schema["properties"]["iban"]["type"] == "string"
