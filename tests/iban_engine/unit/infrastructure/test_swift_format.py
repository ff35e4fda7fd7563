"""Unit tests for the SWIFT format compiler."""

import pytest

from iban_engine.domain.registry import CharacterType, PatternRun
from iban_engine.infrastructure.registry import RegistryParseError, compile_swift_format


class TestCompileSwiftFormat:
    """Test compiling registry format strings into BBAN runs."""

    def test_gb(self):
        """Country prefix and check digits are not part of the BBAN pattern."""
        assert compile_swift_format("GB2!n4!a6!n8!n") == (
            PatternRun(CharacterType.ALPHA, 4),
            PatternRun(CharacterType.DIGIT, 6),
            PatternRun(CharacterType.DIGIT, 8),
        )

    def test_multi_digit_lengths(self):
        """Run lengths may have more than one digit."""
        runs = compile_swift_format("LC2!n4!a24!c")
        assert runs[1] == PatternRun(CharacterType.ALPHANUMERIC, 24)

    def test_iiban_symbol(self):
        """The i symbol compiles to alphanumeric."""
        assert compile_swift_format("AA2!n12!i") == (
            PatternRun(CharacterType.ALPHANUMERIC, 12),
        )

    def test_surrounding_whitespace_ignored(self):
        """Cells may carry stray whitespace."""
        assert compile_swift_format("  DE2!n8!n10!n \n") == compile_swift_format(
            "DE2!n8!n10!n"
        )

    def test_country_code_checked(self):
        """The format prefix must match the row's country."""
        assert compile_swift_format("DE2!n8!n10!n", "DE")
        with pytest.raises(RegistryParseError, match="does not start with AT"):
            compile_swift_format("DE2!n8!n10!n", "AT")

    @pytest.mark.parametrize(
        "iban_format",
        [
            "",
            "DE",
            "DE2!n",
            "DE8!n10!n",
            "DE2!n8n10!n",
            "DE2!n8!x",
            "de2!n8!n",
            "DE2!n8!n10!",
        ],
    )
    def test_malformed(self, iban_format):
        """Malformed formats should raise RegistryParseError."""
        with pytest.raises(RegistryParseError, match="Malformed"):
            compile_swift_format(iban_format)
