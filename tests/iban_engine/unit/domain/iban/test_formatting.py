"""Unit tests for electronic and spaced renderings."""

import pytest

from iban_engine.domain.iban import format_electronic, format_spaced


class TestFormatElectronic:
    """Test the separator-free rendering."""

    def test_removes_spaces_and_uppercases(self):
        """Spaces should be removed and letters uppercased."""
        assert format_electronic("gb82 west 1234 5698 7654 32") == (
            "GB82WEST12345698765432"
        )

    def test_already_electronic(self):
        """Electronic input should be unchanged."""
        assert format_electronic("DE89370400440532013000") == "DE89370400440532013000"


class TestFormatSpaced:
    """Test the groups-of-four rendering."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("AD1200012030200359100100", "AD12 0001 2030 2003 5910 0100"),
            ("AE070331234567890123456", "AE07 0331 2345 6789 0123 456"),
            ("GB82WEST12345698765432", "GB82 WEST 1234 5698 7654 32"),
            ("NO9386011117947", "NO93 8601 1117 947"),
        ],
    )
    def test_groups_of_four(self, value, expected):
        """Last group may be shorter than four."""
        assert format_spaced(value) == expected

    def test_regroups_spaced_input(self):
        """Irregular spacing should be normalized."""
        assert format_spaced("GB 82WE ST12 345698765432") == (
            "GB82 WEST 1234 5698 7654 32"
        )

    def test_no_trailing_separator(self):
        """Lengths divisible by four should not end with a space."""
        assert format_spaced("AA110011123Z5678") == "AA11 0011 123Z 5678"

    def test_empty(self):
        """Empty input renders as empty."""
        assert format_spaced("") == ""
