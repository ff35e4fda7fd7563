"""Unit tests for BBAN pattern matching."""

from iban_engine.domain.iban import matches
from iban_engine.domain.registry import CharacterType, PatternRun

A = CharacterType.ALPHA
N = CharacterType.DIGIT
C = CharacterType.ALPHANUMERIC

GB_PATTERN = (PatternRun(A, 4), PatternRun(N, 6), PatternRun(N, 8))


class TestMatches:
    """Test fixed-width typed run matching."""

    def test_matching_value(self):
        """A value following every run should match."""
        assert matches("WEST12345698765432", GB_PATTERN)

    def test_wrong_class_in_first_run(self):
        """A digit inside an alphabetic run should not match."""
        assert not matches("W3ST12345698765432", GB_PATTERN)

    def test_wrong_class_in_last_run(self):
        """A letter inside a numeric run should not match."""
        assert not matches("WEST1234569876543X", GB_PATTERN)

    def test_too_short(self):
        """Input shorter than the pattern should not match."""
        assert not matches("WEST1234569876543", GB_PATTERN)

    def test_too_long(self):
        """Input longer than the pattern should not match."""
        assert not matches("WEST123456987654321", GB_PATTERN)

    def test_lowercase_rejected(self):
        """Matching expects normalized (uppercase) input."""
        assert not matches("west12345698765432", GB_PATTERN)

    def test_alphanumeric_run(self):
        """c runs accept letters and digits."""
        pattern = (PatternRun(N, 4), PatternRun(C, 4))
        assert matches("1234A1B2", pattern)
        assert not matches("1234A1B-", pattern)

    def test_empty_value_and_pattern(self):
        """An empty pattern matches only the empty string."""
        assert matches("", ())
        assert not matches("A", ())

    def test_run_boundaries(self):
        """Each run consumes exactly its own length."""
        pattern = (PatternRun(A, 1), PatternRun(N, 2))
        assert matches("A12", pattern)
        assert not matches("AB2", pattern)
        assert not matches("1A2", pattern)
