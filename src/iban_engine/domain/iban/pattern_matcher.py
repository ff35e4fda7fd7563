"""Fixed-width BBAN pattern matching."""

from collections.abc import Sequence

from iban_engine.domain.registry import PatternRun


def matches(value: str, pattern: Sequence[PatternRun]) -> bool:
    """Check ``value`` against a concatenation of typed runs.

    Each run consumes exactly ``run.length`` characters, all of which must
    belong to the run's class. The whole input must be consumed: shorter
    or longer input never matches. ``value`` must already be uppercase.
    """
    if len(value) != sum(run.length for run in pattern):
        return False

    position = 0
    for run in pattern:
        chunk = value[position : position + run.length]
        if not all(run.character_type.accepts(char) for char in chunk):
            return False
        position += run.length
    return True
