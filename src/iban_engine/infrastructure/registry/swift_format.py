"""Compiler for SWIFT IBAN registry format strings.

The registry describes each IBAN as a country code followed by typed
fixed-width runs, e.g. ``GB2!n4!a6!n8!n``. Only the BBAN part (after the
``2!n`` check digits) becomes the country's pattern.
"""

import re

from iban_engine.domain.registry import CharacterType, PatternRun
from iban_engine.infrastructure.registry.exceptions import RegistryParseError

# Fixed-length runs only; variable-length "4n" runs do not occur in IBAN formats
_RUN_PATTERN = re.compile(r"(\d+)!([anci])")
_FORMAT_PATTERN = re.compile(r"^([A-Z]{2})2!n((?:\d+![anci])+)$")


def compile_swift_format(
    iban_format: str,
    country_code: str | None = None,
) -> tuple[PatternRun, ...]:
    """Compile an IBAN format string into the BBAN pattern runs.

    Parameters
    ----------
    iban_format
        Full IBAN format as published in the registry (``DE2!n8!n10!n``).
    country_code
        If given, the format's leading country code must match it.

    Returns
    -------
    Tuple of PatternRun covering the BBAN only.

    Raises
    ------
    RegistryParseError
        If the format is malformed or its country code does not match.
    """
    match = _FORMAT_PATTERN.match(iban_format.strip())
    if match is None:
        msg = f"Malformed IBAN format: {iban_format!r}"
        raise RegistryParseError(msg)

    prefix, bban_format = match.groups()
    if country_code is not None and prefix != country_code:
        msg = f"IBAN format {iban_format!r} does not start with {country_code}"
        raise RegistryParseError(msg)

    return tuple(
        PatternRun(CharacterType.from_swift(symbol), int(length))
        for length, symbol in _RUN_PATTERN.findall(bban_format)
    )
