"""IBAN registry loader - builds the CountryRegistry from a registry file."""

from __future__ import annotations

import csv
import logging
from functools import lru_cache
from importlib import resources
from io import StringIO
from pathlib import Path

from iban_config import get_settings
from iban_engine.domain.registry import (
    IBAN_PREFIX_LENGTH,
    CountryInfo,
    CountryRegistry,
    InvalidCountryInfoError,
    Span,
)
from iban_engine.infrastructure.registry.exceptions import (
    RegistryFileNotFoundError,
    RegistryParseError,
)
from iban_engine.infrastructure.registry.swift_format import compile_swift_format

logger = logging.getLogger(__name__)

DELIMITER = "|"

# Column names (header row of the registry file)
COL_COUNTRY_CODE = "country_code"
COL_COUNTRY_NAME = "country_name"
COL_IBAN_FORMAT = "iban_format_swift"
COL_IBAN_LENGTH = "iban_length"
COL_BANK_START = "bban_bankid_start_offset"
COL_BANK_STOP = "bban_bankid_stop_offset"
COL_BRANCH_START = "bban_branchid_start_offset"
COL_BRANCH_STOP = "bban_branchid_stop_offset"
COL_CHECKSUM_START = "bban_checksum_start_offset"
COL_CHECKSUM_STOP = "bban_checksum_stop_offset"

REQUIRED_COLUMNS = (
    COL_COUNTRY_CODE,
    COL_IBAN_FORMAT,
    COL_IBAN_LENGTH,
    COL_BANK_START,
    COL_BANK_STOP,
    COL_BRANCH_START,
    COL_BRANCH_STOP,
    COL_CHECKSUM_START,
    COL_CHECKSUM_STOP,
)


def bundled_registry_text() -> str:
    """Return the registry file shipped with the package."""
    data = resources.files("iban_engine.infrastructure.registry") / "data"
    return (data / "registry.txt").read_text(encoding="utf-8")


def load_registry(path: Path | None = None) -> CountryRegistry:
    """Load a registry from ``path``, or the bundled registry if None.

    Raises
    ------
    RegistryFileNotFoundError
        If ``path`` does not exist.
    RegistryParseError
        If the file has no usable entries.
    """
    if path is None:
        registry = load_registry_from_text(bundled_registry_text())
        logger.info("Loaded %d IBAN countries from bundled registry", len(registry))
        return registry

    path = Path(path)
    if not path.exists():
        msg = f"Registry file not found: {path}"
        raise RegistryFileNotFoundError(msg)

    registry = load_registry_from_text(path.read_text(encoding="utf-8"))
    logger.info("Loaded %d IBAN countries from %s", len(registry), path)
    return registry


def load_registry_from_text(text: str) -> CountryRegistry:
    """Parse pipe-delimited registry content into a CountryRegistry.

    Rows that fail to parse are logged and skipped; the remaining rows
    must yield at least one country.
    """
    reader = csv.DictReader(StringIO(text), delimiter=DELIMITER)
    if reader.fieldnames is None:
        msg = "Registry file is empty"
        raise RegistryParseError(msg)

    missing = [col for col in REQUIRED_COLUMNS if col not in reader.fieldnames]
    if missing:
        msg = f"Registry file is missing columns: {', '.join(missing)}"
        raise RegistryParseError(msg)

    countries: dict[str, CountryInfo] = {}
    for row_num, row in enumerate(reader, start=2):
        try:
            info = parse_registry_row(row)
        except RegistryParseError as e:
            logger.warning("Skipping registry row %d: %s", row_num, e)
            continue

        if info.country_code in countries:
            logger.warning(
                "Skipping registry row %d: duplicate country %s",
                row_num,
                info.country_code,
            )
            continue
        countries[info.country_code] = info

    if not countries:
        msg = "No valid country entries found in registry"
        raise RegistryParseError(msg)

    return CountryRegistry(countries.values())


def parse_registry_row(row: dict[str, str | None]) -> CountryInfo:
    """Build a CountryInfo from one registry row.

    Stop offsets in the registry are inclusive; empty offsets mean the
    country declares no such field.
    """
    country_code = _cell(row, COL_COUNTRY_CODE)
    iban_format = _cell(row, COL_IBAN_FORMAT)

    try:
        bban_pattern = compile_swift_format(iban_format, country_code)
        iban_length = int(_cell(row, COL_IBAN_LENGTH))
        return CountryInfo(
            country_code=country_code,
            bban_length=iban_length - IBAN_PREFIX_LENGTH,
            bban_pattern=bban_pattern,
            bank_identifier_span=_span(row, COL_BANK_START, COL_BANK_STOP),
            branch_identifier_span=_span(row, COL_BRANCH_START, COL_BRANCH_STOP),
            checksum_span=_span(row, COL_CHECKSUM_START, COL_CHECKSUM_STOP),
            country_name=_cell(row, COL_COUNTRY_NAME),
        )
    except (InvalidCountryInfoError, ValueError) as e:
        msg = f"Invalid entry for {country_code or '<missing>'}: {e}"
        raise RegistryParseError(msg) from e


def _cell(row: dict[str, str | None], column: str) -> str:
    return (row.get(column) or "").strip()


def _span(row: dict[str, str | None], start_col: str, stop_col: str) -> Span | None:
    start = _cell(row, start_col)
    stop = _cell(row, stop_col)
    if not start and not stop:
        return None
    if not start or not stop:
        msg = f"{start_col} and {stop_col} must both be set or both be empty"
        raise RegistryParseError(msg)
    return Span.from_offsets(int(start), int(stop))


# ═══════════════════════════════════════════════════════════════
#           Module-Level Accessors and Caching
# ═══════════════════════════════════════════════════════════════


@lru_cache(maxsize=1)
def get_default_registry() -> CountryRegistry:
    """Return the process-wide registry.

    Loaded once from ``REGISTRY_FILE`` when configured, otherwise from
    the bundled registry, and reused for the rest of the process.
    """
    return load_registry(get_settings().registry_file)


def clear_default_registry_cache() -> None:
    """Force the next ``get_default_registry`` call to reload (for tests)."""
    get_default_registry.cache_clear()
