"""Electronic and spaced IBAN renderings."""

GROUP_SIZE = 4
SEPARATOR = " "


def format_electronic(value: str) -> str:
    """Render without separators, e.g. ``GB82WEST12345698765432``."""
    return value.replace(SEPARATOR, "").upper()


def format_spaced(value: str) -> str:
    """Render in groups of four, e.g. ``GB82 WEST 1234 5698 7654 32``."""
    electronic = format_electronic(value)
    return SEPARATOR.join(
        electronic[i : i + GROUP_SIZE] for i in range(0, len(electronic), GROUP_SIZE)
    )
