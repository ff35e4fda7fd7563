"""Registry data source exceptions."""


class RegistryError(Exception):
    """Base exception for registry data source errors."""


class RegistryFileNotFoundError(RegistryError):
    """Raised when the registry file cannot be found."""


class RegistryParseError(RegistryError):
    """Raised when the registry file or a format string cannot be parsed."""
