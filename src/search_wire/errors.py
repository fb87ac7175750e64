"""Project-specific exceptions for search-wire."""


class SearchWireError(Exception):
    """Base exception for the project."""


class InvalidArgumentError(ValueError, SearchWireError):
    """Raised when a request option is given a value the engine rejects."""


class ProtocolError(ValueError, SearchWireError):
    """Raised when a reply does not have the shape implied by its request."""


class MissingOptionalDependencyError(ImportError, SearchWireError):
    """Raised when an optional dependency is not installed."""


class MissingConnectionUrlError(ValueError, SearchWireError):
    """Raised when no connection URL is supplied and no client is injected."""

    def __init__(self) -> None:
        """Build exception payload for missing connection URLs."""
        super().__init__("Connection URL is required when no client instance is provided.")


class InvalidDialectError(InvalidArgumentError):
    """Raised when a query dialect is set to zero."""

    def __init__(self, dialect: int) -> None:
        """Build exception payload for invalid dialect values."""
        super().__init__(f"DIALECT={dialect} cannot be set; use an unset dialect or a value >= 1.")


class UnsupportedGeoUnitError(InvalidArgumentError):
    """Raised when a geo filter is given an unknown distance unit."""

    def __init__(self, unit: str, supported: str) -> None:
        """Build exception payload for unsupported geo units."""
        super().__init__(f"Unsupported geo unit '{unit}'. Supported values: {supported}.")
