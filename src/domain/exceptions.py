"""
Domain error taxonomy for stock analysis.
Entrypoints translate these into HTTP-style responses; nothing here knows
about status codes.
"""

from typing import Optional


class StockAdvisorError(Exception):
    """Base class for every expected analysis failure."""

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.details = details


class InvalidInputError(StockAdvisorError, ValueError):
    """Missing/blank symbol or malformed request shape. User-correctable."""


class ConfigurationError(StockAdvisorError):
    """A required setting (e.g. the provider API key) is missing or invalid."""


class ProviderUnavailableError(StockAdvisorError):
    """The market-data provider could not be reached or returned garbage."""


class DataNotFoundError(StockAdvisorError):
    """The provider answered but carried no daily series for the symbol."""


class InsufficientHistoryError(StockAdvisorError):
    """Fewer than two daily bars are available; no trend can be computed."""
