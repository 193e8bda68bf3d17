"""
Port (interface) for market-data providers.
Infrastructure adapters (e.g. AlphaVantageStockDataProvider) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any


class IStockDataProvider(ABC):
    @abstractmethod
    async def fetch_daily_series(self, symbol: str) -> dict[str, Any]:
        """Return the provider's raw daily-series payload for *symbol*.

        The payload is passed untouched to the time-series normalizer; an
        error or empty payload is returned as-is rather than raised.

        Raises:
            ConfigurationError:       if the provider credential is missing.
            ProviderUnavailableError: on transport failure or a non-JSON reply.
        """
        ...
