"""
Infrastructure adapter: Alpha Vantage TIME_SERIES_DAILY → IStockDataProvider.
All HTTP details (URL, query parameters, timeout, httpx) are confined here;
the rest of the codebase depends only on IStockDataProvider.

The JSON body is returned untouched. Alpha Vantage reports unknown symbols and
rate limiting with HTTP 200 and an explanatory key instead of the series, so
telling "no data" apart is left to the time-series normalizer.
"""

import logging
from typing import Any, Optional

import httpx

from src.domain.exceptions import ConfigurationError, ProviderUnavailableError
from src.domain.ports.stock_data_port import IStockDataProvider

logger = logging.getLogger(__name__)


class AlphaVantageStockDataProvider(IStockDataProvider):
    """Fetches daily OHLCV series from the Alpha Vantage REST API."""

    FUNCTION = "TIME_SERIES_DAILY"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://www.alphavantage.co/query",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            api_key:   Alpha Vantage API key. May be None; fetches then fail with
                       ConfigurationError instead of the app refusing to start.
            base_url:  Query endpoint.
            timeout:   Per-request timeout in seconds.
            transport: Optional httpx transport (tests pass httpx.MockTransport).
        """
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    async def fetch_daily_series(self, symbol: str) -> dict[str, Any]:
        if not self._api_key:
            raise ConfigurationError("Alpha Vantage API key not configured")

        params = {"function": self.FUNCTION, "symbol": symbol, "apikey": self._api_key}
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(self._base_url, params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            # str(exc) embeds the request URL, which carries the API key.
            if isinstance(exc, httpx.HTTPStatusError):
                reason = f"HTTP {exc.response.status_code}"
            else:
                reason = type(exc).__name__
            logger.warning("Alpha Vantage request for %s failed: %s", symbol, reason)
            raise ProviderUnavailableError(
                "Market data provider unavailable", details=reason
            ) from exc
        except ValueError as exc:
            logger.warning("Alpha Vantage returned non-JSON body for %s", symbol)
            raise ProviderUnavailableError(
                "Market data provider returned an unreadable response", details=str(exc)
            ) from exc

        if not isinstance(payload, dict):
            raise ProviderUnavailableError(
                "Market data provider returned an unexpected response",
                details=f"expected a JSON object, got {type(payload).__name__}",
            )
        return payload
