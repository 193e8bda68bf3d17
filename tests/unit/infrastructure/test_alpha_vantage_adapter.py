"""Unit tests for the Alpha Vantage market-data adapter."""

import httpx
import pytest

from src.domain.exceptions import ConfigurationError, ProviderUnavailableError
from src.infrastructure.entrypoints.http_errors import error_response
from src.infrastructure.stock_data.alpha_vantage_adapter import AlphaVantageStockDataProvider
from tests.factories import build_payload

BASE_URL = "https://www.alphavantage.co/query"


def make_provider(handler, api_key="demo-key"):
    return AlphaVantageStockDataProvider(
        api_key=api_key,
        base_url=BASE_URL,
        timeout=5,
        transport=httpx.MockTransport(handler),
    )


def raise_read_timeout(request):
    raise httpx.ReadTimeout("timed out", request=request)


class TestFetchDailySeries:
    """Tests for AlphaVantageStockDataProvider.fetch_daily_series()."""

    @pytest.mark.asyncio
    async def test_returns_raw_payload_and_sends_query(self):
        payload = build_payload(["105", "100"])
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=payload)

        result = await make_provider(handler).fetch_daily_series("IBM")

        assert result == payload
        params = seen[0].url.params
        assert params["function"] == "TIME_SERIES_DAILY"
        assert params["symbol"] == "IBM"
        assert params["apikey"] == "demo-key"

    @pytest.mark.asyncio
    async def test_error_payload_is_returned_untouched(self):
        body = {"Error Message": "Invalid API call."}

        result = await make_provider(lambda request: httpx.Response(200, json=body)).fetch_daily_series("BADSYM")

        assert result == body

    @pytest.mark.asyncio
    @pytest.mark.parametrize("api_key", [None, ""])
    async def test_missing_api_key_raises_configuration_error(self, api_key):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={})

        with pytest.raises(ConfigurationError):
            await make_provider(handler, api_key=api_key).fetch_daily_series("IBM")

        assert calls == []

    @pytest.mark.asyncio
    async def test_transport_failure_raises_provider_unavailable(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ProviderUnavailableError) as exc_info:
            await make_provider(handler).fetch_daily_series("IBM")

        assert exc_info.value.details == "ConnectError"

    @pytest.mark.asyncio
    async def test_http_error_status_raises_provider_unavailable(self):
        with pytest.raises(ProviderUnavailableError) as exc_info:
            await make_provider(lambda request: httpx.Response(503)).fetch_daily_series("IBM")

        assert exc_info.value.details == "HTTP 503"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "handler",
        [
            lambda request: httpx.Response(503, request=request),
            raise_read_timeout,
        ],
    )
    async def test_api_key_never_reaches_details_or_logs(self, handler, caplog):
        with pytest.raises(ProviderUnavailableError) as exc_info:
            await make_provider(handler, api_key="SECRET-KEY-123").fetch_daily_series("IBM")

        _, body = error_response(exc_info.value)
        assert "SECRET-KEY-123" not in exc_info.value.details
        assert "SECRET-KEY-123" not in str(body)
        assert "SECRET-KEY-123" not in caplog.text

    @pytest.mark.asyncio
    async def test_non_json_body_raises_provider_unavailable(self):
        handler = lambda request: httpx.Response(200, text="<html>maintenance</html>")  # noqa: E731

        with pytest.raises(ProviderUnavailableError):
            await make_provider(handler).fetch_daily_series("IBM")

    @pytest.mark.asyncio
    async def test_non_object_json_raises_provider_unavailable(self):
        with pytest.raises(ProviderUnavailableError):
            await make_provider(lambda request: httpx.Response(200, json=[1, 2])).fetch_daily_series("IBM")
