"""
Use-case: analyze one stock symbol end to end.
Depends only on Domain ports, entities and services, no infrastructure imports.

Steps, each run at most once per request:
  validate → fetch series → normalize → compute → narrate → assemble.
The first failure before narration aborts the request; narration never does.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from src.application.services.narrative_generator import NarrativeGenerator
from src.domain.entities.analysis import AnalysisMetrics, AnalysisResult
from src.domain.exceptions import InvalidInputError
from src.domain.ports.stock_data_port import IStockDataProvider
from src.domain.services.time_series import normalize
from src.domain.services.trend_analysis import analyze, format_price

logger = logging.getLogger(__name__)

AGENT_NAME = "stockAdvisor"

MESSAGE_TEMPLATE = (
    "Stock {symbol} is in {trend}. Recommendation: {suggestion}. "
    "Ideal Buy Below: {currency}{buy_below}, Target: {currency}{target}, "
    "Today's High: {currency}{high}"
)


def _clean_symbol(symbol: Any) -> str:
    if not isinstance(symbol, str) or not symbol.strip():
        raise InvalidInputError("symbol must be a non-empty string")
    return symbol.upper().strip()


@dataclass(frozen=True)
class AnalysisRequest:
    symbol: str
    user_prompt: str
    agent_name: str = AGENT_NAME

    @classmethod
    def from_payload(cls, payload: Any) -> "AnalysisRequest":
        """Validate an inbound ``{agentName, userPrompt, stockSymbol}`` body.

        Raises:
            InvalidInputError: on a non-object body, a foreign agent name, or a
                               missing prompt or symbol.
        """
        if not isinstance(payload, Mapping):
            raise InvalidInputError("request body must be a JSON object")
        agent_name = payload.get("agentName")
        user_prompt = payload.get("userPrompt")
        if agent_name != AGENT_NAME:
            raise InvalidInputError(f"agentName must be {AGENT_NAME!r}, got {agent_name!r}")
        if not isinstance(user_prompt, str) or not user_prompt.strip():
            raise InvalidInputError("userPrompt must be a non-empty string")
        return cls(symbol=_clean_symbol(payload.get("stockSymbol")), user_prompt=user_prompt)


class AnalyzeStockUseCase:
    def __init__(
        self,
        provider: IStockDataProvider,
        narrator: Optional[NarrativeGenerator] = None,
        currency_symbol: str = "₹",
    ) -> None:
        """
        Args:
            provider:        IStockDataProvider implementation (e.g. Alpha Vantage adapter).
            narrator:        Optional NarrativeGenerator; without one the narrative is absent.
            currency_symbol: Prefix used for prices in the summary message.
        """
        self._provider = provider
        self._narrator = narrator
        self._currency = currency_symbol

    async def execute(self, symbol: str, question: Optional[str] = None) -> AnalysisResult:
        """Run the full analysis for *symbol*.

        Raises:
            InvalidInputError:        if *symbol* is blank (before any network call).
            ConfigurationError:       if the provider credential is missing.
            ProviderUnavailableError: if the provider cannot be reached.
            DataNotFoundError:        if the provider has no daily series for *symbol*.
            InsufficientHistoryError: if fewer than two daily bars are available.
        """
        symbol = _clean_symbol(symbol)
        logger.info("Analyzing %s", symbol)

        payload = await self._provider.fetch_daily_series(symbol)
        series = normalize(payload, symbol)
        metrics = analyze(series)

        narrative = None
        if self._narrator is not None:
            outcome = await self._narrator.describe(metrics, question)
            if outcome.available:
                narrative = outcome.text
            else:
                logger.info("Narrative unavailable for %s: %s", symbol, outcome.failure_reason)

        logger.info(
            "Analysis for %s: trend=%s suggestion=%s bars=%d narrative=%s",
            symbol,
            metrics.trend.value,
            metrics.suggestion.value,
            len(series),
            narrative is not None,
        )
        return AnalysisResult(
            metrics=metrics,
            message=self.build_message(metrics),
            narrative=narrative,
        )

    async def handle(self, request: AnalysisRequest) -> AnalysisResult:
        return await self.execute(request.symbol, question=request.user_prompt)

    def build_message(self, metrics: AnalysisMetrics) -> str:
        return MESSAGE_TEMPLATE.format(
            symbol=metrics.symbol,
            trend=metrics.trend.label,
            suggestion=metrics.suggestion.label,
            currency=self._currency,
            buy_below=metrics.ideal_buy_below_price,
            target=metrics.estimated_target_price,
            high=format_price(metrics.highest_today),
        )
