"""
Application service: best-effort market commentary for a computed analysis.

The language model is optional to the analysis. A single attempt is made; any
failure (exception, timeout, empty or non-text reply) is logged and returned as
NarrativeResult.unavailable(); nothing is raised to the caller.
"""

import asyncio
import logging
from typing import Optional

from langchain_core.messages import HumanMessage, SystemMessage

from src.application.narrative.prompts import ANALYSIS_PROMPT, INVESTOR_QUESTION, SYSTEM_PROMPT
from src.domain.entities.analysis import AnalysisMetrics, NarrativeResult
from src.domain.ports.llm_port import ILanguageModel
from src.domain.ports.observability_port import IObservabilityHandler
from src.domain.services.trend_analysis import format_price

logger = logging.getLogger(__name__)


class NarrativeGenerator:
    def __init__(
        self,
        llm: ILanguageModel,
        observability: Optional[IObservabilityHandler] = None,
        timeout_seconds: float = 30.0,
        currency_symbol: str = "₹",
    ) -> None:
        self._llm = llm
        self._observability = observability
        self._timeout = timeout_seconds
        self._currency = currency_symbol

    def build_prompt(self, metrics: AnalysisMetrics, question: Optional[str] = None) -> str:
        prompt = ANALYSIS_PROMPT.format(
            symbol=metrics.symbol,
            currency=self._currency,
            current_price=format_price(metrics.current_price),
            previous_price=format_price(metrics.previous_price),
            average_7day_close=metrics.average_7day_close_display,
            trend=metrics.trend.label,
            highest_today=format_price(metrics.highest_today),
        )
        if question and question.strip():
            prompt += INVESTOR_QUESTION.format(question=question.strip())
        return prompt

    async def describe(
        self,
        metrics: AnalysisMetrics,
        question: Optional[str] = None,
    ) -> NarrativeResult:
        try:
            messages = [
                SystemMessage(content=SYSTEM_PROMPT),
                HumanMessage(content=self.build_prompt(metrics, question)),
            ]
            config = None
            if self._observability is not None:
                # Tracing failures degrade the narrative, never the analysis.
                config = self._observability.run_config("stock-narrative", [metrics.symbol])
            response = await asyncio.wait_for(
                self._llm.ainvoke(messages, config=config),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Narrative generation for %s timed out after %ss", metrics.symbol, self._timeout
            )
            return NarrativeResult.unavailable(f"timed out after {self._timeout}s")
        except Exception as exc:
            logger.warning("Narrative generation for %s failed: %s", metrics.symbol, exc)
            return NarrativeResult.unavailable(f"{type(exc).__name__}: {exc}")

        content = getattr(response, "content", None)
        if not isinstance(content, str) or not content.strip():
            logger.warning("Narrative generation for %s returned no text", metrics.symbol)
            return NarrativeResult.unavailable("empty or malformed model response")
        return NarrativeResult.success(content.strip())
