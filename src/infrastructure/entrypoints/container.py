"""
Composition Root shared by the FastAPI and AgentCore entrypoints.

Wires infrastructure adapters into AnalyzeStockUseCase once per process from
an explicit Settings value; nothing below this module reads the environment.
"""

import logging
from typing import Optional

from src.application.services.narrative_generator import NarrativeGenerator
from src.application.use_cases.analyze_stock import AnalyzeStockUseCase
from src.domain.ports.observability_port import IObservabilityHandler
from src.infrastructure.config import Settings
from src.infrastructure.stock_data.alpha_vantage_adapter import AlphaVantageStockDataProvider

logger = logging.getLogger(__name__)


def build_observability(settings: Settings) -> Optional[IObservabilityHandler]:
    if not settings.langfuse_enabled:
        return None
    from src.infrastructure.observability.langfuse_adapter import LangfuseObservabilityHandler
    return LangfuseObservabilityHandler()


def build_narrator(
    settings: Settings,
    observability: Optional[IObservabilityHandler] = None,
) -> Optional[NarrativeGenerator]:
    if not settings.narrative_enabled:
        logger.info("Narrative generation disabled")
        return None
    from src.infrastructure.llm.bedrock_adapter import BedrockChatAdapter
    llm = BedrockChatAdapter(
        model_id=settings.narrative_model_id,
        temperature=settings.narrative_temperature,
        region=settings.aws_region,
    )
    return NarrativeGenerator(
        llm,
        observability=observability,
        timeout_seconds=settings.narrative_timeout_seconds,
        currency_symbol=settings.currency_symbol,
    )


def build_analyze_use_case(
    settings: Settings,
    observability: Optional[IObservabilityHandler] = None,
) -> AnalyzeStockUseCase:
    if not settings.alpha_vantage_api_key:
        logger.warning("ALPHA_VANTAGE_API_KEY is not set; analysis requests will fail")
    provider = AlphaVantageStockDataProvider(
        api_key=settings.alpha_vantage_api_key,
        base_url=settings.alpha_vantage_base_url,
        timeout=settings.alpha_vantage_timeout_seconds,
    )
    return AnalyzeStockUseCase(
        provider,
        narrator=build_narrator(settings, observability),
        currency_symbol=settings.currency_symbol,
    )
