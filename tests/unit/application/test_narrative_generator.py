"""Unit tests for the narrative generator."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from src.application.services.narrative_generator import NarrativeGenerator
from src.domain.services.trend_analysis import analyze
from tests.factories import SCENARIO_CLOSES, build_series


@pytest.fixture
def metrics():
    return analyze(build_series(SCENARIO_CLOSES, symbol="RELIANCE.BSE"))


class TestBuildPrompt:
    """Tests for prompt construction."""

    def test_prompt_embeds_metrics(self, mock_llm, metrics):
        prompt = NarrativeGenerator(mock_llm).build_prompt(metrics)

        assert "RELIANCE.BSE" in prompt
        assert "Current Price: ₹105" in prompt
        assert "Previous Close: ₹100" in prompt
        assert "7-day Average: ₹97.86" in prompt
        assert "uptrend" in prompt
        assert "Today's High: ₹106" in prompt
        assert "investor asked" not in prompt

    def test_prompt_uses_configured_currency(self, mock_llm, metrics):
        prompt = NarrativeGenerator(mock_llm, currency_symbol="$").build_prompt(metrics)

        assert "Current Price: $105" in prompt
        assert "₹" not in prompt

    def test_prompt_appends_question(self, mock_llm, metrics):
        prompt = NarrativeGenerator(mock_llm).build_prompt(metrics, "Is this good for a long hold?")

        assert prompt.endswith("The investor asked: Is this good for a long hold?")


class TestDescribe:
    """Tests for describe()."""

    @pytest.mark.asyncio
    async def test_returns_stripped_text(self, mock_llm, metrics):
        result = await NarrativeGenerator(mock_llm).describe(metrics)

        assert result.available
        assert result.text == "Momentum looks constructive."

    @pytest.mark.asyncio
    async def test_sends_system_and_human_messages(self, mock_llm, metrics):
        await NarrativeGenerator(mock_llm).describe(metrics, "Should I buy?")

        messages = mock_llm.ainvoke.call_args.args[0]
        assert isinstance(messages[0], SystemMessage)
        assert isinstance(messages[1], HumanMessage)
        assert "Should I buy?" in messages[1].content
        assert mock_llm.ainvoke.call_args.kwargs["config"] is None

    @pytest.mark.asyncio
    async def test_passes_observability_run_config(self, mock_llm, metrics):
        run_config = {"callbacks": [object()], "run_name": "stock-narrative"}
        observability = MagicMock()
        observability.run_config.return_value = run_config

        await NarrativeGenerator(mock_llm, observability=observability).describe(metrics)

        observability.run_config.assert_called_once_with("stock-narrative", ["RELIANCE.BSE"])
        assert mock_llm.ainvoke.call_args.kwargs["config"] is run_config

    @pytest.mark.asyncio
    async def test_observability_failure_is_unavailable(self, mock_llm, metrics):
        observability = MagicMock()
        observability.run_config.side_effect = RuntimeError("langfuse down")

        result = await NarrativeGenerator(mock_llm, observability=observability).describe(metrics)

        assert not result.available
        assert "langfuse down" in result.failure_reason
        mock_llm.ainvoke.assert_not_called()

    @pytest.mark.asyncio
    async def test_model_exception_is_unavailable(self, metrics):
        llm = AsyncMock()
        llm.ainvoke.side_effect = RuntimeError("ThrottlingException: quota exceeded")

        result = await NarrativeGenerator(llm).describe(metrics)

        assert not result.available
        assert "quota exceeded" in result.failure_reason

    @pytest.mark.asyncio
    async def test_timeout_is_unavailable(self, metrics):
        async def slow_reply(*args, **kwargs):
            await asyncio.sleep(5)

        llm = MagicMock()
        llm.ainvoke = slow_reply

        result = await NarrativeGenerator(llm, timeout_seconds=0.01).describe(metrics)

        assert not result.available
        assert "timed out" in result.failure_reason

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reply", [AIMessage(content="   "), None, object()])
    async def test_empty_or_malformed_reply_is_unavailable(self, reply, metrics):
        llm = AsyncMock()
        llm.ainvoke.return_value = reply

        result = await NarrativeGenerator(llm).describe(metrics)

        assert not result.available
        assert result.failure_reason == "empty or malformed model response"
