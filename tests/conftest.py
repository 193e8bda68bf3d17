"""Pytest configuration and fixtures for all tests."""

from unittest.mock import AsyncMock

import pytest
from langchain_core.messages import AIMessage

from tests.factories import SCENARIO_CLOSES, build_payload


@pytest.fixture
def scenario_payload():
    """Seven daily bars ending 2024-01-05 with closes 105, 100, 98, ..., 94."""
    return build_payload(SCENARIO_CLOSES, highs=["106.5000"] + ["110"] * 6)


@pytest.fixture
def mock_provider(scenario_payload):
    """Market-data provider returning the scenario payload."""
    provider = AsyncMock()
    provider.fetch_daily_series.return_value = scenario_payload
    return provider


@pytest.fixture
def mock_llm():
    """Language model replying with a fixed commentary."""
    llm = AsyncMock()
    llm.ainvoke.return_value = AIMessage(content="  Momentum looks constructive.  ")
    return llm
