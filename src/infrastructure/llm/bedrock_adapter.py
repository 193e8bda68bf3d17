"""
Infrastructure adapter: Amazon Bedrock (ChatBedrock) → ILanguageModel.
All ChatBedrock / langchain_aws details are confined here.
"""

from typing import Any, Optional

from langchain_aws import ChatBedrock

from src.domain.ports.llm_port import ILanguageModel


class BedrockChatAdapter(ILanguageModel):
    """Wraps ChatBedrock and exposes the ILanguageModel interface."""

    MODEL_ID = "us.amazon.nova-pro-v1:0"

    def __init__(
        self,
        model_id: Optional[str] = None,
        temperature: float = 0.3,
        region: str = "us-east-1",
        _runnable: Any = None,
    ) -> None:
        """
        Args:
            model_id:    Bedrock model or inference-profile id (defaults to MODEL_ID).
            temperature: Sampling temperature for the commentary.
            region:      AWS region hosting the model.
            _runnable:   Optional pre-configured Runnable used instead of
                         constructing ChatBedrock (tests pass a fake here).
        """
        if _runnable is not None:
            self._llm = _runnable
        else:
            self._llm = ChatBedrock(
                model=model_id or self.MODEL_ID,
                model_kwargs={"temperature": temperature},
                region_name=region,
            )

    async def ainvoke(self, messages: list[Any], config: Optional[dict] = None) -> Any:
        return await self._llm.ainvoke(messages, config=config)
