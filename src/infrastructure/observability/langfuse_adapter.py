"""
Infrastructure adapter: Langfuse → IObservabilityHandler.

Langfuse reads LANGFUSE_* from the environment when its client is first built,
so the SDK is imported inside the methods and load_settings() (which may pull
those values from Secrets Manager) must run before this adapter is constructed.
"""

from src.domain.ports.observability_port import IObservabilityHandler


class LangfuseObservabilityHandler(IObservabilityHandler):
    """Traces narrative calls through the Langfuse LangChain CallbackHandler."""

    def __init__(self, service_tag: str = "stock-advisor") -> None:
        from langfuse.langchain import CallbackHandler
        self._handler = CallbackHandler()
        self._service_tag = service_tag

    def run_config(self, run_name: str, tags: list[str]) -> dict:
        return {
            "run_name": run_name,
            "callbacks": [self._handler],
            "metadata": {"langfuse_tags": [self._service_tag, *tags]},
        }

    def flush(self) -> None:
        """Push buffered traces to Langfuse; called on application shutdown."""
        from langfuse import get_client
        get_client().flush()
