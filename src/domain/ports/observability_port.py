"""
Port (interface) for tracing language-model calls.
Infrastructure adapters (e.g. LangfuseObservabilityHandler) must implement this interface.
"""

from abc import ABC, abstractmethod


class IObservabilityHandler(ABC):
    @abstractmethod
    def run_config(self, run_name: str, tags: list[str]) -> dict:
        """Return a LangChain run config (callbacks + metadata) that traces one call."""
        ...

    @abstractmethod
    def flush(self) -> None:
        """Flush any buffered telemetry data to the remote backend."""
        ...
