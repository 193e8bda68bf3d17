"""
Translation of domain exceptions into ``(status, {"error", "details"?})`` pairs.
Shared by every entrypoint so the HTTP and AgentCore surfaces agree.
"""

import logging

from src.domain.exceptions import (
    ConfigurationError,
    DataNotFoundError,
    InsufficientHistoryError,
    InvalidInputError,
    ProviderUnavailableError,
)

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = (
    'Invalid input. Provide agentName="stockAdvisor", stockSymbol, and userPrompt.'
)
NOT_FOUND_MESSAGE = (
    "Stock data not found for the symbol. Please check the symbol and try again."
)

# Ordered: the first matching class wins.
ERROR_TABLE: list[tuple[type[Exception], int, str]] = [
    (InvalidInputError, 400, INVALID_INPUT_MESSAGE),
    (DataNotFoundError, 404, NOT_FOUND_MESSAGE),
    (ProviderUnavailableError, 404, NOT_FOUND_MESSAGE),
    (InsufficientHistoryError, 422, "Not enough price history to analyze this symbol."),
    (ConfigurationError, 500, "Alpha Vantage API key not configured"),
]

# Every status an entrypoint can answer with an error body.
ERROR_STATUSES: tuple[int, ...] = tuple(sorted({status for _, status, _ in ERROR_TABLE} | {500}))


def error_response(exc: Exception) -> tuple[int, dict]:
    """Map *exc* to a status code and a JSON-ready error body."""
    for error_type, status, message in ERROR_TABLE:
        if isinstance(exc, error_type):
            body = {"error": message}
            details = getattr(exc, "details", None) or str(exc)
            if details:
                body["details"] = details
            return status, body

    logger.exception("Unexpected failure while analyzing stock", exc_info=exc)
    return 500, {"error": "Failed to fetch stock data", "details": str(exc) or "Unknown error"}
