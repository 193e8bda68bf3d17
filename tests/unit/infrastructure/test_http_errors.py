"""Unit tests for exception → response mapping."""

import pytest

from src.domain.exceptions import (
    ConfigurationError,
    DataNotFoundError,
    InsufficientHistoryError,
    InvalidInputError,
    ProviderUnavailableError,
)
from src.infrastructure.entrypoints.http_errors import NOT_FOUND_MESSAGE, error_response


@pytest.mark.parametrize(
    "exc,status",
    [
        (InvalidInputError("blank symbol"), 400),
        (DataNotFoundError("no series"), 404),
        (ProviderUnavailableError("timeout"), 404),
        (InsufficientHistoryError("one bar"), 422),
        (ConfigurationError("no key"), 500),
        (RuntimeError("unexpected"), 500),
    ],
)
def test_status_codes(exc, status):
    assert error_response(exc)[0] == status


def test_provider_errors_share_not_found_hint():
    _, body = error_response(ProviderUnavailableError("timeout", details="ReadTimeout"))

    assert body == {"error": NOT_FOUND_MESSAGE, "details": "ReadTimeout"}


def test_details_fall_back_to_message():
    _, body = error_response(InvalidInputError("symbol must be a non-empty string"))

    assert body["details"] == "symbol must be a non-empty string"


def test_unexpected_error_without_message():
    status, body = error_response(RuntimeError())

    assert status == 500
    assert body == {"error": "Failed to fetch stock data", "details": "Unknown error"}
