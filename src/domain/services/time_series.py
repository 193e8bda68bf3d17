"""
Domain service: turn a provider's raw daily-series payload into an OrderedSeries.
Pure transformation with no I/O.

Alpha Vantage returns every number as text and gives no ordering guarantee for
the date keys, so each field is parsed explicitly and the dates are sorted here.
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from src.domain.entities.stock_price import DailyBar, OrderedSeries
from src.domain.exceptions import DataNotFoundError, InsufficientHistoryError

logger = logging.getLogger(__name__)

DAILY_SERIES_KEY = "Time Series (Daily)"
OPEN_KEY = "1. open"
HIGH_KEY = "2. high"
LOW_KEY = "3. low"
CLOSE_KEY = "4. close"
VOLUME_KEY = "5. volume"

# Keys Alpha Vantage uses to explain why no series was returned.
DIAGNOSTIC_KEYS = ("Error Message", "Note", "Information")

MIN_BARS = 2


def normalize(payload: Mapping[str, Any], symbol: str) -> OrderedSeries:
    """Parse the provider payload for *symbol* into bars, most recent first.

    Raises:
        DataNotFoundError:        if the daily-series key is missing or empty,
                                  a record cannot be parsed, or two keys name
                                  the same date.
        InsufficientHistoryError: if fewer than two bars are present.
    """
    daily = payload.get(DAILY_SERIES_KEY) if isinstance(payload, Mapping) else None
    if not daily or not isinstance(daily, Mapping):
        diagnostic = _provider_diagnostic(payload)
        if diagnostic:
            logger.warning("Provider returned no daily series for %s: %s", symbol, diagnostic)
        raise DataNotFoundError(f"No daily series for symbol {symbol!r}", details=diagnostic)

    bars = sorted(
        (_parse_bar(raw_date, record) for raw_date, record in daily.items()),
        key=lambda bar: bar.date,
        reverse=True,
    )
    for newer, older in zip(bars, bars[1:]):
        if newer.date == older.date:
            raise DataNotFoundError(
                f"Duplicate daily record for {symbol!r}",
                details=f"more than one entry for {newer.date.isoformat()}",
            )
    if len(bars) < MIN_BARS:
        raise InsufficientHistoryError(
            f"Need at least {MIN_BARS} daily bars for {symbol!r}, got {len(bars)}"
        )

    logger.debug("Normalized %d bars for %s (latest %s)", len(bars), symbol, bars[0].date)
    return OrderedSeries(symbol=symbol, bars=tuple(bars))


def _parse_bar(raw_date: str, record: Any) -> DailyBar:
    try:
        return DailyBar(
            date=date.fromisoformat(raw_date),
            open=_parse_price(record[OPEN_KEY]),
            high=_parse_price(record[HIGH_KEY]),
            low=_parse_price(record[LOW_KEY]),
            close=_parse_price(record[CLOSE_KEY]),
            volume=_parse_volume(record[VOLUME_KEY]),
        )
    except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
        raise DataNotFoundError(
            f"Malformed daily record for {raw_date!r}",
            details=f"{type(exc).__name__}: {exc}",
        ) from exc


def _parse_price(raw: str) -> Decimal:
    value = Decimal(raw)
    if not value.is_finite() or value <= 0:
        raise ValueError(f"price must be a positive number, got {raw!r}")
    return value


def _parse_volume(raw: str) -> int:
    volume = int(raw)
    if volume < 0:
        raise ValueError(f"volume must be non-negative, got {raw!r}")
    return volume


def _provider_diagnostic(payload: Any) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    for key in DIAGNOSTIC_KEYS:
        if payload.get(key):
            return str(payload[key])
    return None
