"""
Domain service: trend, suggestion, 7-day average and buy/target price bands.

Business rules owned here:
  - Trend is "up" only when the latest close is strictly above the prior
    close; an unchanged close counts as "down".
  - The suggestion follows the trend one-to-one.
  - Price bands sit 2% either side of the 7-day average close.
"""

from decimal import ROUND_HALF_UP, Decimal

from src.domain.entities.analysis import AnalysisMetrics, Suggestion, Trend
from src.domain.entities.stock_price import OrderedSeries
from src.domain.exceptions import InsufficientHistoryError

AVERAGE_WINDOW = 7
BUY_BAND_FACTOR = Decimal("0.98")
TARGET_BAND_FACTOR = Decimal("1.02")

_CENT = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    """Round to exactly two decimal places, halves away from zero."""
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def format_price(value: Decimal) -> str:
    """Plain decimal text without trailing zeros: ``106.5000`` → ``"106.5"``."""
    return format(value.normalize(), "f")


def analyze(series: OrderedSeries) -> AnalysisMetrics:
    """Derive the analysis metrics from a series of at least two bars.

    Raises:
        InsufficientHistoryError: if the series holds fewer than two bars.
    """
    if len(series) < 2:
        raise InsufficientHistoryError(
            f"Need at least 2 daily bars for {series.symbol!r}, got {len(series)}"
        )

    latest, previous = series.bars[0], series.bars[1]
    trend = Trend.UP if latest.close > previous.close else Trend.DOWN
    suggestion = Suggestion.BUY if trend is Trend.UP else Suggestion.HOLD_OR_SELL

    window = series.most_recent(AVERAGE_WINDOW)
    average = sum((bar.close for bar in window), Decimal(0)) / len(window)

    return AnalysisMetrics(
        symbol=series.symbol,
        current_price=latest.close,
        previous_price=previous.close,
        highest_today=latest.high,
        trend=trend,
        suggestion=suggestion,
        average_7day_close=average,
        ideal_buy_below_price=round_money(average * BUY_BAND_FACTOR),
        estimated_target_price=round_money(average * TARGET_BAND_FACTOR),
    )
