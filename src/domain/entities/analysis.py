"""
Domain entities for a single stock analysis.
Zero external dependencies: pure Python dataclasses and enums only.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Optional


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"

    @property
    def label(self) -> str:
        return "uptrend 📈" if self is Trend.UP else "downtrend 📉"


class Suggestion(str, Enum):
    BUY = "buy"
    HOLD_OR_SELL = "hold_or_sell"

    @property
    def label(self) -> str:
        return "Buy" if self is Suggestion.BUY else "Wait or Sell"


@dataclass(frozen=True)
class AnalysisMetrics:
    symbol: str
    current_price: Decimal
    previous_price: Decimal
    highest_today: Decimal
    trend: Trend
    suggestion: Suggestion
    average_7day_close: Decimal
    ideal_buy_below_price: Decimal
    estimated_target_price: Decimal

    @property
    def average_7day_close_display(self) -> str:
        """The 7-day average rounded to cents, e.g. ``"97.86"``."""
        return str(self.average_7day_close.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class NarrativeResult:
    """Outcome of the best-effort narrative call.

    Either ``text`` is set (narrative available) or ``failure_reason`` says
    why it is not.
    """

    text: Optional[str] = None
    failure_reason: Optional[str] = None

    @property
    def available(self) -> bool:
        return self.text is not None

    @classmethod
    def success(cls, text: str) -> "NarrativeResult":
        return cls(text=text)

    @classmethod
    def unavailable(cls, reason: str) -> "NarrativeResult":
        return cls(failure_reason=reason)


@dataclass(frozen=True)
class AnalysisResult:
    metrics: AnalysisMetrics
    message: str
    narrative: Optional[str] = None
