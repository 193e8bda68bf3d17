"""
Domain entities for daily stock price data.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class DailyBar:
    date: date
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: int


@dataclass(frozen=True)
class OrderedSeries:
    """Daily bars for one symbol, most recent first.

    The constructor rejects bars that are not strictly descending by date,
    which also rules out duplicate dates.
    """

    symbol: str
    bars: tuple[DailyBar, ...]

    def __post_init__(self) -> None:
        for newer, older in zip(self.bars, self.bars[1:]):
            if newer.date <= older.date:
                raise ValueError(
                    f"bars must be strictly descending by date: "
                    f"{newer.date.isoformat()} precedes {older.date.isoformat()}"
                )

    def __len__(self) -> int:
        return len(self.bars)

    @property
    def latest(self) -> DailyBar:
        return self.bars[0]

    def most_recent(self, count: int) -> tuple[DailyBar, ...]:
        return self.bars[:count]
