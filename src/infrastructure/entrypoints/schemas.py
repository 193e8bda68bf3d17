"""
Response schemas for the analysis endpoint (camelCase on the wire).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.analysis import AnalysisResult


class AnalysisResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    stock: str
    current_price: float = Field(alias="currentPrice")
    previous_price: float = Field(alias="previousPrice")
    highest_today: float = Field(alias="highestToday")
    trend: str
    suggestion: str
    average_7day_close: str = Field(alias="average7DayClose")
    ideal_buy_below_price: float = Field(alias="idealBuyBelowPrice")
    estimated_target_price: float = Field(alias="estimatedTargetPrice")
    message: str
    ai_analysis: Optional[str] = Field(default=None, alias="aiAnalysis")

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisResponse":
        metrics = result.metrics
        return cls(
            stock=metrics.symbol,
            current_price=float(metrics.current_price),
            previous_price=float(metrics.previous_price),
            highest_today=float(metrics.highest_today),
            trend=metrics.trend.label,
            suggestion=metrics.suggestion.label,
            average_7day_close=metrics.average_7day_close_display,
            ideal_buy_below_price=float(metrics.ideal_buy_below_price),
            estimated_target_price=float(metrics.estimated_target_price),
            message=result.message,
            ai_analysis=result.narrative,
        )

    def to_payload(self) -> dict:
        """Wire format: camelCase keys, aiAnalysis omitted when absent."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
