"""Momentum as rate of change (ROC)"""

from decimal import Decimal
from typing import Sequence

from ..data.models import PriceRecord
from ..errors import DegenerateComputationError
from ..models.prediction import PredictionMode, PredictionResult, Trend
from .base import PredictionStrategy, to_decimal

LOOKBACK_PERIODS = 5


def calculate_roc(current: Decimal, past: Decimal) -> Decimal:
    """
    Calculate rate of change as a percentage

    ROC = (current / past - 1) * 100

    Args:
        current: Price at the evaluated position
        past: Comparison price LOOKBACK_PERIODS positions away

    Returns:
        ROC percentage

    Raises:
        DegenerateComputationError: If either price is not finite or the comparison price is zero
    """
    if not (current.is_finite() and past.is_finite()) or past == 0:
        raise DegenerateComputationError(
            "Cannot compute rate of change from a zero or non-finite price",
            metric_name="roc",
            calculation_input={"current": str(current), "past": str(past)}
        )

    return (current / past - 1) * 100


class MomentumStrategy(PredictionStrategy):
    """
    Rate of change over a 5-position lookback.

    Positions count from the most recent record. The first LOOKBACK_PERIODS
    positions have no comparator; the trend comes from the ROC at the last
    (oldest) position only.
    """

    mode = PredictionMode.MOMENTUM

    def compute(self, series: Sequence[PriceRecord]) -> PredictionResult:
        ordered = self._ordered_most_recent_first(series)
        prices = [to_decimal(record.value) for record in ordered]

        trace = []
        roc = None
        for i, price in enumerate(prices):
            if i < LOOKBACK_PERIODS:
                trace.append(f"Period {i + 1}: price = {self._fmt(price)} -> momentum not available")
                continue

            past = prices[i - LOOKBACK_PERIODS]
            roc = calculate_roc(price, past)
            trace.append(
                f"Period {i + 1}: price = {self._fmt(price)}, "
                f"price at period {i - LOOKBACK_PERIODS + 1} = {self._fmt(past)}, "
                f"ROC = {self._fmt(roc)}%"
            )

        # roc now holds the value at the oldest position
        trend = Trend.BULLISH if roc > 0 else Trend.BEARISH

        return PredictionResult(
            mode_name=self.display_name,
            trend=trend,
            summary=f"Final momentum (ROC): {self._fmt(roc)}%",
            calculation_trace=tuple(trace),
        )
