"""Simple moving average crossover"""

from decimal import Decimal
from typing import Sequence

from ..data.models import PriceRecord
from ..models.prediction import PredictionMode, PredictionResult, Trend
from .base import PredictionStrategy, to_decimal

SHORT_WINDOW = 5
LONG_WINDOW = 20


def calculate_sma(values: Sequence[Decimal]) -> Decimal:
    """
    Calculate the arithmetic mean of a window of prices

    Args:
        values: Prices in the window (must not be empty)

    Returns:
        Mean price
    """
    return sum(values, Decimal(0)) / len(values)


class MovingAverageCrossoverStrategy(PredictionStrategy):
    """Compares the 5-period SMA of the most recent prices with the 20-period SMA"""

    mode = PredictionMode.SMA_CROSSOVER

    def compute(self, series: Sequence[PriceRecord]) -> PredictionResult:
        ordered = self._ordered_most_recent_first(series)
        values = [to_decimal(record.value) for record in ordered]

        short_sma = calculate_sma(values[:SHORT_WINDOW])
        long_sma = calculate_sma(values[:LONG_WINDOW])

        # Ties are bearish
        trend = Trend.BULLISH if short_sma > long_sma else Trend.BEARISH

        if short_sma > long_sma:
            comparison = ">"
        elif short_sma == long_sma:
            comparison = "="
        else:
            comparison = "<"

        return PredictionResult(
            mode_name=self.display_name,
            trend=trend,
            summary=(
                f"Short SMA ({SHORT_WINDOW}): {self._fmt(short_sma)} | "
                f"Long SMA ({LONG_WINDOW}): {self._fmt(long_sma)}"
            ),
            calculation_trace=(
                f"Short SMA ({SHORT_WINDOW} periods): {self._fmt(short_sma)}",
                f"Long SMA ({LONG_WINDOW} periods): {self._fmt(long_sma)}",
                f"Comparison: short SMA {comparison} long SMA",
                f"Conclusion: {trend.value} trend",
            ),
        )
