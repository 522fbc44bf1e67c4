"""Least-squares linear regression extrapolation"""

import math
from dataclasses import replace
from typing import Sequence

from ..data.models import SERIES_LENGTH, PriceRecord
from ..errors import DegenerateComputationError
from ..models.prediction import PredictionMode, PredictionResult, Trend
from .base import PredictionStrategy

# Ordinal index of the extrapolated period
FORECAST_INDEX = SERIES_LENGTH + 1


def fit_linear_regression(points: Sequence[tuple[int, float]]) -> tuple[float, float]:
    """
    Fit value = m * index + b by ordinary least squares

    m = (n*Sxy - Sx*Sy) / (n*Sxx - Sx^2)
    b = (Sy - m*Sx) / n

    Args:
        points: (index, value) pairs

    Returns:
        (slope, intercept)

    Raises:
        DegenerateComputationError: If the denominator is zero or the fit is not finite
    """
    n = len(points)
    if n == 0:
        raise DegenerateComputationError(
            "Cannot fit a regression line without points",
            metric_name="linear_regression",
            calculation_input={"n": 0}
        )

    sum_x = math.fsum(x for x, _ in points)
    sum_y = math.fsum(y for _, y in points)
    sum_xy = math.fsum(x * y for x, y in points)
    sum_x2 = math.fsum(x * x for x, _ in points)

    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        raise DegenerateComputationError(
            "Regression denominator is zero",
            metric_name="linear_regression",
            calculation_input={"n": n, "sum_x": sum_x, "sum_x2": sum_x2}
        )

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    if not (math.isfinite(slope) and math.isfinite(intercept)):
        raise DegenerateComputationError(
            "Regression produced a non-finite line",
            metric_name="linear_regression",
            calculation_input={"slope": slope, "intercept": intercept}
        )

    return slope, intercept


class LinearRegressionStrategy(PredictionStrategy):
    """
    Extrapolates a least-squares line one period past the series.

    Records are indexed 1..20 from most recent to oldest. The projected value
    at index 21 is compared with the record at index 20, the oldest one.
    """

    mode = PredictionMode.LINEAR_REGRESSION

    def compute(self, series: Sequence[PriceRecord]) -> PredictionResult:
        ordered = self._ordered_most_recent_first(series)
        indexed = [replace(record, index=i) for i, record in enumerate(ordered, start=1)]

        slope, intercept = fit_linear_regression(
            [(record.index, float(record.value)) for record in indexed]
        )

        future_value = slope * FORECAST_INDEX + intercept
        if not math.isfinite(future_value):
            raise DegenerateComputationError(
                "Projected value is not finite",
                metric_name="future_value",
                calculation_input={"slope": slope, "intercept": intercept}
            )

        reference = indexed[-1]
        reference_value = float(reference.value)

        trend = Trend.BULLISH if future_value > reference_value else Trend.BEARISH

        return PredictionResult(
            mode_name=self.display_name,
            trend=trend,
            future_value=future_value,
            summary=(
                f"Reference value: {self._fmt(reference_value)} | "
                f"Estimated value: {self._fmt(future_value)}"
            ),
            calculation_trace=(
                f"Slope (m): {slope:.4f}",
                f"Intercept (b): {self._fmt(intercept)}",
                f"Reference value (period {reference.index}): {self._fmt(reference_value)}",
                f"Projected value (period {FORECAST_INDEX}): {self._fmt(future_value)}",
                f"Resulting trend: {trend.value}",
            ),
        )
