"""Tests for the SMA crossover strategy"""

import random

import pytest
from decimal import Decimal

from asset_predictor.errors import StrategyPreconditionError, SystemFailureError
from asset_predictor.models.prediction import PredictionMode, Trend
from asset_predictor.strategies.sma import (
    LONG_WINDOW,
    SHORT_WINDOW,
    MovingAverageCrossoverStrategy,
    calculate_sma,
)


class TestCalculateSMA:
    """Test SMA calculation"""

    def test_mean_of_window(self):
        assert calculate_sma([Decimal("1"), Decimal("2")]) == Decimal("1.5")

    def test_single_value(self):
        assert calculate_sma([Decimal("42.10")]) == Decimal("42.10")


class TestMovingAverageCrossoverStrategy:
    """Test SMA crossover predictions"""

    def setup_method(self):
        self.strategy = MovingAverageCrossoverStrategy()

    def test_mode_metadata(self):
        assert self.strategy.mode is PredictionMode.SMA_CROSSOVER
        assert self.strategy.display_name == "SMA Crossover"
        assert (SHORT_WINDOW, LONG_WINDOW) == (5, 20)

    def test_flat_prices_are_bearish(self, flat_series):
        """Equal means resolve to bearish"""
        result = self.strategy.compute(flat_series)
        assert result.trend is Trend.BEARISH
        assert result.trend.value == "Bajista"
        assert result.is_bullish is False
        assert result.calculation_trace[2] == "Comparison: short SMA = long SMA"

    def test_recent_strength_is_bullish(self, make_series):
        # 15 older prices at 100, 5 most recent at 110
        series = make_series([100] * 15 + [110] * 5)
        result = self.strategy.compute(series)

        assert result.trend is Trend.BULLISH
        assert result.future_value is None
        assert result.is_bullish is True
        assert result.summary == "Short SMA (5): 110.00 | Long SMA (20): 102.50"
        assert result.calculation_trace == (
            "Short SMA (5 periods): 110.00",
            "Long SMA (20 periods): 102.50",
            "Comparison: short SMA > long SMA",
            "Conclusion: Alcista trend",
        )

    def test_recent_weakness_is_bearish(self, make_series):
        series = make_series([100] * 15 + [90] * 5)
        result = self.strategy.compute(series)
        assert result.trend is Trend.BEARISH
        assert result.calculation_trace[2] == "Comparison: short SMA < long SMA"

    def test_short_window_uses_most_recent_dates(self, make_series):
        """Records are sorted by date regardless of input order"""
        series = make_series([100] * 15 + [110] * 5)
        shuffled = list(series)
        random.Random(7).shuffle(shuffled)

        assert self.strategy.compute(shuffled) == self.strategy.compute(series)

    def test_does_not_modify_input(self, rising_series):
        snapshot = list(rising_series)
        self.strategy.compute(rising_series)
        assert rising_series == snapshot
        assert all(record.index is None for record in rising_series)

    def test_precision_controls_formatting(self, make_series):
        strategy = MovingAverageCrossoverStrategy(precision=3)
        result = strategy.compute(make_series([100] * 15 + [110] * 5))
        assert result.calculation_trace[1] == "Long SMA (20 periods): 102.500"

    @pytest.mark.parametrize("length", [0, 5, 19, 21])
    def test_wrong_length_raises_precondition_error(self, make_series, length):
        with pytest.raises(StrategyPreconditionError) as exc_info:
            self.strategy.compute(make_series([100] * length))

        error = exc_info.value
        assert isinstance(error, ValueError)
        assert isinstance(error, SystemFailureError)
        assert error.recoverable is False
        assert error.strategy_name == "sma_crossover"
        assert error.required_count == 20
        assert error.available_count == length
