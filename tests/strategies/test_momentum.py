"""Tests for the momentum (rate of change) strategy"""

import pytest
from decimal import Decimal

from asset_predictor.errors import DegenerateComputationError, StrategyPreconditionError
from asset_predictor.models.prediction import PredictionMode, Trend
from asset_predictor.strategies.momentum import LOOKBACK_PERIODS, MomentumStrategy, calculate_roc


class TestCalculateROC:
    """Test rate of change calculation"""

    def test_positive_change(self):
        assert calculate_roc(Decimal("110"), Decimal("100")) == Decimal("10")

    def test_negative_change(self):
        assert calculate_roc(Decimal("90"), Decimal("100")) == Decimal("-10")

    def test_zero_comparison_price_raises(self):
        with pytest.raises(DegenerateComputationError) as exc_info:
            calculate_roc(Decimal("90"), Decimal("0"))
        assert exc_info.value.metric_name == "roc"

    @pytest.mark.parametrize("current, past", [
        ("Infinity", "Infinity"),
        ("100", "-Infinity"),
        ("NaN", "100"),
    ])
    def test_non_finite_price_raises(self, current, past):
        with pytest.raises(DegenerateComputationError):
            calculate_roc(Decimal(current), Decimal(past))


class TestMomentumStrategy:
    """Test momentum predictions"""

    def setup_method(self):
        self.strategy = MomentumStrategy()

    def test_mode_metadata(self):
        assert self.strategy.mode is PredictionMode.MOMENTUM
        assert self.strategy.display_name == "Momentum (ROC)"
        assert LOOKBACK_PERIODS == 5

    def test_trace_has_one_line_per_record(self, rising_series):
        result = self.strategy.compute(rising_series)

        assert len(result.calculation_trace) == 20
        unavailable = [line for line in result.calculation_trace if "not available" in line]
        computed = [line for line in result.calculation_trace if "ROC =" in line]
        assert unavailable == list(result.calculation_trace[:5])
        assert computed == list(result.calculation_trace[5:])
        assert result.future_value is None

    def test_trace_line_content(self, rising_series):
        """Position 0 is the most recent price (120), position 5 is 115"""
        result = self.strategy.compute(rising_series)

        assert result.calculation_trace[0] == "Period 1: price = 120.00 -> momentum not available"
        assert result.calculation_trace[5] == (
            "Period 6: price = 115.00, price at period 1 = 120.00, ROC = -4.17%"
        )

    def test_trend_from_oldest_position(self, rising_series):
        # Oldest 101 against 106 five positions earlier in the sorted list
        result = self.strategy.compute(rising_series)
        assert result.trend is Trend.BEARISH
        assert result.summary == "Final momentum (ROC): -4.72%"

    def test_falling_prices_give_positive_final_roc(self, make_series):
        series = make_series([120 - i for i in range(20)])
        result = self.strategy.compute(series)
        assert result.trend is Trend.BULLISH

    def test_only_oldest_roc_decides(self, make_series):
        # Every ROC is zero except the one at the oldest position
        series = make_series([110] + [100] * 19)
        result = self.strategy.compute(series)

        assert result.trend is Trend.BULLISH
        assert all(line.endswith("ROC = 0.00%") for line in result.calculation_trace[5:19])
        assert result.calculation_trace[19].endswith("ROC = 10.00%")

    def test_zero_roc_is_bearish(self, flat_series):
        result = self.strategy.compute(flat_series)
        assert result.trend is Trend.BEARISH
        assert result.summary == "Final momentum (ROC): 0.00%"

    def test_zero_comparison_price_raises(self, make_series):
        # Bypasses the validator: most recent price is zero
        series = make_series([100] * 19 + [0])
        with pytest.raises(DegenerateComputationError):
            self.strategy.compute(series)

    def test_wrong_length_raises_precondition_error(self, make_series):
        with pytest.raises(StrategyPreconditionError) as exc_info:
            self.strategy.compute(make_series([100] * 21))
        assert exc_info.value.strategy_name == "momentum"
        assert exc_info.value.available_count == 21

    def test_does_not_modify_input(self, rising_series):
        snapshot = list(rising_series)
        self.strategy.compute(rising_series)
        assert rising_series == snapshot
