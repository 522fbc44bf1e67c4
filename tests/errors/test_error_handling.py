"""
Error handling tests for the prediction engine.

Tests cover the recoverable/unrecoverable split and the context each error carries.
"""

import pytest

from asset_predictor.errors import (
    DataQualityError,
    DegenerateComputationError,
    SeriesValidationError,
    StrategyPreconditionError,
    SystemFailureError,
    UnmappedModeError,
)
from asset_predictor.strategies import MomentumStrategy, MovingAverageCrossoverStrategy
from asset_predictor.strategies.regression import fit_linear_regression


class TestErrorClassification:
    """Test error classification system."""

    def test_data_quality_error_hierarchy(self):
        """Test that data quality errors are recoverable."""
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        error = SeriesValidationError(
            "bad series",
            required_count=20,
            available_count=3,
            reasons=["Expected exactly 20 price records, got 3"],
            context={"source": "csv"}
        )
        assert isinstance(error, DataQualityError)
        assert error.recoverable is True
        assert error.required_count == 20
        assert error.available_count == 3
        assert error.context == {"source": "csv"}
        assert str(error) == "bad series"

    def test_validation_error_defaults(self):
        error = SeriesValidationError("bad series")
        assert error.reasons == []
        assert error.required_count is None

    def test_system_failure_error_hierarchy(self):
        """Test that system failures are unrecoverable."""
        for error in (
            SystemFailureError("base"),
            StrategyPreconditionError("count", strategy_name="momentum"),
            DegenerateComputationError("nan", metric_name="slope"),
            UnmappedModeError("missing", mode="momentum"),
        ):
            assert isinstance(error, SystemFailureError)
            assert not isinstance(error, DataQualityError)
            assert error.recoverable is False

    def test_precondition_error_is_argument_error(self):
        error = StrategyPreconditionError("count", required_count=20, available_count=19)
        assert isinstance(error, ValueError)
        assert error.required_count == 20
        assert error.available_count == 19


class TestErrorSources:
    """Test that components raise the expected error kinds."""

    def test_strategy_rejects_wrong_length(self, make_series):
        with pytest.raises(StrategyPreconditionError) as exc_info:
            MovingAverageCrossoverStrategy().compute(make_series([10] * 21))

        error = exc_info.value
        assert error.strategy_name == "sma_crossover"
        assert error.available_count == 21
        assert "exactly 20" in str(error)

    def test_strategy_rejects_none(self):
        with pytest.raises(StrategyPreconditionError) as exc_info:
            MomentumStrategy().compute(None)
        assert exc_info.value.available_count == 0

    def test_degenerate_regression(self):
        with pytest.raises(DegenerateComputationError) as exc_info:
            fit_linear_regression([(1.0, 5.0), (1.0, 6.0)])
        assert exc_info.value.metric_name is not None
        assert exc_info.value.recoverable is False
