"""Prediction strategies for trend forecasting over a fixed price window"""

from .base import PredictionStrategy
from .momentum import MomentumStrategy, calculate_roc
from .regression import LinearRegressionStrategy, fit_linear_regression
from .sma import MovingAverageCrossoverStrategy, calculate_sma

__all__ = [
    "PredictionStrategy",
    "MovingAverageCrossoverStrategy",
    "LinearRegressionStrategy",
    "MomentumStrategy",
    "calculate_sma",
    "fit_linear_regression",
    "calculate_roc",
]
