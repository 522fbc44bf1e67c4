"""
Asset Predictor - Price Trend Prediction Engine

Ingests a fixed-length historical price series for a financial asset and
produces a bullish/bearish forecast with a step-by-step calculation trace,
using a runtime-selectable prediction mode.
"""

__version__ = "0.1.0"
__author__ = "Asset Predictor Team"
