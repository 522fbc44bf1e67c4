"""
Logging configuration and utilities for the prediction engine.
"""
from .config import configure_from_config, configure_logging, get_logger, get_prediction_logger

__all__ = ["configure_from_config", "configure_logging", "get_logger", "get_prediction_logger"]
