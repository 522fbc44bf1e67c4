"""
System failure error classifications for unrecoverable errors.

These exceptions mean an internal contract was broken (orchestration defect,
degenerate arithmetic, registry out of sync). They are never the user's fault
and should be logged by the surrounding application.
"""

from typing import Any, Dict, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class StrategyPreconditionError(SystemFailureError, ValueError):
    """Strategy called with a series that bypassed the validation gate."""

    def __init__(self, message: str, strategy_name: Optional[str] = None,
                 required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.strategy_name = strategy_name
        self.required_count = required_count
        self.available_count = available_count


class DegenerateComputationError(SystemFailureError):
    """Arithmetic that would produce an infinite or undefined value."""

    def __init__(self, message: str, metric_name: Optional[str] = None,
                 calculation_input: Optional[Dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.metric_name = metric_name
        self.calculation_input = calculation_input


class UnmappedModeError(SystemFailureError):
    """Prediction mode with no registered strategy."""

    def __init__(self, message: str, mode: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.mode = mode
