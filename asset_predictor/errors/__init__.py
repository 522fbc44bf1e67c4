"""
Error classification for the prediction engine.

Separates recoverable input problems (the caller should fix the data) from
system failures that indicate a broken internal contract.
"""

from .data_quality import (
    DataQualityError,
    SeriesValidationError,
)
from .system_failures import (
    SystemFailureError,
    StrategyPreconditionError,
    DegenerateComputationError,
    UnmappedModeError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "SeriesValidationError",
    # System Failures
    "SystemFailureError",
    "StrategyPreconditionError",
    "DegenerateComputationError",
    "UnmappedModeError",
]
