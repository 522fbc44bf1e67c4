"""
Prediction data models.

This module defines the closed set of prediction modes and the immutable
result objects handed back to callers of the prediction engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class PredictionMode(str, Enum):
    """Available prediction algorithms, in catalog order."""
    SMA_CROSSOVER = "sma_crossover"
    LINEAR_REGRESSION = "linear_regression"
    MOMENTUM = "momentum"

    @property
    def display_name(self) -> str:
        """Human-readable label for the mode."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    PredictionMode.SMA_CROSSOVER: "SMA Crossover",
    PredictionMode.LINEAR_REGRESSION: "Linear Regression",
    PredictionMode.MOMENTUM: "Momentum (ROC)",
}


class Trend(str, Enum):
    """Directional forecast. There is no neutral state."""
    BULLISH = "Alcista"
    BEARISH = "Bajista"


class ErrorKind(str, Enum):
    """Failure category reported by PredictionOutcome."""
    NONE = "none"
    VALIDATION = "validation"    # Caller should fix the input
    DEFECT = "defect"            # Internal invariant broken


@dataclass(frozen=True)
class PredictionResult:
    """Outcome of running one prediction strategy over a price series."""
    mode_name: str
    trend: Trend
    summary: str
    calculation_trace: tuple[str, ...]
    future_value: Optional[float] = None

    @property
    def is_bullish(self) -> bool:
        return self.trend is Trend.BULLISH

    def to_dict(self, precision: int = 2) -> dict[str, Any]:
        """Serialize for rendering, rounding the future value for display."""
        return {
            "mode_name": self.mode_name,
            "trend": self.trend.value,
            "future_value": round(self.future_value, precision) if self.future_value is not None else None,
            "summary": self.summary,
            "calculation_trace": list(self.calculation_trace),
        }


@dataclass(frozen=True)
class PredictionOutcome:
    """Result of a guarded engine evaluation."""

    result: Optional[PredictionResult] = None
    success: bool = True
    error_kind: ErrorKind = ErrorKind.NONE
    error_msg: Optional[str] = None

    @classmethod
    def succeeded(cls, result: PredictionResult):
        """Create successful outcome."""
        return cls(result=result)

    @classmethod
    def validation_failed(cls, error_msg: str):
        """Create outcome for input the caller must correct."""
        return cls(success=False, error_kind=ErrorKind.VALIDATION, error_msg=error_msg)

    @classmethod
    def defect(cls, error_msg: str):
        """Create outcome for a broken internal contract."""
        return cls(success=False, error_kind=ErrorKind.DEFECT, error_msg=error_msg)
