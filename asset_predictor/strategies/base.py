"""Base class for prediction strategies."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Sequence, Union

from ..data.models import SERIES_LENGTH, PriceRecord
from ..errors import StrategyPreconditionError
from ..models.prediction import PredictionMode, PredictionResult


def to_decimal(value: Union[Decimal, int, float]) -> Decimal:
    """Convert a record value to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


class PredictionStrategy(ABC):
    """
    Base class for prediction algorithms.

    Each strategy consumes exactly SERIES_LENGTH price records and returns an
    immutable PredictionResult. Strategies hold no state between calls and
    never modify the records they are given.
    """

    mode: PredictionMode

    def __init__(self, precision: int = 2):
        self.precision = precision

    @property
    def display_name(self) -> str:
        return self.mode.display_name

    @abstractmethod
    def compute(self, series: Sequence[PriceRecord]) -> PredictionResult:
        """
        Run the strategy over a price series.

        Args:
            series: Exactly SERIES_LENGTH price records, in any order

        Returns:
            PredictionResult with trend, summary and calculation trace

        Raises:
            StrategyPreconditionError: If the series has the wrong length
        """
        pass

    def _ordered_most_recent_first(self, series: Sequence[PriceRecord]) -> list[PriceRecord]:
        """Check the record count and sort by date, most recent first."""
        if series is None or len(series) != SERIES_LENGTH:
            available = 0 if series is None else len(series)
            raise StrategyPreconditionError(
                f"{self.display_name} requires exactly {SERIES_LENGTH} price records, got {available}",
                strategy_name=self.mode.value,
                required_count=SERIES_LENGTH,
                available_count=available
            )

        return sorted(series, key=lambda record: record.date, reverse=True)

    def _fmt(self, value: Union[Decimal, float]) -> str:
        """Format a number at the configured display precision."""
        return f"{value:.{self.precision}f}"
