"""
Minimum data contract checks for price series.

The validator is a pure predicate: it never raises and has no side effects.
Callers decide what a failed check means.
"""

import math
from decimal import Decimal
from typing import Any, Optional, Sequence

from .models import SERIES_LENGTH, PriceRecord


def is_finite_price(value: Any) -> bool:
    """True for a finite Decimal, int or float; NaN and infinities are not prices."""
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    return False


def is_positive_price(value: Any) -> bool:
    """True for a finite price strictly greater than zero."""
    return is_finite_price(value) and value > 0


class SeriesValidator:
    """Validates that a price series can be handed to a strategy."""

    def __init__(self, required_count: int = SERIES_LENGTH):
        self.required_count = required_count

    def validate(self, series: Optional[Sequence[PriceRecord]]) -> bool:
        """
        Check the series against the minimum data contract.

        Args:
            series: Price records to check

        Returns:
            True if the series has exactly the required number of records
            and every value is finite and strictly positive
        """
        return (
            series is not None
            and len(series) == self.required_count
            and all(is_positive_price(record.value) for record in series)
        )

    def explain(self, series: Optional[Sequence[PriceRecord]]) -> list[str]:
        """
        Describe why a series fails validation.

        Returns:
            Human-readable reasons, empty when the series is valid
        """
        if series is None:
            return ["No price series provided"]

        reasons = []
        if len(series) != self.required_count:
            reasons.append(
                f"Expected exactly {self.required_count} price records, got {len(series)}"
            )

        non_finite = [i + 1 for i, record in enumerate(series) if not is_finite_price(record.value)]
        if non_finite:
            reasons.append(f"Prices must be finite numbers (records {_positions(non_finite)})")

        non_positive = [
            i + 1 for i, record in enumerate(series)
            if is_finite_price(record.value) and not record.value > 0
        ]
        if non_positive:
            reasons.append(f"Prices must be greater than zero (records {_positions(non_positive)})")

        return reasons


def _positions(positions: list[int]) -> str:
    return ", ".join(str(p) for p in positions)
