"""
Canonical data models for price series input.

This module defines immutable data structures for single price observations
and for the diagnostics produced while parsing raw text.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

# Exact number of observations every prediction strategy consumes
SERIES_LENGTH = 20


@dataclass(frozen=True)
class PriceRecord:
    """Single dated price observation."""
    date: date                      # Calendar date, no time-of-day
    value: Decimal                  # Positive once past validation
    index: Optional[int] = None     # 1-based ordinal, assigned during computation


@dataclass(frozen=True)
class ParseReport:
    """Result of parsing raw price text."""

    records: list[PriceRecord] = field(default_factory=list)

    # Processing metadata
    total_lines: int = 0
    dropped_lines: int = 0

    @property
    def parsed_lines(self) -> int:
        return len(self.records)
