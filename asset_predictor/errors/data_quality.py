"""
Data quality error classifications for price series input.

These exceptions describe input that does not satisfy the minimum data
contract. They are recoverable: the caller is expected to ask for new data.
"""

from typing import Any, Dict, List, Optional


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class SeriesValidationError(DataQualityError):
    """Price series rejected by the validator before any strategy ran."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None,
                 reasons: Optional[List[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count
        self.reasons = reasons or []
