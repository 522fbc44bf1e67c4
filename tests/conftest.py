"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date, timedelta
from decimal import Decimal
from typing import Callable, List, Sequence

from asset_predictor.data.models import PriceRecord

START_DATE = date(2024, 1, 1)


def build_series(values: Sequence, start: date = START_DATE) -> List[PriceRecord]:
    """Build consecutive daily records; values are given oldest first."""
    return [
        PriceRecord(date=start + timedelta(days=i), value=Decimal(str(value)))
        for i, value in enumerate(values)
    ]


@pytest.fixture
def make_series() -> Callable[..., List[PriceRecord]]:
    """Factory for daily price series, oldest value first."""
    return build_series


@pytest.fixture
def rising_series() -> List[PriceRecord]:
    """Twenty prices rising one unit per day: 101 (oldest) to 120 (most recent)."""
    return build_series([101 + i for i in range(20)])


@pytest.fixture
def flat_series() -> List[PriceRecord]:
    """Twenty identical prices."""
    return build_series([50] * 20)


@pytest.fixture
def sample_csv_text() -> str:
    """Twenty well-formed <date>,<value> lines."""
    lines = [
        f"{(START_DATE + timedelta(days=i)).isoformat()},{100 + i * 0.5:.2f}"
        for i in range(20)
    ]
    return "\n".join(lines)


@pytest.fixture
def config_dir(tmp_path):
    """Empty configuration directory so tests run on built-in defaults."""
    return tmp_path
