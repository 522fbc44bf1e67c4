#!/usr/bin/env python3
"""
Basic Usage Example - Asset Predictor Engine

This script demonstrates the basic usage of the prediction engine with
generated price data. It shows how to:
- Initialize the engine
- Parse price text and check it against the data contract
- Switch prediction modes
- Read results and calculation traces

Run: python examples/basic_usage.py
"""

from datetime import date, timedelta

from asset_predictor.engine import PredictionEngine
from asset_predictor.logging.config import configure_logging


def create_price_text(start: date, first_price: float, step: float, count: int = 20) -> str:
    """Create "<date>,<value>" lines with a steady drift."""
    lines = []
    for i in range(count):
        lines.append(f"{(start + timedelta(days=i)).isoformat()},{first_price + step * i:.2f}")
    return "\n".join(lines)


def main() -> None:
    configure_logging(level="WARNING")
    engine = PredictionEngine()

    text = create_price_text(date(2024, 3, 1), first_price=150.0, step=1.25)
    series = engine.parse_csv(text)
    print(f"Parsed {len(series)} records, valid: {engine.validate(series)}")

    for mode, display_name in engine.list_available_modes():
        engine.set_mode(mode)
        result = engine.compute(series)
        print(f"\n--- {display_name} ---")
        print(f"Trend: {result.trend.value}")
        print(result.summary)
        for step in result.calculation_trace:
            print(f"  {step}")

    short_series = engine.parse_csv(create_price_text(date(2024, 3, 1), 150.0, 1.0, count=12))
    outcome = engine.evaluate(short_series)
    print(f"\nShort series -> success={outcome.success}, kind={outcome.error_kind.value}: {outcome.error_msg}")


if __name__ == "__main__":
    main()
