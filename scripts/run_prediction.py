#!/usr/bin/env python3
"""Run a price trend prediction from a CSV file.

Reads "<date>,<value>" lines from a file (or stdin), validates them and
prints the prediction for the requested mode.

Usage:
    python scripts/run_prediction.py prices.csv
    python scripts/run_prediction.py prices.csv --mode momentum --json
    cat prices.csv | python scripts/run_prediction.py -
"""

import argparse
import json
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from asset_predictor.engine import PredictionEngine
from asset_predictor.logging.config import configure_from_config
from asset_predictor.models.prediction import PredictionMode


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Predict the price trend of an asset from 20 dated prices.")
    parser.add_argument("source", help="CSV file with <date>,<value> lines, or - for stdin")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in PredictionMode],
        help="Prediction mode (defaults to the configured mode)",
    )
    parser.add_argument("--config-dir", help="Directory holding predictor.yaml")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main prediction function."""
    args = parse_args(argv)

    engine = PredictionEngine(config_dir=args.config_dir)
    configure_from_config(engine.config["logging"])

    if args.source == "-":
        text = sys.stdin.read()
    else:
        text = Path(args.source).read_text(encoding="utf-8")

    report = engine.parse_csv_with_report(text)
    outcome = engine.evaluate(report.records, args.mode)

    if not outcome.success:
        print(f"Prediction failed ({outcome.error_kind.value}): {outcome.error_msg}", file=sys.stderr)
        if report.dropped_lines:
            print(f"{report.dropped_lines} of {report.total_lines} lines could not be parsed", file=sys.stderr)
        return 1

    result = outcome.result
    if args.json:
        print(json.dumps(result.to_dict(engine.precision), indent=2, ensure_ascii=False))
        return 0

    print(f"\n=== {result.mode_name} ===")
    direction = "up" if result.is_bullish else "down"
    print(f"Trend: {result.trend.value} ({direction})")
    if result.future_value is not None:
        print(f"Future value: {result.future_value:.{engine.precision}f}")
    print(result.summary)
    print("\nCalculation steps:")
    for step in result.calculation_trace:
        print(f"  • {step}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
