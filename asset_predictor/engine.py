"""
Main prediction engine coordinator.

Orchestrates the prediction pipeline, coordinating price ingestion, the
minimum data contract check, mode selection and strategy dispatch.
"""

from typing import Any, Iterable, Optional, Sequence, Union

import structlog

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import SERIES_LENGTH, ParseReport, PriceRecord
from .data.parsers import parse_csv, parse_csv_with_report, parse_manual_entries
from .data.validators import SeriesValidator
from .errors import (
    DataQualityError,
    SeriesValidationError,
    SystemFailureError,
    UnmappedModeError,
)
from .logging.config import get_prediction_logger, log_prediction_outcome
from .models.prediction import PredictionMode, PredictionOutcome, PredictionResult
from .state.mode_registry import ModeRegistry
from .strategies import (
    LinearRegressionStrategy,
    MomentumStrategy,
    MovingAverageCrossoverStrategy,
    PredictionStrategy,
)

logger = structlog.get_logger(__name__)
prediction_logger = get_prediction_logger(__name__)


class PredictionEngine:
    """
    Single entry point for callers that need a price trend prediction.

    Manages the prediction pipeline:
    Price Text → Price Records → Validation → Mode Selection → Strategy → Result
    """

    def __init__(
        self,
        config_dir: Optional[str] = None,
        mode_registry: Optional[ModeRegistry] = None,
        config_overrides: Optional[dict[str, Any]] = None,
        strategies: Optional[Iterable[PredictionStrategy]] = None
    ) -> None:
        """
        Initialize the prediction engine.

        Args:
            config_dir: Directory holding predictor.yaml (defaults to ./config)
            mode_registry: Shared mode registry; a new one seeded from
                configuration is created when omitted
            config_overrides: Per-engine overrides, highest precedence
            strategies: Strategy instances; one per PredictionMode is required

        Raises:
            ValueError: If the merged configuration is invalid
            UnmappedModeError: If a PredictionMode has no strategy
        """
        self.logger = logger
        self.prediction_logger = prediction_logger

        self.config_loader = ConfigLoader.create(config_dir)
        self.config = self.config_loader.merge_config(config_overrides)

        validation_errors = ConfigValidator.validate_config(self.config)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            self.logger.error("Configuration validation failed", errors=error_msgs)
            raise ValueError(f"Invalid configuration: {'; '.join(error_msgs)}")

        params = self.config["prediction"]
        self.precision = params["display_precision"]

        self.mode_registry = mode_registry or ModeRegistry(params["default_mode"])
        self.validator = SeriesValidator()

        if strategies is None:
            strategies = [
                MovingAverageCrossoverStrategy(precision=self.precision),
                LinearRegressionStrategy(precision=self.precision),
                MomentumStrategy(precision=self.precision),
            ]
        self.strategies: dict[PredictionMode, PredictionStrategy] = {
            strategy.mode: strategy for strategy in strategies
        }

        missing = [mode.value for mode in PredictionMode if mode not in self.strategies]
        if missing:
            raise UnmappedModeError(
                f"No strategy registered for modes: {', '.join(missing)}",
                mode=missing[0]
            )

        self.logger.info(
            "Prediction engine initialized",
            current_mode=self.mode_registry.get_current_mode().value,
            strategies=[mode.value for mode in self.strategies]
        )

    def get_current_mode(self) -> PredictionMode:
        """Get the currently selected prediction mode."""
        return self.mode_registry.get_current_mode()

    def set_mode(self, mode: Union[PredictionMode, str]) -> None:
        """Select the prediction mode used when compute() gets no explicit mode."""
        self.mode_registry.set_mode(mode)

    def list_available_modes(self) -> list[tuple[PredictionMode, str]]:
        """List all prediction modes with display names, in declaration order."""
        return self.mode_registry.list_available_modes()

    def parse_csv(self, text: Optional[str]) -> list[PriceRecord]:
        """Parse "<date>,<value>" lines into price records, dropping malformed lines."""
        return parse_csv(text)

    def parse_csv_with_report(self, text: Optional[str]) -> ParseReport:
        """Parse price text and report how many lines were dropped."""
        report = parse_csv_with_report(text)

        if report.dropped_lines:
            self.logger.info(
                "Dropped malformed price lines",
                total_lines=report.total_lines,
                dropped_lines=report.dropped_lines
            )

        return report

    def parse_manual_entries(self, entries: Iterable[tuple[Any, Any]]) -> list[PriceRecord]:
        """Build price records from manually entered (date, value) rows."""
        return parse_manual_entries(entries)

    def validate(self, series: Optional[Sequence[PriceRecord]]) -> bool:
        """Check the series against the minimum data contract."""
        return self.validator.validate(series)

    def compute(
        self,
        series: Optional[Sequence[PriceRecord]],
        mode: Optional[Union[PredictionMode, str]] = None
    ) -> PredictionResult:
        """
        Run a prediction over a price series.

        Args:
            series: Exactly 20 price records with positive values
            mode: Mode to use; the registry's current mode when omitted

        Returns:
            PredictionResult produced by the selected strategy

        Raises:
            SeriesValidationError: If the series fails validation
            UnmappedModeError: If the mode has no registered strategy
            StrategyPreconditionError: If a strategy rejects the series
            DegenerateComputationError: If the arithmetic degenerates
        """
        if not self.validator.validate(series):
            reasons = self.validator.explain(series)
            raise SeriesValidationError(
                "Price data does not satisfy the minimum data contract",
                required_count=SERIES_LENGTH,
                available_count=0 if series is None else len(series),
                reasons=reasons
            )

        selected_mode = self._resolve_mode(mode)
        strategy = self.strategies.get(selected_mode)
        if strategy is None:
            raise UnmappedModeError(
                f"No strategy registered for mode {selected_mode.value}",
                mode=selected_mode.value
            )

        result = strategy.compute(series)

        log_prediction_outcome(
            self.prediction_logger,
            mode=selected_mode.value,
            trend=result.trend.value,
            future_value=result.future_value,
            summary=result.summary
        )

        return result

    def evaluate(
        self,
        series: Optional[Sequence[PriceRecord]],
        mode: Optional[Union[PredictionMode, str]] = None
    ) -> PredictionOutcome:
        """
        Run a prediction and report failures as an outcome instead of raising.

        Validation failures come back with error_kind VALIDATION; broken
        internal contracts come back with error_kind DEFECT.
        """
        try:
            return PredictionOutcome.succeeded(self.compute(series, mode))

        except DataQualityError as e:
            self.logger.warning(
                "Price data rejected",
                error=str(e),
                error_type=type(e).__name__,
                reasons=getattr(e, 'reasons', [])
            )
            details = "; ".join(getattr(e, 'reasons', []))
            return PredictionOutcome.validation_failed(f"{e}: {details}" if details else str(e))

        except SystemFailureError as e:
            self.logger.error(
                "Prediction failed on an internal contract",
                error=str(e),
                error_type=type(e).__name__,
                context=e.context
            )
            return PredictionOutcome.defect(str(e))

    def _resolve_mode(self, mode: Optional[Union[PredictionMode, str]]) -> PredictionMode:
        """Turn an explicit mode or identifier into a PredictionMode."""
        if mode is None:
            return self.mode_registry.get_current_mode()

        try:
            return PredictionMode(mode)
        except ValueError:
            raise UnmappedModeError(f"Unknown prediction mode: {mode}", mode=str(mode)) from None
