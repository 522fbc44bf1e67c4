"""Default configuration parameters for the prediction engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PredictionParams:
    """Prediction engine parameters."""
    default_mode: str = "sma_crossover"              # Mode selected at startup
    display_precision: int = 2                       # Fractional digits shown for prices


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    prediction: PredictionParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        prediction=PredictionParams(),
        logging=LoggingParams(),
    )
