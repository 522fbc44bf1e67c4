"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from ..models.prediction import PredictionMode

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_prediction_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate prediction parameters."""
        errors = []

        if "default_mode" in params:
            value = params["default_mode"]
            identifiers = [mode.value for mode in PredictionMode]
            if value not in identifiers:
                errors.append(ValidationError(
                    field="default_mode",
                    message=f"Must be one of {', '.join(identifiers)}",
                    value=value
                ))

        if "display_precision" in params:
            value = params["display_precision"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="display_precision",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp", "include_caller"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=flag,
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "prediction" in config:
            errors.extend(ConfigValidator.validate_prediction_params(config["prediction"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
