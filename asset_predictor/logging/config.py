"""
Centralized logging configuration for the prediction engine.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the package should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Mapping, Optional

import structlog
from structlog.types import FilteringBoundLogger, Processor


def build_processors(
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list[Processor]] = None
) -> list[Processor]:
    """Assemble the structlog processor chain, renderer last."""
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    processors.extend(extra_processors or [])

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list[Processor]] = None
) -> None:
    """
    Configure structlog for the whole package.

    Records go through stdlib logging to stderr so that stdout stays free
    for prediction output.

    Args:
        level: Logging level name, case-insensitive
        format_json: If True, output JSON lines; otherwise console format
        include_timestamp: Include an ISO timestamp
        include_caller: Include filename and line number
        extra_processors: Processors inserted just before the renderer
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=sys.stderr,
        format="%(message)s"
    )

    structlog.configure(
        processors=build_processors(format_json, include_timestamp, include_caller, extra_processors),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_config(logging_config: Mapping[str, Any]) -> None:
    """Configure logging from the merged "logging" configuration section."""
    configure_logging(
        level=logging_config.get("level", "INFO"),
        format_json=logging_config.get("format_json", False),
        include_timestamp=logging_config.get("include_timestamp", True),
        include_caller=logging_config.get("include_caller", False),
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_prediction_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound with prediction audit context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger carrying subsystem and audit_trail fields
    """
    return get_logger(name).bind(
        subsystem="prediction",
        audit_trail=True
    )


def log_prediction_outcome(
    logger: FilteringBoundLogger,
    mode: str,
    trend: str,
    future_value: Optional[float] = None,
    summary: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a single prediction with standardized format.

    Args:
        logger: Structlog logger instance
        mode: Identifier of the mode that produced the result
        trend: Resulting trend label
        future_value: Extrapolated value, when the mode produces one
        summary: One-line synopsis of the result
        context: Additional context data
    """
    bound_logger = logger.bind(
        mode=mode,
        trend=trend,
        future_value=future_value,
        summary=summary,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Prediction computed")


def log_mode_change(
    logger: FilteringBoundLogger,
    from_mode: str,
    to_mode: str
) -> None:
    """
    Log a prediction mode change with standardized format.

    Args:
        logger: Structlog logger instance
        from_mode: Mode identifier before the change
        to_mode: Mode identifier after the change
    """
    logger.bind(
        from_mode=from_mode,
        to_mode=to_mode,
    ).info("Prediction mode changed")
