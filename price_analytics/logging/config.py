"""
Centralized logging configuration for the price analytics engine.

All components log through structlog so that analysis runs produce
consistent, structured events that the reporting layer can consume.
"""
import logging
import sys
from typing import TYPE_CHECKING, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

if TYPE_CHECKING:
    from ..models.analysis import RiskAssessment


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"
    )

    processors = [
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

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a structlog logger instance (name is typically __name__)."""
    return structlog.get_logger(name)


def get_analysis_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound with analytics subsystem context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger with ``subsystem="analytics"`` bound
    """
    return get_logger(name).bind(subsystem="analytics")


def log_risk_assessment(
    logger: FilteringBoundLogger,
    commodity: str,
    assessment: "RiskAssessment",
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a risk assessment with standardized fields.

    High risk levels are logged as warnings, everything else as info.

    Args:
        logger: Structlog logger instance
        commodity: Commodity the series belongs to
        assessment: Computed risk assessment
        context: Additional context data
    """
    bound_logger = logger.bind(
        commodity=commodity,
        risk_level=assessment.risk_level.value,
        risk_score=assessment.risk_score,
        stability_score=assessment.stability_score,
        risk_factors=list(assessment.risk_factors),
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if assessment.risk_level.value == "high":
        bound_logger.warning("Risk assessment completed")
    else:
        bound_logger.info("Risk assessment completed")
