"""
Error classification system for price analytics.

This module provides a structured exception hierarchy separating input data
quality problems from failures inside the analytics themselves.
"""

from .data_quality import (
    DataQualityError,
    EmptyInputError,
    InsufficientDataError,
    MalformedDataError,
    MissingDataError,
    TemporalDataError,
)
from .system_failures import (
    ConfigurationError,
    MetricsCalculationError,
    SystemFailureError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "TemporalDataError",
    "MissingDataError",
    "MalformedDataError",
    "InsufficientDataError",
    "EmptyInputError",
    # System Failures
    "SystemFailureError",
    "MetricsCalculationError",
    "ConfigurationError",
]
