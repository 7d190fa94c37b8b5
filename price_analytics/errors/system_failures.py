"""
System failure error classifications.

These exceptions represent failures inside the analytics pipeline or its
configuration rather than problems with the input data.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable analytics failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class MetricsCalculationError(SystemFailureError):
    """A metric component failed unexpectedly."""

    def __init__(self, message: str, metric_name: Optional[str] = None,
                 calculation_input: Optional[dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.metric_name = metric_name
        self.calculation_input = calculation_input


class ConfigurationError(SystemFailureError):
    """Threshold configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None,
                 commodity: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.commodity = commodity
