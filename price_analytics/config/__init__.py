"""Threshold configuration for the analytics components."""

from .defaults import AnalyticsConfig, RiskParams, VolatilityParams, get_default_config
from .loader import ConfigLoader, build_config
from .validation import ConfigValidator, ValidationError

__all__ = [
    "AnalyticsConfig",
    "RiskParams",
    "VolatilityParams",
    "get_default_config",
    "ConfigLoader",
    "build_config",
    "ConfigValidator",
    "ValidationError",
]
