"""
Logging configuration and utilities for the price analytics engine.
"""
from .config import configure_logging, get_analysis_logger, get_logger, log_risk_assessment

__all__ = ["configure_logging", "get_logger", "get_analysis_logger", "log_risk_assessment"]
