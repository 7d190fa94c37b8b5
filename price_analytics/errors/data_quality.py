"""
Data quality error classifications for price series processing.

These exceptions describe problems with the price observations handed to the
analytics, as opposed to failures of the analytics themselves.
"""

from typing import Any, Optional


class DataQualityError(Exception):
    """Base class for issues with the supplied price data."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class TemporalDataError(DataQualityError):
    """Price observations are not in chronological order."""

    def __init__(self, message: str, index: Optional[int] = None,
                 timestamp: Optional[Any] = None,
                 previous_timestamp: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index
        self.timestamp = timestamp
        self.previous_timestamp = previous_timestamp


class MissingDataError(DataQualityError):
    """A required field or collection is absent."""

    def __init__(self, message: str, data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type


class MalformedDataError(DataQualityError):
    """Data exists but is in an unusable format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class InsufficientDataError(DataQualityError):
    """Not enough observations for a calculation."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count


class EmptyInputError(InsufficientDataError):
    """
    Statistics were requested over a series with no observations.

    Unlike other data quality issues this is fatal to the caller: there is no
    meaningful degraded result to fall back on.
    """

    def __init__(self, message: str = "Price series cannot be empty", **kwargs):
        super().__init__(message, required_count=1, available_count=0, **kwargs)
        self.recoverable = False
