"""Volatility categorization"""

from typing import Optional

from ..config.defaults import VolatilityParams
from ..models.analysis import VolatilityCategory


def categorize_volatility(volatility: float,
                          params: Optional[VolatilityParams] = None) -> VolatilityCategory:
    """
    Map a volatility percentage to a coarse category

    low < 5 <= medium < 15 <= high with default params. Never raises;
    NaN fails both comparisons and lands in high.
    """
    params = params or VolatilityParams()
    if volatility < params.medium_threshold:
        return VolatilityCategory.LOW
    if volatility < params.high_threshold:
        return VolatilityCategory.MEDIUM
    return VolatilityCategory.HIGH
