"""Price series data models, series helpers and payload parsing."""

from .models import PriceKind, PricePoint, merge_series, prices_of, split_by_kind
from .parsers import parse_price_payload, parse_price_point, parse_price_series

__all__ = [
    "PriceKind",
    "PricePoint",
    "merge_series",
    "split_by_kind",
    "prices_of",
    "parse_price_point",
    "parse_price_series",
    "parse_price_payload",
]
