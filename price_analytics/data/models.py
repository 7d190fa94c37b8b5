"""
Canonical data models for commodity price observations.

Price series are plain tuples of immutable PricePoint objects ordered by
timestamp ascending; position in the tuple is the time step.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from typing import Union

from ..errors import TemporalDataError

Timestamp = Union[date, datetime]


class PriceKind(str, Enum):
    """Origin of a price observation."""
    HISTORICAL = "historical"
    PREDICTED = "predicted"


@dataclass(frozen=True)
class PricePoint:
    """Single price observation."""
    timestamp: Timestamp
    price: float
    kind: PriceKind = PriceKind.HISTORICAL


def prices_of(points: Sequence[PricePoint]) -> tuple[float, ...]:
    """Extract prices in sequence order."""
    return tuple(point.price for point in points)


def split_by_kind(points: Sequence[PricePoint]) -> tuple[tuple[PricePoint, ...], tuple[PricePoint, ...]]:
    """Split a merged series into (historical, predicted), preserving order."""
    historical = tuple(p for p in points if p.kind == PriceKind.HISTORICAL)
    predicted = tuple(p for p in points if p.kind == PriceKind.PREDICTED)
    return historical, predicted


def merge_series(
    historical: Sequence[PricePoint],
    predicted: Sequence[PricePoint] = ()
) -> tuple[PricePoint, ...]:
    """
    Concatenate historical and predicted points into one analysis series.

    Raises:
        TemporalDataError: If either part is out of order or the forecast
            starts before the last historical observation.
    """
    merged = tuple(historical) + tuple(predicted)
    _check_chronological(merged)
    return merged


def _check_chronological(points: Sequence[PricePoint]) -> None:
    for index in range(1, len(points)):
        previous = _comparable(points[index - 1].timestamp)
        current = _comparable(points[index].timestamp)
        if current < previous:
            raise TemporalDataError(
                f"Price point {index} is earlier than the point before it",
                index=index,
                timestamp=points[index].timestamp,
                previous_timestamp=points[index - 1].timestamp,
            )


def _comparable(ts: Timestamp) -> datetime:
    # date and datetime do not compare with each other directly; aware
    # datetimes are normalized to naive UTC
    if isinstance(ts, datetime):
        if ts.tzinfo is not None:
            return ts.astimezone(timezone.utc).replace(tzinfo=None)
        return ts
    return datetime(ts.year, ts.month, ts.day)
