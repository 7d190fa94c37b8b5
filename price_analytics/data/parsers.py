"""
Parsers for converting raw price payloads to PricePoint objects.

Payloads follow the shape produced by the forecasting service:
``{"cropName": ..., "historical": [...], "predicted": [...]}`` where each
entry is ``{"date": "2024-01-31", "price": 1520.5, "type": "Historical"}``.
"""

import math
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Optional, Union

import orjson

from ..errors import MalformedDataError, MissingDataError
from .models import PriceKind, PricePoint, Timestamp


def parse_json_payload(raw_data: Union[str, bytes]) -> dict[str, Any]:
    """
    Parse raw JSON into a dictionary.

    Raises:
        MalformedDataError: If the data is not valid JSON or not an object
    """
    try:
        payload = orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise MalformedDataError(f"Invalid JSON: {e}", expected_format="json")

    if not isinstance(payload, dict):
        raise MalformedDataError(
            "Price payload must be a JSON object",
            raw_data=str(raw_data)[:200],
            expected_format="object",
        )
    return payload


def parse_timestamp(raw: Any) -> Timestamp:
    """Parse an ISO date/datetime string, or pass through date objects."""
    if isinstance(raw, (date, datetime)):
        return raw

    if not isinstance(raw, str):
        raise MalformedDataError(
            f"Unsupported timestamp type: {type(raw).__name__}",
            raw_data=repr(raw),
            expected_format="ISO 8601 date or datetime",
        )

    text = raw.strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        # fromisoformat only accepts a trailing Z from Python 3.11 on
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise MalformedDataError(
            f"Invalid timestamp {raw!r}: {e}",
            raw_data=raw,
            expected_format="ISO 8601 date or datetime",
        )


def parse_price(raw: Any) -> float:
    """Convert a raw price to a finite float."""
    if isinstance(raw, bool):
        raise MalformedDataError("Price must be numeric, got bool", raw_data=repr(raw))
    try:
        price = float(raw)
    except (TypeError, ValueError) as e:
        raise MalformedDataError(f"Invalid price {raw!r}: {e}", raw_data=repr(raw))

    if not math.isfinite(price):
        raise MalformedDataError(f"Price must be finite, got {price}", raw_data=repr(raw))
    return price


def parse_kind(raw: Any, default: PriceKind = PriceKind.HISTORICAL) -> PriceKind:
    """Match a kind label case-insensitively ("Historical" -> HISTORICAL)."""
    if raw is None:
        return default
    if isinstance(raw, PriceKind):
        return raw
    try:
        return PriceKind(str(raw).strip().lower())
    except ValueError:
        raise MalformedDataError(
            f"Unknown price type {raw!r}",
            raw_data=repr(raw),
            expected_format="Historical or Predicted",
        )


def parse_price_point(raw: Mapping[str, Any],
                      default_kind: PriceKind = PriceKind.HISTORICAL) -> PricePoint:
    """
    Parse a single price entry.

    Args:
        raw: Mapping with ``date`` (or ``timestamp``), ``price`` and optional ``type``
        default_kind: Kind used when the entry carries no ``type``

    Returns:
        PricePoint

    Raises:
        MissingDataError: If the timestamp or price is absent
        MalformedDataError: If a field cannot be converted
    """
    if not isinstance(raw, Mapping):
        raise MalformedDataError(
            f"Price entry must be an object, got {type(raw).__name__}",
            raw_data=repr(raw),
        )

    raw_ts = raw.get("date", raw.get("timestamp"))
    if raw_ts is None:
        raise MissingDataError("Price entry has no date", data_type="timestamp")
    if raw.get("price") is None:
        raise MissingDataError("Price entry has no price", data_type="price")

    return PricePoint(
        timestamp=parse_timestamp(raw_ts),
        price=parse_price(raw["price"]),
        kind=parse_kind(raw.get("type"), default_kind),
    )


def parse_price_series(entries: Optional[list[Any]],
                       default_kind: PriceKind = PriceKind.HISTORICAL) -> tuple[PricePoint, ...]:
    """Parse a list of price entries, preserving order."""
    if entries is None:
        return ()
    if not isinstance(entries, list):
        raise MalformedDataError(
            f"Price series must be a list, got {type(entries).__name__}",
            expected_format="list",
        )
    return tuple(parse_price_point(entry, default_kind) for entry in entries)


def parse_price_payload(
    raw: Union[str, bytes, Mapping[str, Any]]
) -> tuple[str, tuple[PricePoint, ...], tuple[PricePoint, ...]]:
    """
    Parse a crop price payload.

    Args:
        raw: JSON text/bytes or an already decoded mapping

    Returns:
        Tuple of (commodity name, historical points, predicted points)
    """
    payload = raw if isinstance(raw, Mapping) else parse_json_payload(raw)

    commodity = payload.get("cropName", payload.get("commodity", ""))
    if not isinstance(commodity, str):
        raise MalformedDataError("Commodity name must be a string", raw_data=repr(commodity))

    historical = parse_price_series(payload.get("historical"), PriceKind.HISTORICAL)
    predicted = parse_price_series(payload.get("predicted"), PriceKind.PREDICTED)

    if not historical and not predicted:
        raise MissingDataError("Payload contains no price points", data_type="price_series")

    return commodity, historical, predicted
