"""
Tests for price series models and payload parsing.

Covers series merge/split helpers and conversion of raw crop price payloads
into PricePoint objects, including malformed and missing data.
"""

from datetime import date, datetime, timezone

import orjson
import pytest

from price_analytics.data.models import (
    PriceKind,
    PricePoint,
    merge_series,
    prices_of,
    split_by_kind,
)
from price_analytics.data.parsers import (
    parse_json_payload,
    parse_price_payload,
    parse_price_point,
    parse_price_series,
    parse_timestamp,
)
from price_analytics.errors import (
    DataQualityError,
    MalformedDataError,
    MissingDataError,
    TemporalDataError,
)


class TestSeriesHelpers:
    """Test merging and splitting of historical and predicted series"""

    def test_merge_keeps_historical_first(self, make_series):
        historical = make_series([1, 2])
        predicted = make_series([3], start=date(2024, 1, 3), kind=PriceKind.PREDICTED)

        merged = merge_series(historical, predicted)

        assert prices_of(merged) == (1.0, 2.0, 3.0)
        assert isinstance(merged, tuple)

    def test_merge_without_forecast(self, make_series):
        historical = make_series([1, 2, 3])
        assert merge_series(historical) == historical

    def test_forecast_before_history_rejected(self, make_series):
        historical = make_series([1, 2], start=date(2024, 1, 10))
        predicted = make_series([3], start=date(2024, 1, 1), kind=PriceKind.PREDICTED)

        with pytest.raises(TemporalDataError) as exc_info:
            merge_series(historical, predicted)

        assert exc_info.value.index == 2
        assert exc_info.value.previous_timestamp == date(2024, 1, 11)

    def test_unordered_history_rejected(self):
        points = [
            PricePoint(date(2024, 1, 2), 1.0),
            PricePoint(date(2024, 1, 1), 2.0),
        ]
        with pytest.raises(TemporalDataError):
            merge_series(points)

    def test_equal_timestamps_allowed(self):
        points = [PricePoint(date(2024, 1, 1), 1.0), PricePoint(date(2024, 1, 1), 2.0)]
        assert len(merge_series(points)) == 2

    def test_mixed_date_and_datetime(self):
        points = [
            PricePoint(date(2024, 1, 1), 1.0),
            PricePoint(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc), 2.0),
            PricePoint(datetime(2024, 1, 2, 8, 0), 3.0),
        ]
        assert len(merge_series(points)) == 3

    def test_split_by_kind(self, make_series):
        historical = make_series([1, 2])
        predicted = make_series([3, 4], start=date(2024, 1, 3), kind=PriceKind.PREDICTED)

        hist, pred = split_by_kind(historical + predicted)

        assert prices_of(hist) == (1.0, 2.0)
        assert prices_of(pred) == (3.0, 4.0)

    def test_price_point_is_immutable(self):
        point = PricePoint(date(2024, 1, 1), 1.0)
        with pytest.raises(AttributeError):
            point.price = 2.0  # type: ignore[misc]


class TestParsePricePoint:
    """Test parsing of individual price entries"""

    def test_parse_date_entry(self):
        point = parse_price_point({"date": "2024-03-01", "price": "1520.5", "type": "Predicted"})

        assert point.timestamp == date(2024, 3, 1)
        assert point.price == 1520.5
        assert point.kind == PriceKind.PREDICTED

    def test_parse_timestamp_key_and_default_kind(self):
        point = parse_price_point(
            {"timestamp": "2024-03-01T10:30:00Z", "price": 10},
            default_kind=PriceKind.PREDICTED,
        )

        assert point.timestamp == datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc)
        assert point.kind == PriceKind.PREDICTED

    def test_date_objects_pass_through(self):
        assert parse_timestamp(date(2024, 1, 1)) == date(2024, 1, 1)

    def test_missing_price(self):
        with pytest.raises(MissingDataError) as exc_info:
            parse_price_point({"date": "2024-01-01"})
        assert exc_info.value.data_type == "price"

    def test_missing_date(self):
        with pytest.raises(MissingDataError) as exc_info:
            parse_price_point({"price": 1.0})
        assert exc_info.value.data_type == "timestamp"

    @pytest.mark.parametrize("entry", [
        {"date": "not-a-date", "price": 1.0},
        {"date": "2024-01-01", "price": "abc"},
        {"date": "2024-01-01", "price": float("nan")},
        {"date": "2024-01-01", "price": True},
        {"date": "2024-01-01", "price": 1.0, "type": "Guessed"},
        {"date": 20240101, "price": 1.0},
    ])
    def test_malformed_entries(self, entry):
        with pytest.raises(MalformedDataError):
            parse_price_point(entry)

    def test_non_mapping_entry(self):
        with pytest.raises(MalformedDataError):
            parse_price_point(["2024-01-01", 1.0])  # type: ignore[arg-type]

    def test_series_must_be_list(self):
        with pytest.raises(MalformedDataError):
            parse_price_series({"date": "2024-01-01"})  # type: ignore[arg-type]
        assert parse_price_series(None) == ()


class TestParsePricePayload:
    """Test parsing of full crop price payloads"""

    def test_parse_mapping(self, crop_payload):
        commodity, historical, predicted = parse_price_payload(crop_payload)

        assert commodity == "Wheat"
        assert prices_of(historical) == (1500.0, 1510.0, 1505.0)
        assert prices_of(predicted) == (1520.0, 1530.0)
        assert all(p.kind == PriceKind.PREDICTED for p in predicted)

    def test_parse_json_bytes_and_text(self, crop_payload):
        raw = orjson.dumps(crop_payload)

        assert parse_price_payload(raw) == parse_price_payload(crop_payload)
        assert parse_price_payload(raw.decode()) == parse_price_payload(crop_payload)

    def test_invalid_json(self):
        with pytest.raises(MalformedDataError):
            parse_json_payload(b"{not json")

    def test_json_must_be_object(self):
        with pytest.raises(MalformedDataError):
            parse_json_payload("[1, 2, 3]")

    def test_payload_without_points(self):
        with pytest.raises(MissingDataError):
            parse_price_payload({"cropName": "Rice", "historical": [], "predicted": []})

    def test_errors_are_data_quality_errors(self):
        with pytest.raises(DataQualityError):
            parse_price_payload({"cropName": 7, "historical": []})
