"""
Tests for the price data models.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from spark.models.price import DailySummary, PriceRecord


class TestPriceRecord:
    """Decoding and encoding of upstream records."""

    def test_decode_upstream_keys(self):
        record = PriceRecord.model_validate(
            {"Rank": 4, "DateTime": "2023-01-25T13:00:00+02:00", "PriceWithTax": 0.2743}
        )

        assert record.rank == 4
        assert record.timestamp == datetime(2023, 1, 25, 13, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert record.price_with_tax == pytest.approx(0.2743)

    def test_populate_by_field_name(self):
        record = PriceRecord(rank=1, price_with_tax=0.1)

        assert record.rank == 1
        assert record.timestamp is None

    @pytest.mark.parametrize("field, value", [
        ("Rank", "3"),
        ("Rank", True),
        ("Rank", 1.5),
        ("PriceWithTax", "0.1"),
        ("PriceWithTax", False),
    ])
    def test_no_type_coercion(self, field, value):
        with pytest.raises(ValidationError):
            PriceRecord.model_validate({field: value})

    def test_frozen(self):
        record = PriceRecord(rank=1, price_with_tax=0.1)

        with pytest.raises(ValidationError):
            record.rank = 99

    def test_unknown_keys_ignored(self):
        record = PriceRecord.model_validate({"Rank": 1, "PriceNoTax": 0.08})

        assert record.rank == 1
        assert not hasattr(record, "PriceNoTax")

    def test_zulu_suffix_accepted(self):
        record = PriceRecord.model_validate({"DateTime": "2023-01-25T11:00:00Z"})

        assert record.timestamp == datetime(2023, 1, 25, 11, 0, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", [
        "2023-01-25T11:00:00",
        "2023-01-25 11:00:00+02:00",
        "20230125T110000+0200",
        " 2023-01-25T11:00:00+02:00",
        "25.01.2023 11:00",
        "tomorrow",
        1674637200,
    ])
    def test_non_strict_dates_rejected(self, value):
        with pytest.raises(ValidationError):
            PriceRecord.model_validate({"DateTime": value})

    def test_round_trip_preserves_fields(self):
        """Test decode -> encode -> decode keeps rank, timestamp and price."""
        original = {"Rank": 7, "DateTime": "2023-01-25T18:00:00+02:00", "PriceWithTax": 0.5743}

        record = PriceRecord.model_validate(original)
        encoded = record.model_dump(mode="json", by_alias=True)
        again = PriceRecord.model_validate(encoded)

        assert set(encoded) == {"Rank", "DateTime", "PriceWithTax"}
        assert again.rank == 7
        assert again.timestamp.replace(microsecond=0) == record.timestamp.replace(microsecond=0)
        assert again.price_with_tax == pytest.approx(0.5743)


class TestDailySummary:
    """DailySummary is an immutable value."""

    def test_frozen(self):
        summary = DailySummary(as_of=datetime(2023, 1, 25, tzinfo=timezone.utc))

        with pytest.raises(ValidationError):
            summary.lowest = PriceRecord(rank=1)

    def test_shared_records_cannot_change(self):
        summary = DailySummary(as_of=datetime(2023, 1, 25, tzinfo=timezone.utc), lowest=PriceRecord(rank=1))

        with pytest.raises(ValidationError):
            summary.lowest.rank = 99

        assert summary.lowest.rank == 1

    def test_has_data(self):
        as_of = datetime(2023, 1, 25, tzinfo=timezone.utc)

        assert not DailySummary(as_of=as_of).has_data
        assert DailySummary(as_of=as_of, highest=PriceRecord(rank=3)).has_data
