"""Tests for listing and filter-state models."""

from __future__ import annotations

from datetime import datetime, timezone

from src.config import settings
from src.models import EARLIEST, FilterState, Property, SortOption, format_price


class TestProperty:
    def test_numeric_id_coerced(self):
        assert Property.model_validate({"id": 7}).id == "7"

    def test_missing_fields_are_absent(self):
        p = Property.model_validate({"id": "x"})
        assert p.title == ""
        assert p.location is None
        assert p.price is None
        assert p.trending is None

    def test_null_title(self):
        assert Property.model_validate({"id": "x", "title": None}).title == ""

    def test_unknown_columns_ignored(self):
        p = Property.model_validate({"id": "x", "views_count": 12})
        assert not hasattr(p, "views_count")

    def test_zero_defaults(self):
        p = Property(id="x")
        assert p.price_or_zero == 0
        assert p.sqft_or_zero == 0
        assert Property(id="y", price=10, sqft=5).price_or_zero == 10


class TestCreatedTimestamp:
    def test_date_only(self):
        expected = datetime(2024, 1, 1, tzinfo=timezone.utc).timestamp()
        assert Property(id="x", created_at="2024-01-01").created_timestamp() == expected

    def test_zulu_suffix(self):
        a = Property(id="a", created_at="2024-02-01T12:30:00Z").created_timestamp()
        b = Property(id="b", created_at="2024-02-01T12:30:00+00:00").created_timestamp()
        assert a == b

    def test_offset_respected(self):
        a = Property(id="a", created_at="2024-02-01T12:00:00+05:30").created_timestamp()
        b = Property(id="b", created_at="2024-02-01T06:30:00+00:00").created_timestamp()
        assert a == b

    def test_missing_is_earliest(self):
        assert Property(id="x").created_timestamp() == EARLIEST

    def test_invalid_is_earliest(self):
        assert Property(id="x", created_at="yesterday").created_timestamp() == EARLIEST

    def test_earliest_below_epoch(self):
        old = Property(id="x", created_at="1900-01-01").created_timestamp()
        assert EARLIEST < old < 0


class TestFormatPrice:
    def test_grouped_with_currency(self):
        assert format_price(9_500_000) == f"{settings.CURRENCY_SYMBOL}9,500,000"

    def test_missing_price(self):
        assert format_price(None) == "Price on request"


class TestFilterState:
    def test_defaults_are_inactive(self):
        f = FilterState()
        assert f.is_default()
        assert f.price_max == settings.PRICE_CEILING
        assert f.sqft_max == settings.SQFT_CEILING

    def test_active_not_default(self):
        assert not FilterState(trending_only=True).is_default()

    def test_multi_select_dedupes_in_order(self):
        f = FilterState(locations=("Pune", "Mumbai", "Pune"))
        assert f.locations == ("Pune", "Mumbai")

    def test_replace_returns_new_state(self):
        f = FilterState()
        g = f.replace(query="villa")
        assert f.query == ""
        assert g.query == "villa"

    def test_serializable(self):
        f = FilterState(locations=("Pune",), beds=(2, 3), price_min=100)
        assert FilterState.model_validate_json(f.model_dump_json()) == f


class TestSortOption:
    def test_labels(self):
        assert SortOption.NEWEST.label == "Newest First"
        assert SortOption.PRICE_ASC.label == "Price: Low → High"
        assert SortOption.PRICE_DESC.label == "Price: High → Low"
        assert SortOption.TRENDING.label == "Trending"

    def test_from_value(self):
        assert SortOption("price_desc") is SortOption.PRICE_DESC
