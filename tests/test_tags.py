"""Tests for active filter chips."""

from __future__ import annotations

from src.config import settings
from src.models import FilterState
from src.search.filters import apply_filters
from src.search.intents import ClearFilter, Dimension, clear_all
from src.search.tags import active_tags

BUSY = FilterState(
    query="villa",
    locations=("Pune", "Mumbai"),
    beds=(2, 3),
    baths=(1,),
    finance_types=("Loan",),
    new_listing_only=True,
    trending_only=True,
    price_min=1_000_000,
    price_max=9_000_000,
    sqft_min=500,
    sqft_max=2000,
)


class TestProjection:
    def test_no_tags_for_defaults(self):
        assert active_tags(FilterState()) == []

    def test_whitespace_query_not_a_tag(self):
        assert active_tags(FilterState(query="  ")) == []

    def test_order_and_labels(self):
        labels = [t.label for t in active_tags(BUSY)]
        sym = settings.CURRENCY_SYMBOL
        assert labels == [
            '"villa"',
            "Pune",
            "Mumbai",
            "2 bed",
            "3 bed",
            "1 bath",
            "Loan",
            "New Listing",
            "Trending",
            f"{sym}1,000,000+",
            f"Up to {sym}9,000,000",
            "500+ sqft",
            "Up to 2000 sqft",
        ]

    def test_keys_unique(self):
        keys = [t.key for t in active_tags(BUSY)]
        assert len(keys) == len(set(keys))

    def test_one_tag_per_selected_value(self):
        tags = active_tags(FilterState(locations=("A", "B", "C")))
        assert [(t.dimension, t.value) for t in tags] == [
            (Dimension.LOCATIONS, "A"),
            (Dimension.LOCATIONS, "B"),
            (Dimension.LOCATIONS, "C"),
        ]

    def test_price_max_at_ceiling_is_inactive(self):
        assert active_tags(FilterState(price_max=settings.PRICE_CEILING)) == []


class TestRemove:
    def test_remove_multi_value_keeps_siblings(self):
        tag = next(t for t in active_tags(BUSY) if t.label == "Pune")
        after = tag.remove()
        assert after.locations == ("Mumbai",)
        assert after.replace(locations=BUSY.locations) == BUSY

    def test_each_remove_changes_only_its_dimension(self):
        tags = active_tags(BUSY)
        for tag in tags:
            after = tag.remove()
            remaining = active_tags(after)
            assert len(remaining) == len(tags) - 1
            assert tag.key not in {t.key for t in remaining}

    def test_remove_range_restores_default(self):
        tag = next(t for t in active_tags(BUSY) if t.key == "pmax")
        assert tag.remove().price_max == settings.PRICE_CEILING

    def test_remove_query(self):
        tag = active_tags(BUSY)[0]
        assert tag.remove().query == ""

    def test_intent(self):
        tag = next(t for t in active_tags(BUSY) if t.key == "bed-3")
        assert tag.intent == ClearFilter(Dimension.BEDS, 3)


class TestClearAll:
    def test_resets_every_field(self):
        assert clear_all(BUSY) == FilterState()
        assert clear_all(BUSY).is_default()

    def test_unfiltered_after_clear_all(self, listings):
        assert apply_filters(listings, clear_all(BUSY)) == listings
