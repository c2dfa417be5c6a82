"""Removable "active filter" chips derived from a FilterState."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.config import settings
from src.models import FilterState
from src.search.intents import ClearFilter, Dimension, clear_filter


def _plain(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _money(value: float) -> str:
    amount = f"{int(value):,}" if float(value).is_integer() else f"{value:,.2f}"
    return f"{settings.CURRENCY_SYMBOL}{amount}"


@dataclass(frozen=True)
class ActiveTag:
    key: str
    label: str
    dimension: Dimension
    value: Any = None
    source: FilterState = field(default_factory=FilterState, repr=False, compare=False)

    @property
    def intent(self) -> ClearFilter:
        return ClearFilter(self.dimension, self.value)

    def remove(self) -> FilterState:
        """The state this tag was projected from, minus this one filter."""
        return clear_filter(self.source, self.dimension, self.value)


def active_tags(filters: FilterState) -> list[ActiveTag]:
    tags: list[ActiveTag] = []

    def add(key: str, label: str, dimension: Dimension, value: Any = None) -> None:
        tags.append(ActiveTag(key, label, dimension, value, filters))

    if filters.query.strip():
        add("search", f'"{filters.query}"', Dimension.QUERY)
    for loc in filters.locations:
        add(f"loc-{loc}", loc, Dimension.LOCATIONS, loc)
    for b in filters.beds:
        add(f"bed-{b}", f"{b} bed", Dimension.BEDS, b)
    for b in filters.baths:
        add(f"bath-{b}", f"{b} bath", Dimension.BATHS, b)
    for ft in filters.finance_types:
        add(f"ft-{ft}", ft, Dimension.FINANCE_TYPES, ft)
    if filters.new_listing_only:
        add("new", "New Listing", Dimension.NEW_LISTING)
    if filters.trending_only:
        add("trending", "Trending", Dimension.TRENDING)
    if filters.price_min > 0:
        add("pmin", f"{_money(filters.price_min)}+", Dimension.PRICE_MIN)
    if filters.price_max < settings.PRICE_CEILING:
        add("pmax", f"Up to {_money(filters.price_max)}", Dimension.PRICE_MAX)
    if filters.sqft_min > 0:
        add("smin", f"{_plain(filters.sqft_min)}+ sqft", Dimension.SQFT_MIN)
    if filters.sqft_max < settings.SQFT_CEILING:
        add("smax", f"Up to {_plain(filters.sqft_max)} sqft", Dimension.SQFT_MAX)

    return tags
