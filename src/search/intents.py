"""Explore page intents and the reducer that applies them.

UI controls never mutate state directly: each one emits an intent and
``update`` returns the next ExploreState.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from src.models import ExploreState, FilterState, SortOption


class Dimension(str, Enum):
    QUERY = "query"
    LOCATIONS = "locations"
    BEDS = "beds"
    BATHS = "baths"
    FINANCE_TYPES = "finance_types"
    NEW_LISTING = "new_listing_only"
    TRENDING = "trending_only"
    PRICE_MIN = "price_min"
    PRICE_MAX = "price_max"
    SQFT_MIN = "sqft_min"
    SQFT_MAX = "sqft_max"


MULTI_SELECT = frozenset({Dimension.LOCATIONS, Dimension.BEDS, Dimension.BATHS, Dimension.FINANCE_TYPES})
FLAGS = frozenset({Dimension.NEW_LISTING, Dimension.TRENDING})


@dataclass(frozen=True)
class ApplyFilter:
    dimension: Dimension
    value: Any


@dataclass(frozen=True)
class ToggleFilter:
    dimension: Dimension
    value: Any = None


@dataclass(frozen=True)
class ClearFilter:
    dimension: Dimension
    value: Any = None


@dataclass(frozen=True)
class ClearAll:
    pass


@dataclass(frozen=True)
class SetSort:
    key: SortOption


Intent = Union[ApplyFilter, ToggleFilter, ClearFilter, ClearAll, SetSort]


def _default(dimension: Dimension) -> Any:
    return FilterState.model_fields[dimension.value].default


def apply_filter(filters: FilterState, dimension: Dimension | str, value: Any) -> FilterState:
    """Set a dimension. Multi-select dimensions gain ``value`` alongside their current values."""
    dimension = Dimension(dimension)
    if dimension in MULTI_SELECT:
        current = getattr(filters, dimension.value)
        return filters.replace(**{dimension.value: (*current, value)})
    if dimension in FLAGS:
        value = bool(value)
    return filters.replace(**{dimension.value: value})


def toggle_filter(filters: FilterState, dimension: Dimension | str, value: Any = None) -> FilterState:
    dimension = Dimension(dimension)
    if dimension in MULTI_SELECT:
        current = getattr(filters, dimension.value)
        if value in current:
            return clear_filter(filters, dimension, value)
        return apply_filter(filters, dimension, value)
    if dimension in FLAGS:
        return filters.replace(**{dimension.value: not getattr(filters, dimension.value)})
    raise ValueError(f"{dimension.value} cannot be toggled")


def clear_filter(filters: FilterState, dimension: Dimension | str, value: Any = None) -> FilterState:
    """Reset one dimension, or drop just ``value`` from a multi-select dimension."""
    dimension = Dimension(dimension)
    if dimension in MULTI_SELECT and value is not None:
        current = getattr(filters, dimension.value)
        return filters.replace(**{dimension.value: tuple(v for v in current if v != value)})
    return filters.replace(**{dimension.value: _default(dimension)})


def clear_all(filters: FilterState | None = None) -> FilterState:
    return FilterState()


def update(state: ExploreState, intent: Intent) -> ExploreState:
    if isinstance(intent, ApplyFilter):
        filters = apply_filter(state.filters, intent.dimension, intent.value)
    elif isinstance(intent, ToggleFilter):
        filters = toggle_filter(state.filters, intent.dimension, intent.value)
    elif isinstance(intent, ClearFilter):
        filters = clear_filter(state.filters, intent.dimension, intent.value)
    elif isinstance(intent, ClearAll):
        filters = clear_all(state.filters)
    elif isinstance(intent, SetSort):
        return state.model_copy(update={"sort": SortOption(intent.key)})
    else:
        raise TypeError(f"Unknown intent: {intent!r}")
    return state.model_copy(update={"filters": filters})
