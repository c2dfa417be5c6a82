"""Predicate filtering of listings against a FilterState.

A record is kept only if every predicate passes. Multi-select dimensions
with nothing selected do not restrict anything.
"""

from __future__ import annotations

from typing import Callable, Iterable

from src.models import FilterState, Property

Predicate = Callable[[Property, FilterState], bool]


def _text(record: Property, filters: FilterState) -> bool:
    if not filters.query.strip():
        return True
    q = filters.query.lower()
    return any(q in field.lower() for field in (record.title, record.location, record.name) if field)


def _locations(record: Property, filters: FilterState) -> bool:
    return not filters.locations or record.location in filters.locations


def _beds(record: Property, filters: FilterState) -> bool:
    return not filters.beds or record.beds in filters.beds


def _baths(record: Property, filters: FilterState) -> bool:
    return not filters.baths or record.baths in filters.baths


def _finance_types(record: Property, filters: FilterState) -> bool:
    return not filters.finance_types or record.finance_type in filters.finance_types


def _new_listing(record: Property, filters: FilterState) -> bool:
    return not filters.new_listing_only or bool(record.new_listing)


def _trending(record: Property, filters: FilterState) -> bool:
    return not filters.trending_only or bool(record.trending)


def _price(record: Property, filters: FilterState) -> bool:
    return filters.price_min <= record.price_or_zero <= filters.price_max


def _sqft(record: Property, filters: FilterState) -> bool:
    return filters.sqft_min <= record.sqft_or_zero <= filters.sqft_max


PREDICATES: tuple[Predicate, ...] = (
    _text,
    _locations,
    _beds,
    _baths,
    _finance_types,
    _new_listing,
    _trending,
    _price,
    _sqft,
)


def matches(record: Property, filters: FilterState) -> bool:
    return all(predicate(record, filters) for predicate in PREDICATES)


def apply_filters(records: Iterable[Property], filters: FilterState) -> list[Property]:
    return [record for record in records if matches(record, filters)]
