"""Facet values for the explore sidebar, derived from the loaded listings."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, TypeVar

from src.models import Property

T = TypeVar("T")


def _present(value: Any) -> bool:
    return value is not None and value != ""


def derive_facet(records: Iterable[Property], accessor: Callable[[Property], T | None]) -> list[T]:
    """Distinct non-empty values of ``accessor`` across ``records``, ascending."""
    return sorted({value for value in map(accessor, records) if _present(value)})


def facet_counts(
    records: Iterable[Property], accessor: Callable[[Property], T | None]
) -> list[tuple[T, int]]:
    counts = Counter(value for value in map(accessor, records) if _present(value))
    return [(value, counts[value]) for value in sorted(counts)]


@dataclass
class Facets:
    locations: list[tuple[str, int]] = field(default_factory=list)
    beds: list[tuple[int, int]] = field(default_factory=list)
    baths: list[tuple[int, int]] = field(default_factory=list)
    finance_types: list[tuple[str, int]] = field(default_factory=list)
    new_listing_count: int = 0
    trending_count: int = 0


def derive_facets(records: list[Property]) -> Facets:
    return Facets(
        locations=facet_counts(records, lambda p: p.location),
        beds=facet_counts(records, lambda p: p.beds),
        baths=facet_counts(records, lambda p: p.baths),
        finance_types=facet_counts(records, lambda p: p.finance_type),
        new_listing_count=sum(1 for p in records if p.new_listing),
        trending_count=sum(1 for p in records if p.trending),
    )
