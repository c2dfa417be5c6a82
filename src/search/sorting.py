from __future__ import annotations

from typing import Iterable

from src.models import Property, SortOption


def sort_properties(records: Iterable[Property], key: SortOption | str) -> list[Property]:
    """Return a new list ordered by ``key``. Ties keep their input order."""
    key = SortOption(key)
    if key is SortOption.PRICE_ASC:
        return sorted(records, key=lambda p: p.price_or_zero)
    if key is SortOption.PRICE_DESC:
        return sorted(records, key=lambda p: p.price_or_zero, reverse=True)
    if key is SortOption.TRENDING:
        return sorted(records, key=lambda p: not p.trending)
    return sorted(records, key=lambda p: p.created_timestamp(), reverse=True)
