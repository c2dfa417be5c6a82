from __future__ import annotations

from src.controllers.base import ListingPage
from src.db import Backend
from src.models import FilterState, Property
from src.search.filters import apply_filters


class HomeController(ListingPage):
    """Landing page: hero search box over the full listing grid."""

    def __init__(self, backend: Backend) -> None:
        super().__init__(backend)
        self.search = ""

    @property
    def searching(self) -> bool:
        return bool(self.search.strip())

    @property
    def results(self) -> list[Property]:
        return apply_filters(self.properties, FilterState(query=self.search))

    @property
    def results_heading(self) -> str:
        count = len(self.results)
        heading = f"{count} properties found"
        if self.searching:
            heading += f' for "{self.search}"'
        return heading

    @property
    def empty_message(self) -> str:
        if self.searching:
            return "No properties found matching your search"
        return "No properties available"

    def clear_search(self) -> None:
        self.search = ""

    @property
    def explore_query(self) -> str | None:
        """Query handed to the explore page, or None for an unfiltered visit."""
        return self.search.strip() or None
