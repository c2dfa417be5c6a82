from __future__ import annotations

import logging
from enum import Enum

from src.controllers.base import ListingPage, LoadState
from src.db import Backend
from src.models import ExploreState, FilterState, Property, SortOption
from src.search.facets import Facets, derive_facets
from src.search.filters import apply_filters
from src.search.intents import ClearAll, Intent, SetSort, update
from src.search.sorting import sort_properties
from src.search.tags import ActiveTag, active_tags

logger = logging.getLogger(__name__)


class View(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    RESULTS = "results"


class ExploreController(ListingPage):
    """Search page: sidebar facets, filter chips, sort and result grid.

    All UI input goes through ``dispatch``; results, facets and tags are
    recomputed from the loaded listings and the current ExploreState.
    """

    def __init__(self, backend: Backend, initial_query: str = "") -> None:
        super().__init__(backend)
        self.explore = ExploreState(filters=FilterState(query=initial_query or ""))

    @property
    def filters(self) -> FilterState:
        return self.explore.filters

    @property
    def sort(self) -> SortOption:
        return self.explore.sort

    def dispatch(self, intent: Intent) -> ExploreState:
        logger.debug("Dispatch %r", intent)
        self.explore = update(self.explore, intent)
        return self.explore

    def set_sort(self, key: SortOption | str) -> None:
        self.dispatch(SetSort(SortOption(key)))

    def clear_all(self) -> None:
        self.dispatch(ClearAll())

    def remove_tag(self, tag: ActiveTag) -> None:
        self.dispatch(tag.intent)

    @property
    def facets(self) -> Facets:
        return derive_facets(self.properties)

    @property
    def results(self) -> list[Property]:
        return sort_properties(apply_filters(self.properties, self.filters), self.sort)

    @property
    def active_tags(self) -> list[ActiveTag]:
        return active_tags(self.filters)

    @property
    def result_count_label(self) -> str:
        count = len(self.results)
        return f"{count} {'property' if count == 1 else 'properties'}"

    @property
    def view(self) -> View:
        if self.state is LoadState.LOADING:
            return View.LOADING
        if self.state is LoadState.ERROR:
            return View.ERROR
        return View.RESULTS if self.results else View.EMPTY
