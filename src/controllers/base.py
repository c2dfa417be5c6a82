from __future__ import annotations

import logging
from enum import Enum

from src.db import Backend, BackendError, fetch_properties
from src.models import Property

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch properties"


class FormError(Exception):
    """Raised when form input is rejected before any request is made."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class LoadState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


class ListingPage:
    """Base for pages that show the full listing collection.

    Listings are fetched fresh on every ``load()``; there is no cache shared
    between page loads.
    """

    def __init__(self, backend: Backend) -> None:
        self.backend = backend
        self.properties: list[Property] = []
        self.state = LoadState.LOADING
        self.error: str | None = None

    def load(self) -> None:
        self.state = LoadState.LOADING
        self.error = None
        try:
            self.properties = fetch_properties(self.backend)
        except BackendError as e:
            self.error = e.message
            self.state = LoadState.ERROR
            return
        except Exception:
            logger.exception("Unexpected error while fetching properties")
            self.error = FETCH_FAILED
            self.state = LoadState.ERROR
            return
        self.state = LoadState.READY

    @property
    def loading(self) -> bool:
        return self.state is LoadState.LOADING
