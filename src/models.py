from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from src.config import settings

# Sorts before every parseable timestamp
EARLIEST = float("-inf")


class Property(BaseModel):
    """One listing row as stored in the ``properties`` table."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str = ""
    image_url: str | None = None
    youtube_video_url: str | None = None
    use_embed_player: bool | None = None
    subtitle: str | None = None
    name: str | None = None
    location: str | None = None
    finance_type: str | None = None
    price: float | None = None
    beds: int | None = None
    baths: int | None = None
    kitchens: int | None = None
    sqft: float | None = None
    agent_name: str | None = None
    agent_phone: str | None = None
    new_listing: bool | None = None
    trending: bool | None = None
    created_at: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("title", mode="before")
    @classmethod
    def blank_title(cls, value: Any) -> str:
        return "" if value is None else value

    @property
    def price_or_zero(self) -> float:
        return self.price if self.price is not None else 0

    @property
    def sqft_or_zero(self) -> float:
        return self.sqft if self.sqft is not None else 0

    def created_timestamp(self) -> float:
        """POSIX time of ``created_at``; missing or unparseable values give EARLIEST."""
        if not self.created_at:
            return EARLIEST
        try:
            parsed = datetime.fromisoformat(self.created_at.replace("Z", "+00:00"))
        except ValueError:
            return EARLIEST
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.timestamp()


def format_price(price: float | None) -> str:
    if price is None:
        return "Price on request"
    return f"{settings.CURRENCY_SYMBOL}{price:,.0f}"


class User(BaseModel):
    id: str
    email: str | None = None


class SortOption(str, Enum):
    NEWEST = "newest"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    TRENDING = "trending"

    @property
    def label(self) -> str:
        return SORT_LABELS[self]


SORT_LABELS: dict[SortOption, str] = {
    SortOption.NEWEST: "Newest First",
    SortOption.PRICE_ASC: "Price: Low → High",
    SortOption.PRICE_DESC: "Price: High → Low",
    SortOption.TRENDING: "Trending",
}


class FilterState(BaseModel):
    """Explore page filter selections.

    Multi-select dimensions are tuples used as ordered sets: values keep the
    order they were selected in and never repeat. Every field's default is
    its inactive value.
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    locations: tuple[str, ...] = ()
    beds: tuple[int, ...] = ()
    baths: tuple[int, ...] = ()
    finance_types: tuple[str, ...] = ()
    new_listing_only: bool = False
    trending_only: bool = False
    price_min: float = 0
    price_max: float = settings.PRICE_CEILING
    sqft_min: float = 0
    sqft_max: float = settings.SQFT_CEILING

    @field_validator("locations", "beds", "baths", "finance_types")
    @classmethod
    def dedupe(cls, value: tuple) -> tuple:
        return tuple(dict.fromkeys(value))

    def replace(self, **changes: Any) -> FilterState:
        return FilterState.model_validate({**self.model_dump(), **changes})

    def is_default(self) -> bool:
        return self == FilterState()


class ExploreState(BaseModel):
    model_config = ConfigDict(frozen=True)

    filters: FilterState = FilterState()
    sort: SortOption = SortOption.NEWEST


class ImageFile(BaseModel):
    name: str
    content: bytes
    content_type: str = ""


class UploadForm(BaseModel):
    """Raw upload form inputs; numbers stay strings until submit."""

    title: str = ""
    subtitle: str = ""
    name: str = ""
    location: str = ""
    finance_type: str = ""
    price: str = ""
    beds: str = ""
    baths: str = ""
    kitchens: str = ""
    sqft: str = ""
    agent_name: str = ""
    agent_phone: str = ""
    youtube_video_url: str = ""
    use_embed_player: bool = False
    new_listing: bool = True
    trending: bool = False
