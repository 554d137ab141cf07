"""Typed dataclasses describing df12 listing configuration structures."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from df12_listings._constants import (
    DEFAULT_ORDER_BY,
    DEFAULT_PAGE_DIR,
    DEFAULT_PER_PAGE,
    FALLBACK_LAYOUT,
)


class ListingConfigError(ValueError):
    """Raised when the listing configuration is invalid or incomplete."""


def validate_per_page(value: object) -> int:
    """Return ``value`` when it is a positive integer, raising otherwise.

    Booleans are rejected even though they subclass ``int``; strings such as
    ``"10"`` are rejected rather than coerced.

    Raises
    ------
    ListingConfigError
        If ``value`` is not a positive integer.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"per_page must be a positive integer, got {value!r}."
        raise ListingConfigError(msg)
    if value < 1:
        msg = f"per_page must be a positive integer, got {value}."
        raise ListingConfigError(msg)
    return value


@dc.dataclass(slots=True)
class PaginationConfig:
    """Ordering and pagination options for a single listing.

    Attributes
    ----------
    path_base : str
        Address of the listing's first page (for example ``"explorations/"``).
    order_by : str
        Field name used for the primary ordering; a leading ``-`` sorts
        descending.
    per_page : int
        Maximum number of items on each page.
    page_dir : str
        Segment inserted into the address of every page after the first.
    """

    path_base: str
    order_by: str = DEFAULT_ORDER_BY
    per_page: int = DEFAULT_PER_PAGE
    page_dir: str = DEFAULT_PAGE_DIR

    def __post_init__(self) -> None:
        """Reject invalid values at construction time."""
        validate_per_page(self.per_page)
        if not isinstance(self.order_by, str) or not self.order_by.lstrip("-"):
            msg = f"order_by must name a field, got {self.order_by!r}."
            raise ListingConfigError(msg)
        if not isinstance(self.page_dir, str) or not self.page_dir.strip("/"):
            msg = f"pagination_dir must be a non-empty string, got {self.page_dir!r}."
            raise ListingConfigError(msg)


@dc.dataclass(slots=True)
class ListingConfig:
    """A fully resolved listing definition sourced from YAML config."""

    key: str
    category: str
    pagination: PaginationConfig
    title: str
    output_dir: Path
    layouts: tuple[str, ...] = ()
    extra_data: dict[str, typ.Any] = dc.field(default_factory=dict)

    def __post_init__(self) -> None:
        """Default the layout fallback chain to the listing key then ``index``."""
        if not self.layouts:
            self.layouts = (self.key, FALLBACK_LAYOUT)


@dc.dataclass(slots=True)
class SiteConfig:
    """Collection of listing configs alongside shared defaults."""

    listings: dict[str, ListingConfig]
    content_dir: Path = Path("source/_posts")
    output_dir: Path = Path("public")
    site_name: str = "df12 Productions"
    default_listing: str | None = None

    def get_listing(self, listing_id: str | None) -> ListingConfig:
        """Return the requested listing or fall back to the configured default."""
        if listing_id is None:
            return self._get_default_listing()
        try:
            return self.listings[listing_id]
        except KeyError as exc:
            available = ", ".join(sorted(self.listings))
            msg = f"Unknown listing '{listing_id}'. Known listings: {available}"
            raise KeyError(msg) from exc

    def _get_default_listing(self) -> ListingConfig:
        """Return the configured default listing or the first defined listing."""
        if self.default_listing and self.default_listing in self.listings:
            return self.listings[self.default_listing]
        if not self.listings:
            msg = "No listings configured in layout file."
            raise ListingConfigError(msg)
        first_key = next(iter(self.listings))
        return self.listings[first_key]


__all__ = [
    "ListingConfig",
    "ListingConfigError",
    "PaginationConfig",
    "SiteConfig",
    "validate_per_page",
]
