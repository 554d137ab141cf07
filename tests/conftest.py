"""Shared fixtures for df12 listings tests."""

from __future__ import annotations

import datetime as dt
import typing as typ

import pytest

from df12_listings.config import ListingConfig, PaginationConfig
from df12_listings.content import Category, ContentItem

if typ.TYPE_CHECKING:
    from pathlib import Path

BASE_DATE = dt.datetime(2025, 1, 1, tzinfo=dt.UTC)


def make_item(
    slug: str,
    *,
    days: int = 0,
    categories: tuple[str, ...] = ("Explorations",),
    sticky: int | float = 0,
    hidden: bool = False,
    body: str = "",
    **fields: typ.Any,
) -> ContentItem:
    """Build a ContentItem dated ``days`` after the base date."""
    return ContentItem(
        title=slug.replace("-", " ").title(),
        slug=slug,
        date=BASE_DATE + dt.timedelta(days=days),
        categories=tuple(Category(name=name) for name in categories),
        sticky=sticky,
        hidden=hidden,
        body=body,
        fields=fields,
    )


def make_listing(
    output_dir: Path,
    *,
    per_page: int = 10,
    order_by: str = "-date",
    path_base: str = "explorations/",
    extra_data: dict[str, typ.Any] | None = None,
) -> ListingConfig:
    """Build an Explorations ListingConfig writing below ``output_dir``."""
    return ListingConfig(
        key="explorations",
        category="Explorations",
        pagination=PaginationConfig(
            path_base=path_base, order_by=order_by, per_page=per_page
        ),
        title="Explorations",
        output_dir=output_dir,
        extra_data=(
            {"__explorations": True, "subtitle": "Curiosity-driven dives"}
            if extra_data is None
            else extra_data
        ),
    )


@pytest.fixture
def listing(tmp_path: Path) -> ListingConfig:
    """Return the default Explorations listing rooted in a temp directory."""
    return make_listing(tmp_path / "public")


@pytest.fixture
def twelve_items() -> list[ContentItem]:
    """Twelve matching items with strictly decreasing dates."""
    return [make_item(f"post-{n:02d}", days=100 - n) for n in range(1, 13)]
