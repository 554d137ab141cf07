"""Filter, order, and paginate content items into listing pages.

The pipeline is a chain of pure transformations: :func:`select_items` keeps
the items in the listing's category, :func:`order_items` applies the field
ordering and the sticky override, :func:`paginate` splits the result into
addressed chunks, and :func:`emit_pages` wraps those chunks into
:class:`ListingPage` descriptors. :func:`build_listing_pages` runs the chain
for one configured listing.

Example
-------
>>> from df12_listings.pipeline import build_listing_pages
>>> pages = build_listing_pages(items, site.get_listing("explorations"))  # doctest: +SKIP
>>> [page.path for page in pages]  # doctest: +SKIP
['explorations/', 'explorations/page/2/']
"""

from __future__ import annotations

import logging
import typing as typ

from .emitter import ListingPage, emit_pages
from .orderer import (
    OrderSpec,
    order_by_field,
    order_by_sticky,
    order_items,
    parse_order_by,
)
from .paginator import PageChunk, page_path, paginate, total_pages
from .selector import select_items

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from df12_listings.config import ListingConfig
    from df12_listings.content import ContentItem

logger = logging.getLogger(__name__)


def build_listing_pages(
    collection: cabc.Iterable[ContentItem] | None, listing: ListingConfig
) -> list[ListingPage]:
    """Return the page descriptors for ``listing`` built from ``collection``.

    Parameters
    ----------
    collection : Iterable[ContentItem] or None
        Every content item of the site, hidden ones included. ``None`` means
        the collection is absent.
    listing : ListingConfig
        Category, ordering, pagination, layout, and extra data for the listing.

    Returns
    -------
    list[ListingPage]
        One descriptor per page in index order; empty when no item belongs to
        the listing's category.

    Raises
    ------
    ListingConfigError
        If the ordering field is missing or the page size is invalid.
    """
    selected = select_items(collection, listing.category)
    if not selected:
        logger.debug("listing %s: no items in category %r", listing.key, listing.category)
        return []
    pagination = listing.pagination
    ordered = order_items(selected, pagination.order_by)
    chunks = paginate(ordered, pagination)
    pages = emit_pages(
        chunks,
        per_page=pagination.per_page,
        layouts=listing.layouts,
        extra_data=listing.extra_data,
    )
    logger.debug(
        "listing %s: %d item(s) across %d page(s)", listing.key, len(ordered), len(pages)
    )
    return pages


__all__ = [
    "ListingPage",
    "OrderSpec",
    "PageChunk",
    "build_listing_pages",
    "emit_pages",
    "order_by_field",
    "order_by_sticky",
    "order_items",
    "page_path",
    "paginate",
    "parse_order_by",
    "select_items",
    "total_pages",
]
