"""Select the content items that belong to one listing category."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from df12_listings.content import ContentItem


def select_items(
    collection: cabc.Iterable[ContentItem] | None, category: str
) -> list[ContentItem]:
    """Return the items carrying a category named exactly ``category``.

    Hidden items are eligible. Input order is preserved and matching is
    case-sensitive. An absent collection yields an empty list.

    Examples
    --------
    >>> select_items(None, "Explorations")
    []
    """
    if collection is None:
        return []
    return [item for item in collection if item.in_category(category)]


__all__ = ["select_items"]
