"""Order listing items by a configured field, then by sticky priority.

Ordering happens in two stable passes. The primary pass sorts on the field
named by ``order_by`` (``"-date"`` by default, newest first). The second pass
sorts on ``sticky`` descending, so pinned items float to the front while items
sharing a priority keep the order the primary pass gave them.

Example
-------
>>> parse_order_by("-date")
OrderSpec(field='date', descending=True)
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from df12_listings.config import ListingConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from df12_listings.content import ContentItem


@dc.dataclass(frozen=True, slots=True)
class OrderSpec:
    """Parsed form of an ``order_by`` option."""

    field: str
    descending: bool = False


def parse_order_by(order_by: str) -> OrderSpec:
    """Split an ``order_by`` option into a field name and direction.

    Raises
    ------
    ListingConfigError
        If ``order_by`` is not a string or names no field.
    """
    if not isinstance(order_by, str):
        msg = f"order_by must be a string, got {order_by!r}."
        raise ListingConfigError(msg)
    descending = order_by.startswith("-")
    field = order_by[1:] if descending else order_by
    field = field.strip()
    if not field:
        msg = f"order_by must name a field, got {order_by!r}."
        raise ListingConfigError(msg)
    return OrderSpec(field=field, descending=descending)


def order_by_field(
    items: cabc.Sequence[ContentItem], order_by: str
) -> list[ContentItem]:
    """Return a new list stably sorted on the field named by ``order_by``.

    Raises
    ------
    ListingConfigError
        If an item lacks the field or the field values cannot be compared.
    """
    spec = parse_order_by(order_by)
    keyed: list[tuple[typ.Any, ContentItem]] = []
    for item in items:
        try:
            keyed.append((item.field(spec.field), item))
        except KeyError as exc:
            msg = f"Cannot order by '{spec.field}': item '{item.slug}' has no such field."
            raise ListingConfigError(msg) from exc
    try:
        keyed.sort(key=lambda pair: pair[0], reverse=spec.descending)
    except TypeError as exc:
        msg = f"Cannot order by '{spec.field}': values are not comparable ({exc})."
        raise ListingConfigError(msg) from exc
    return [item for _, item in keyed]


def order_by_sticky(items: cabc.Sequence[ContentItem]) -> list[ContentItem]:
    """Return a new list with higher ``sticky`` priorities first, stably."""
    return sorted(items, key=lambda item: item.sticky or 0, reverse=True)


def order_items(items: cabc.Sequence[ContentItem], order_by: str) -> list[ContentItem]:
    """Apply the field ordering followed by the sticky override."""
    return order_by_sticky(order_by_field(items, order_by))


__all__ = [
    "OrderSpec",
    "order_by_field",
    "order_by_sticky",
    "order_items",
    "parse_order_by",
]
