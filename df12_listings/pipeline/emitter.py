"""Wrap paginated chunks into the page descriptors handed to the renderer."""

from __future__ import annotations

import dataclasses as dc
import types
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from df12_listings.content import ContentItem

    from .paginator import PageChunk


@dc.dataclass(frozen=True, slots=True)
class ListingPage:
    """Everything the renderer needs to produce one listing page.

    Attributes
    ----------
    items : tuple[ContentItem, ...]
        Items shown on this page, in display order.
    index : int
        1-based page number.
    total_pages : int
        Page count shared by every page of the listing.
    path : str
        Address of the page relative to the site root.
    layouts : tuple[str, ...]
        Template names to try in order; the renderer uses the first that exists.
    extra_data : Mapping[str, Any]
        Read-only mapping attached identically to every page.
    per_page : int
        Page capacity the listing was paginated with.
    prev_index : int | None
        Number of the previous page, if any.
    prev_path : str
        Address of the previous page, or ``""`` on the first page.
    next_index : int | None
        Number of the next page, if any.
    next_path : str
        Address of the next page, or ``""`` on the last page.
    """

    items: tuple[ContentItem, ...]
    index: int
    total_pages: int
    path: str
    layouts: tuple[str, ...]
    extra_data: typ.Mapping[str, typ.Any]
    per_page: int
    prev_index: int | None = None
    prev_path: str = ""
    next_index: int | None = None
    next_path: str = ""

    @property
    def is_first(self) -> bool:
        """Return whether this is the listing's canonical first page."""
        return self.index == 1

    @property
    def is_last(self) -> bool:
        """Return whether this is the final page."""
        return self.index == self.total_pages


def emit_pages(
    chunks: cabc.Sequence[PageChunk],
    *,
    per_page: int,
    layouts: cabc.Sequence[str],
    extra_data: cabc.Mapping[str, typ.Any],
) -> list[ListingPage]:
    """Assemble one :class:`ListingPage` per chunk, linking neighbours."""
    shared_data = types.MappingProxyType(dict(extra_data))
    layout_chain = tuple(layouts)
    pages: list[ListingPage] = []
    for position, chunk in enumerate(chunks):
        previous = chunks[position - 1] if position > 0 else None
        following = chunks[position + 1] if position + 1 < len(chunks) else None
        pages.append(
            ListingPage(
                items=chunk.items,
                index=chunk.index,
                total_pages=chunk.total_pages,
                path=chunk.path,
                layouts=layout_chain,
                extra_data=shared_data,
                per_page=per_page,
                prev_index=previous.index if previous else None,
                prev_path=previous.path if previous else "",
                next_index=following.index if following else None,
                next_path=following.path if following else "",
            )
        )
    return pages


__all__ = ["ListingPage", "emit_pages"]
