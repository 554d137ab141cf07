"""Partition an ordered item sequence into fixed-size, addressed pages.

Addressing follows one rule, implemented by :func:`page_path`: the first page
lives at the listing's ``path_base`` exactly as configured, and page ``k`` for
``k > 1`` lives at ``<path_base>/<page_dir>/<k>/``.

Example
-------
>>> page_path("explorations/", "page", 1)
'explorations/'
>>> page_path("explorations/", "page", 2)
'explorations/page/2/'
>>> page_path("", "page", 3)
'page/3/'
"""

from __future__ import annotations

import dataclasses as dc
import math
import typing as typ

from df12_listings.config import validate_per_page

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from df12_listings.config import PaginationConfig
    from df12_listings.content import ContentItem


@dc.dataclass(frozen=True, slots=True)
class PageChunk:
    """A contiguous slice of the ordered sequence with its address.

    Attributes
    ----------
    items : tuple[ContentItem, ...]
        Between one and ``per_page`` items.
    index : int
        1-based position of the chunk.
    total_pages : int
        Number of chunks produced for the listing.
    path : str
        Address computed by :func:`page_path`.
    """

    items: tuple[ContentItem, ...]
    index: int
    total_pages: int
    path: str


def page_path(path_base: str, page_dir: str, index: int) -> str:
    """Return the address of page ``index`` for a listing rooted at ``path_base``.

    Raises
    ------
    ValueError
        If ``index`` is lower than 1.
    """
    if index < 1:
        msg = f"Page index must be 1 or greater, got {index}."
        raise ValueError(msg)
    if index == 1:
        return path_base
    prefix = path_base.rstrip("/")
    suffix = f"{page_dir.strip('/')}/{index}/"
    return f"{prefix}/{suffix}" if prefix else suffix


def total_pages(count: int, per_page: int) -> int:
    """Return ``ceil(count / per_page)``, which is ``0`` for an empty sequence."""
    return math.ceil(count / validate_per_page(per_page))


def paginate(
    items: cabc.Sequence[ContentItem], config: PaginationConfig
) -> list[PageChunk]:
    """Group ``items`` into consecutive chunks of at most ``config.per_page``.

    Raises
    ------
    ListingConfigError
        If ``config.per_page`` is not a positive integer.
    """
    per_page = validate_per_page(config.per_page)
    total = total_pages(len(items), per_page)
    return [
        PageChunk(
            items=tuple(items[offset : offset + per_page]),
            index=index,
            total_pages=total,
            path=page_path(config.path_base, config.page_dir, index),
        )
        for index, offset in enumerate(range(0, len(items), per_page), start=1)
    ]


__all__ = ["PageChunk", "page_path", "paginate", "total_pages"]
