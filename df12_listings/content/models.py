"""Value types describing publishable content entries."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
import types
import typing as typ
from pathlib import Path  # noqa: TC003 - used for runtime type metadata


class ContentError(ValueError):
    """Raised when a content file cannot be turned into a content item."""


@dc.dataclass(frozen=True, slots=True)
class Category:
    """A named tag attached to a content item.

    Attributes
    ----------
    name : str
        Display name; compared by exact, case-sensitive equality.
    slug : str, optional
        URL-safe identifier when the content source provides one.
    parent : str, optional
        Name of the enclosing category for hierarchical categories.
    """

    name: str
    slug: str | None = None
    parent: str | None = None


@dc.dataclass(frozen=True, slots=True)
class ContentItem:
    """One publishable entry and the metadata listings depend on.

    Attributes
    ----------
    title : str
        Human-readable title.
    slug : str
        URL-safe identifier for the entry.
    date : datetime
        Publication timestamp (timezone-aware, UTC); the default ordering key.
    updated : datetime, optional
        Last-modified timestamp (timezone-aware, UTC).
    categories : tuple[Category, ...]
        Categories in the order the source declares them.
    sticky : int | float
        Pin priority; higher values float earlier in listings. ``0`` when unset.
    hidden : bool
        Whether the entry is hidden from the general index. Hidden entries are
        still eligible for category listings.
    source : Path, optional
        File the entry was loaded from.
    body : str
        Raw Markdown body. Listings never interpret it.
    fields : Mapping[str, Any]
        Any further front-matter keys, kept verbatim.
    """

    title: str
    slug: str
    date: dt.datetime
    updated: dt.datetime | None = None
    categories: tuple[Category, ...] = ()
    sticky: int | float = 0
    hidden: bool = False
    source: Path | None = None
    body: str = ""
    fields: typ.Mapping[str, typ.Any] = dc.field(
        default_factory=lambda: types.MappingProxyType({})
    )

    def field(self, name: str) -> typ.Any:
        """Return the value of the named attribute or front-matter field.

        Declared attributes take precedence over ``fields``. A ``None`` value
        is treated as undefined.

        Raises
        ------
        KeyError
            If neither the item nor its ``fields`` define ``name``.
        """
        if name in _ATTRIBUTE_NAMES:
            value = getattr(self, name)
        else:
            value = self.fields.get(name)
        if value is None:
            msg = f"Content item '{self.slug}' has no field '{name}'."
            raise KeyError(msg)
        return value

    def in_category(self, name: str) -> bool:
        """Return whether any category on the item is named exactly ``name``."""
        return any(category.name == name for category in self.categories)


_ATTRIBUTE_NAMES = frozenset(
    field.name for field in dc.fields(ContentItem) if field.name != "fields"
)


__all__ = ["Category", "ContentError", "ContentItem"]
