"""Utility helpers shared by the df12 listing configuration loader."""

from __future__ import annotations

import typing as typ

from .models import ListingConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _default_category(key: str) -> str:
    """Derive a category name from a listing key (``deep-dives`` -> ``Deep Dives``)."""
    return key.replace("-", " ").replace("_", " ").title()


def _default_path(key: str) -> str:
    """Return the default first-page address for a listing key."""
    return f"{key.strip('/')}/"


def _build_layouts(key: str, value: object | None) -> tuple[str, ...]:
    """Normalize the configured layout fallback chain into a tuple of names.

    An absent value yields an empty tuple so the listing applies its default
    chain. A single string is accepted as a one-element chain.
    """
    match value:
        case None:
            return ()
        case str() as name:
            names = [name]
        case list() | tuple():
            names = [str(entry).strip() for entry in value]
        case _:
            msg = f"Listing '{key}' layouts must be a string or list, got {value!r}."
            raise ListingConfigError(msg)
    cleaned = tuple(name for name in names if name)
    if not cleaned:
        msg = f"Listing '{key}' declares an empty layouts list."
        raise ListingConfigError(msg)
    return cleaned


def _build_extra_data(key: str, value: object | None) -> dict[str, typ.Any]:
    """Return a plain dict copy of the listing's ``data`` mapping."""
    if value is None:
        return {}
    if not isinstance(value, typ.Mapping):
        msg = f"Listing '{key}' data must be a mapping, got {value!r}."
        raise ListingConfigError(msg)
    return {str(name): entry for name, entry in value.items()}


__all__ = [
    "_build_extra_data",
    "_build_layouts",
    "_default_category",
    "_default_path",
    "_optional_str",
]
