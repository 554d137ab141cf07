"""Load listing configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from df12_listings._constants import DEFAULT_ORDER_BY, DEFAULT_PAGE_DIR, DEFAULT_PER_PAGE

from .helpers import (
    _build_extra_data,
    _build_layouts,
    _default_category,
    _default_path,
    _optional_str,
)
from .models import ListingConfig, ListingConfigError, PaginationConfig, SiteConfig

logger = logging.getLogger(__name__)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site's paginated listings.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/listings.yaml``).

    Returns
    -------
    SiteConfig
        Parsed site configuration, including listing definitions, the content
        directory, and the output directory.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ListingConfigError
        If required sections are missing or a value is invalid (for example,
        a non-positive ``per_page``). Values are never coerced.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from df12_listings.config import load_site_config
    >>> config = load_site_config(Path("config/listings.yaml"))  # doctest: +SKIP
    >>> config.get_listing("explorations").pagination.per_page  # doctest: +SKIP
    10
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    if not isinstance(defaults, dict):
        msg = "The 'defaults' section must be a mapping."
        raise ListingConfigError(msg)

    content_dir = Path(defaults.get("content_dir", "source/_posts"))
    output_dir = Path(defaults.get("output_dir", "public"))
    site_name = defaults.get("site_name", "df12 Productions")
    default_listing = _optional_str(defaults.get("default_listing"))

    listing_defaults = _ListingDefaults(
        order_by=defaults.get("order_by", DEFAULT_ORDER_BY),
        per_page=defaults.get("per_page", DEFAULT_PER_PAGE),
        page_dir=defaults.get("pagination_dir", DEFAULT_PAGE_DIR),
        output_dir=output_dir,
    )

    listings_raw = raw.get("listings") or {}
    if not listings_raw:
        msg = "No listings defined in configuration."
        raise ListingConfigError(msg)

    listings: dict[str, ListingConfig] = {}
    for key, payload in listings_raw.items():
        match payload:
            case dict():
                listings[key] = _build_listing_config(
                    key=key, payload=payload, defaults=listing_defaults
                )
            case None:
                listings[key] = _build_listing_config(
                    key=key, payload={}, defaults=listing_defaults
                )
            case _:
                msg = f"Listing '{key}' must be a mapping."
                raise ListingConfigError(msg)

    logger.debug("loaded %d listing(s) from %s", len(listings), path)
    return SiteConfig(
        listings=listings,
        content_dir=content_dir,
        output_dir=output_dir,
        site_name=site_name,
        default_listing=default_listing,
    )


@dc.dataclass(slots=True)
class _ListingDefaults:
    """Internal container for site-wide listing default values."""

    order_by: typ.Any
    per_page: typ.Any
    page_dir: typ.Any
    output_dir: Path


def _build_listing_config(
    *,
    key: str,
    payload: typ.Mapping[str, typ.Any],
    defaults: _ListingDefaults,
) -> ListingConfig:
    """Build a ListingConfig for a single listing entry using defaults and overrides."""
    category = payload.get("category") or _default_category(key)
    if not isinstance(category, str):
        msg = f"Listing '{key}' category must be a string, got {category!r}."
        raise ListingConfigError(msg)

    path_base = payload.get("path", _default_path(key))
    if not isinstance(path_base, str):
        msg = f"Listing '{key}' path must be a string, got {path_base!r}."
        raise ListingConfigError(msg)

    try:
        pagination = PaginationConfig(
            path_base=path_base,
            order_by=payload.get("order_by", defaults.order_by),
            per_page=payload.get("per_page", defaults.per_page),
            page_dir=payload.get("pagination_dir", defaults.page_dir),
        )
    except ListingConfigError as exc:
        msg = f"Listing '{key}': {exc}"
        raise ListingConfigError(msg) from exc

    title = payload.get("title") or category
    output_dir = Path(payload.get("output_dir", defaults.output_dir))

    return ListingConfig(
        key=key,
        category=category,
        pagination=pagination,
        title=title,
        output_dir=output_dir,
        layouts=_build_layouts(key, payload.get("layouts")),
        extra_data=_build_extra_data(key, payload.get("data")),
    )


__all__ = ["load_site_config"]
