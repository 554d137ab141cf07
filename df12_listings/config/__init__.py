"""Load and validate listing configuration YAML for df12 site builds.

This subpackage parses the project's ``listings.yaml`` file, merges site-wide
defaults (ordering, page size, pagination directory) with per-listing
overrides, and produces typed dataclasses (:class:`SiteConfig`,
:class:`ListingConfig`, :class:`PaginationConfig`) that the listing pipeline
consumes. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from df12_listings.config import load_site_config
>>> site = load_site_config(Path("config/listings.yaml"))  # doctest: +SKIP
>>> site.get_listing("explorations").pagination.path_base  # doctest: +SKIP
'explorations/'
"""

from .loader import load_site_config
from .models import (
    ListingConfig,
    ListingConfigError,
    PaginationConfig,
    SiteConfig,
    validate_per_page,
)

__all__ = [
    "ListingConfig",
    "ListingConfigError",
    "PaginationConfig",
    "SiteConfig",
    "load_site_config",
    "validate_per_page",
]
