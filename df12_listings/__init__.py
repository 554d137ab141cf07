"""Generate paginated category listings for the df12 site.

This package selects the content items in a curated category, orders them
(field ordering plus a sticky override), paginates them into addressed pages,
and renders those pages with shared templates.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``build_listing_pages``: Pure pipeline from content items to page descriptors.

Examples
--------
>>> from df12_listings import main
>>> main()  # doctest: +SKIP
>>> from df12_listings import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main
from .pipeline import build_listing_pages

__all__ = ["app", "build_listing_pages", "main"]
