"""Common literal values used across df12_listings.

These constants keep defaults and metadata filenames centralized so the config
loader, pipeline, renderer, and tests import the same values without drifting.
Intended for internal use within the df12_listings package.

Examples
--------
>>> from df12_listings import _constants
>>> _constants.LISTING_META_TEMPLATE.format(key="explorations")
'.df12-listings-explorations-meta.json'
>>> _constants.DEFAULT_ORDER_BY
'-date'
"""

DEFAULT_ORDER_BY = "-date"
DEFAULT_PER_PAGE = 10
DEFAULT_PAGE_DIR = "page"
FALLBACK_LAYOUT = "index"
TEMPLATE_SUFFIX = ".jinja"
LISTING_META_TEMPLATE = ".df12-listings-{key}-meta.json"
EXCERPT_SEPARATOR = "<!-- more -->"
