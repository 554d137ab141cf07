"""Utilities for rendering and writing df12 listing pages."""

from .listing_generator import ListingPageGenerator
from .renderer import HtmlContentRenderer, extract_excerpt

__all__ = ["HtmlContentRenderer", "ListingPageGenerator", "extract_excerpt"]
