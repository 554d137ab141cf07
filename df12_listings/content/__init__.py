"""Content items consumed by df12 listings and the loader that reads them."""

from .loader import load_content, load_content_file, split_front_matter
from .models import Category, ContentError, ContentItem

__all__ = [
    "Category",
    "ContentError",
    "ContentItem",
    "load_content",
    "load_content_file",
    "split_front_matter",
]
