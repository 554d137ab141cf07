"""High-level orchestration for paginated listing generation.

This module turns the page descriptors produced by
:func:`df12_listings.pipeline.build_listing_pages` into HTML files. Each page's
layout fallback chain is resolved with Jinja's ``select_template`` so the first
template that exists wins, and the rendered page is written to
``<output_dir>/<page path>/index.html``. A small metadata JSON file records the
page count and canonical address of every listing.

Example
-------
>>> from pathlib import Path
>>> from df12_listings.config import load_site_config
>>> from df12_listings.content import load_content
>>> from df12_listings.generator import ListingPageGenerator
>>> site = load_site_config(Path("config/listings.yaml"))  # doctest: +SKIP
>>> listing = site.get_listing("explorations")  # doctest: +SKIP
>>> generator = ListingPageGenerator(listing, site_name=site.site_name)  # doctest: +SKIP
>>> generator.run(load_content(site.content_dir))  # doctest: +SKIP
[PosixPath('public/explorations/index.html'), ...]
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import typing as typ
from pathlib import Path, PurePosixPath

from jinja2 import Environment, FileSystemLoader, select_autoescape

from df12_listings._constants import LISTING_META_TEMPLATE, TEMPLATE_SUFFIX
from df12_listings.generator.renderer import HtmlContentRenderer
from df12_listings.pipeline import ListingPage, build_listing_pages

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from jinja2 import Template

    from df12_listings.config import ListingConfig
    from df12_listings.content import ContentItem

logger = logging.getLogger(__name__)


class ListingPageGenerator:
    """Build and write the paginated HTML pages of one listing."""

    def __init__(
        self,
        listing: ListingConfig,
        *,
        site_name: str = "df12 Productions",
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
        pygments_style: str = "monokai",
    ) -> None:
        """Initialize the generator with configuration and template context.

        Parameters
        ----------
        listing : ListingConfig
            Listing configuration describing category, ordering, and layouts.
        site_name : str, optional
            Site name exposed to templates.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        output_dir : Path, optional
            Override for the HTML output directory; defaults to the listing config.
        pygments_style : str, optional
            Pygments style used when highlighting code in excerpts.
        """
        self.listing = listing
        self.site_name = site_name
        self.output_dir = output_dir or listing.output_dir
        self.templates_dir = templates_dir or Path(__file__).resolve().parents[1] / "templates"
        self.renderer = HtmlContentRenderer(pygments_style)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def build(self, collection: cabc.Iterable[ContentItem] | None) -> list[ListingPage]:
        """Return the page descriptors for the listing without writing anything."""
        return build_listing_pages(collection, self.listing)

    def run(self, collection: cabc.Iterable[ContentItem] | None) -> list[Path]:
        """Render every listing page into HTML files on disk.

        Returns
        -------
        list[Path]
            Paths to the generated HTML documents, ordered by page index. Empty
            when no item belongs to the listing, in which case nothing is
            written.

        Raises
        ------
        ListingConfigError
            Raised when the ordering field or page size is invalid.
        jinja2.TemplatesNotFound
            Raised when none of a page's layout candidates exists.
        """
        pages = self.build(collection)
        if not pages:
            return []
        generated_at = dt.datetime.now(dt.UTC)
        written: list[Path] = []
        for page in pages:
            html = self.render_page(page, generated_at=generated_at)
            output_path = self.output_path(page)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(html, encoding="utf-8")
            logger.debug("rendered %s page %d to %s", self.listing.key, page.index, output_path)
            written.append(output_path)
        self._write_metadata(pages)
        return written

    def render_page(
        self, page: ListingPage, *, generated_at: dt.datetime | None = None
    ) -> str:
        """Render ``page`` with the first available template in its layout chain."""
        template = self.select_template(page.layouts)
        context: dict[str, typ.Any] = {
            **page.extra_data,
            "page": page,
            "listing": self.listing,
            "entries": [
                {"item": item, "excerpt_html": self.renderer.excerpt(item.body)}
                for item in page.items
            ],
            "site_name": self.site_name,
            "pygments_css": self.renderer.stylesheet,
            "generated_at": generated_at or dt.datetime.now(dt.UTC),
            "html_title": self._format_page_title(page),
        }
        html = template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def select_template(self, layouts: cabc.Sequence[str]) -> Template:
        """Return the first template that exists for the layout names given."""
        return self.env.select_template([f"{name}{TEMPLATE_SUFFIX}" for name in layouts])

    def output_path(self, page: ListingPage) -> Path:
        """Return the file an individual listing page is written to."""
        relative = PurePosixPath(page.path.strip("/"))
        return self.output_dir.joinpath(*relative.parts, "index.html")

    def _format_page_title(self, page: ListingPage) -> str:
        """Compose the HTML title using listing title, site name, and page number."""
        if page.index > 1:
            return f"{self.listing.title}: Page {page.index} | {self.site_name}"
        return f"{self.listing.title} | {self.site_name}"

    def _metadata_path(self) -> Path:
        """Return the path to the metadata JSON file for this listing."""
        filename = LISTING_META_TEMPLATE.format(key=self.listing.key)
        return self.output_dir / filename

    def _write_metadata(self, pages: cabc.Sequence[ListingPage]) -> None:
        """Persist the metadata JSON describing the listing's pages."""
        metadata = {
            "first_path": pages[0].path,
            "total_pages": pages[0].total_pages,
            "paths": [page.path for page in pages],
        }
        self._metadata_path().write_text(json.dumps(metadata), encoding="utf-8")


__all__ = ["ListingPageGenerator"]
