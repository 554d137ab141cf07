"""Cyclopts CLI entrypoint for generating df12 paginated listing pages.

The ``listings`` console script defined here loads ``config/listings.yaml``,
reads the site's Markdown content, and renders each configured listing into
paginated HTML. ``listings generate`` writes the pages; ``listings show``
prints the page plan without touching the filesystem.

Examples
--------
Generate every configured listing:

>>> from df12_listings.cli import main
>>> main()  # doctest: +SKIP

Preview a single listing:

>>> from df12_listings.cli import app
>>> app(["show", "--listing", "explorations"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .content import load_content
from .generator import ListingPageGenerator

if typ.TYPE_CHECKING:
    from .config import ListingConfig, SiteConfig

DEFAULT_CONFIG = Path("config/listings.yaml")

app = App(name="listings", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    """Route pipeline debug records to stderr when ``verbose`` is set."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def _select_listings(site_config: SiteConfig, listing: str | None) -> list[ListingConfig]:
    if listing:
        return [site_config.get_listing(listing)]
    return list(site_config.listings.values())


@app.command(help="Generate paginated HTML listing pages from site content.")
def generate(
    *,
    listing: typ.Annotated[
        str | None, Parameter(help="Listing identifier", env_var="INPUT_LISTING")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to listings config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    content_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the content folder", env_var="INPUT_CONTENT_DIR"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: bool = False,
) -> None:
    """Generate listing pages for the requested site configuration.

    Parameters
    ----------
    listing : str or None, optional
        Specific listing key to render; when ``None`` (default) every listing
        is rendered.
    config : Path, optional
        Path to the ``listings.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    content_dir : Path or None, optional
        Override the directory holding Markdown content.
    output_dir : Path or None, optional
        Override output directory for single-listing rendering (rejected when
        multiple listings are selected).
    verbose : bool, optional
        Emit debug logging from the pipeline.

    Raises
    ------
    ValueError
        If ``output_dir`` is supplied when more than one listing is requested.
    ListingConfigError
        If a listing's ordering or pagination options are invalid.
    """
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config)
    targets = _select_listings(site_config, listing)
    if len(targets) > 1 and output_dir:
        msg = "Cannot override output_dir when generating multiple listings."
        raise ValueError(msg)

    collection = load_content(content_dir or site_config.content_dir)
    for listing_config in targets:
        generator = ListingPageGenerator(
            listing_config, site_name=site_config.site_name, output_dir=output_dir
        )
        written = generator.run(collection)
        if not written:
            print(f"{listing_config.key}: no items in category {listing_config.category!r}")
        for path in written:
            print(f"wrote {_format_path(path)}")


@app.command(help="Show the pages a listing would produce without writing them.")
def show(
    *,
    listing: typ.Annotated[
        str | None, Parameter(help="Listing identifier", env_var="INPUT_LISTING")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to listings config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    content_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the content folder", env_var="INPUT_CONTENT_DIR"),
    ] = None,
) -> None:
    """Print each page's index, address, and item slugs for the listings."""
    site_config = load_site_config(config)
    collection = load_content(content_dir or site_config.content_dir)
    for listing_config in _select_listings(site_config, listing):
        pages = ListingPageGenerator(
            listing_config, site_name=site_config.site_name
        ).build(collection)
        print(f"{listing_config.key}: {len(pages)} page(s)")
        for page in pages:
            slugs = ", ".join(item.slug for item in page.items)
            print(f"  [{page.index}/{page.total_pages}] {page.path}: {slugs}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `listings` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
