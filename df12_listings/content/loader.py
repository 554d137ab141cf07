r"""Read Markdown content files with YAML front matter into content items.

Each ``*.md`` file below the content directory becomes one
:class:`~df12_listings.content.ContentItem`. Front matter is the YAML block
delimited by ``---`` lines at the top of the file; the remainder is kept as the
raw Markdown body.

Example
-------
>>> from df12_listings.content.loader import split_front_matter
>>> meta, body = split_front_matter("---\ntitle: Hi\n---\nBody\n")
>>> body
'Body\n'
"""

from __future__ import annotations

import datetime as dt
import logging
import re
import types
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .models import Category, ContentError, ContentItem

logger = logging.getLogger(__name__)

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)
KNOWN_KEYS = frozenset(
    {"title", "slug", "date", "updated", "categories", "category", "sticky", "hidden"}
)


def load_content(content_dir: Path) -> list[ContentItem] | None:
    """Load every Markdown file below ``content_dir`` in sorted path order.

    Parameters
    ----------
    content_dir : Path
        Directory holding the site's Markdown posts.

    Returns
    -------
    list[ContentItem] | None
        Parsed items, or ``None`` when the directory does not exist so callers
        treat the collection as absent.

    Raises
    ------
    ContentError
        If a file has malformed front matter or invalid metadata values.
    """
    if not content_dir.is_dir():
        logger.debug("content directory %s does not exist", content_dir)
        return None
    items = [load_content_file(path) for path in sorted(content_dir.rglob("*.md"))]
    logger.debug("loaded %d content item(s) from %s", len(items), content_dir)
    return items


def load_content_file(path: Path) -> ContentItem:
    """Parse a single Markdown file into a :class:`ContentItem`."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        msg = f"Content file '{path}' is not valid UTF-8: {exc}"
        raise ContentError(msg) from exc
    try:
        meta, body = split_front_matter(text)
    except YAMLError as exc:
        msg = f"Malformed front matter in '{path}': {exc}"
        raise ContentError(msg) from exc
    except TypeError as exc:
        msg = f"Front matter in '{path}' must be a mapping."
        raise ContentError(msg) from exc

    try:
        return _build_item(path, meta, body)
    except ContentError as exc:
        msg = f"{path}: {exc}"
        raise ContentError(msg) from exc


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Split ``text`` into its front-matter mapping and Markdown body.

    Files without a front-matter block yield an empty mapping and the full
    text as body.

    Raises
    ------
    TypeError
        If the front matter parses to something other than a mapping.
    YAMLError
        If the front matter is not valid YAML.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        return {}, text
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    loaded = loader.load(match.group(1)) or {}
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping."
        raise TypeError(msg)
    return dict(loaded), text[match.end() :]


def _build_item(
    path: Path, meta: typ.Mapping[str, typ.Any], body: str
) -> ContentItem:
    title = meta.get("title") or path.stem
    slug = meta.get("slug") or _slugify(path.stem)
    raw_categories = meta.get("categories", meta.get("category"))
    extra = {
        key: _normalize_field(value)
        for key, value in meta.items()
        if key not in KNOWN_KEYS
    }
    return ContentItem(
        title=str(title),
        slug=str(slug),
        date=_parse_date(meta.get("date"), path),
        updated=_parse_date(meta.get("updated"), path),
        categories=_parse_categories(raw_categories),
        sticky=_parse_sticky(meta.get("sticky")),
        hidden=_parse_hidden(meta.get("hidden")),
        source=path,
        body=body,
        fields=types.MappingProxyType(extra),
    )


def _normalize_field(value: object) -> object:
    """Return date-valued front-matter fields as UTC datetimes, others unchanged."""
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime.combine(value, dt.time())
        case _:
            return value
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


def _parse_date(value: object, path: Path) -> dt.datetime:
    """Return a UTC datetime from front matter, falling back to the file mtime."""
    match value:
        case None:
            parsed = dt.datetime.fromtimestamp(path.stat().st_mtime, tz=dt.UTC)
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime.combine(value, dt.time())
        case str() as text:
            sanitized = text.strip()
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError as exc:
                msg = f"invalid date {value!r}"
                raise ContentError(msg) from exc
        case _:
            msg = f"invalid date {value!r}"
            raise ContentError(msg)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


def _parse_categories(value: object) -> tuple[Category, ...]:
    """Flatten string, list, or nested-list category declarations.

    A flat list such as ``[Explorations, Rust]`` is one hierarchy: Rust is a
    child of Explorations. When the list holds nested lists, each entry is its
    own hierarchy and bare strings are top-level categories. Every name in a
    hierarchy is a category of the item, and each child records its parent.
    """
    categories: list[Category] = []
    seen: set[tuple[str, str | None]] = set()

    def _add_chain(names: typ.Iterable[object]) -> None:
        parent: str | None = None
        for name in names:
            parent = _add(name, parent)

    def _add(name: object, parent: str | None) -> str:
        text = str(name).strip()
        if not text:
            msg = "category names must not be empty"
            raise ContentError(msg)
        if (text, parent) not in seen:
            seen.add((text, parent))
            categories.append(Category(name=text, slug=_slugify(text), parent=parent))
        return text

    match value:
        case None:
            pass
        case str():
            _add(value, None)
        case list() | tuple() if any(isinstance(entry, list | tuple) for entry in value):
            for entry in value:
                _add_chain(entry if isinstance(entry, list | tuple) else [entry])
        case list() | tuple():
            _add_chain(value)
        case _:
            msg = f"invalid categories {value!r}"
            raise ContentError(msg)
    return tuple(categories)


def _parse_sticky(value: object) -> int | float:
    match value:
        case None | False:
            return 0
        case True:
            return 1
        case int() | float():
            return value
        case _:
            msg = f"sticky must be a number, got {value!r}"
            raise ContentError(msg)


def _parse_hidden(value: object) -> bool:
    match value:
        case None:
            return False
        case bool():
            return value
        case _:
            msg = f"hidden must be a boolean, got {value!r}"
            raise ContentError(msg)


def _slugify(value: str) -> str:
    """Convert a string into a lowercase hyphen-separated slug."""
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")


__all__ = ["load_content", "load_content_file", "split_front_matter"]
