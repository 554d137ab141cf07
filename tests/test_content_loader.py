"""Unit tests for reading Markdown content files into content items."""

from __future__ import annotations

import datetime as dt
import os
from pathlib import Path
from textwrap import dedent

import pytest

from df12_listings.content import (
    Category,
    ContentError,
    load_content,
    load_content_file,
    split_front_matter,
)
from df12_listings.content.loader import _normalize_field


def _post(directory: Path, name: str, text: str) -> Path:
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dedent(text).lstrip(), encoding="utf-8")
    return path


def test_split_front_matter_without_block() -> None:
    """Files without front matter keep their whole text as body."""
    meta, body = split_front_matter("Just text.\n")
    assert meta == {}, "expected empty metadata"
    assert body == "Just text.\n", "expected unchanged body"


def test_load_content_file_reads_known_keys(tmp_path: Path) -> None:
    """Recognised front-matter keys map onto ContentItem attributes."""
    path = _post(
        tmp_path,
        "rust-async.md",
        """
        ---
        title: Async Rust
        date: 2025-03-04T10:00:00Z
        categories: [Explorations]
        sticky: 2
        hidden: true
        cover: cover.png
        ---
        Lead paragraph.
        """,
    )
    item = load_content_file(path)
    assert item.title == "Async Rust", f"unexpected title {item.title!r}"
    assert item.slug == "rust-async", f"unexpected slug {item.slug!r}"
    assert item.date == dt.datetime(2025, 3, 4, 10, tzinfo=dt.UTC), "unexpected date"
    assert [c.name for c in item.categories] == ["Explorations"], "unexpected categories"
    assert item.sticky == 2, "expected sticky 2"
    assert item.hidden is True, "expected hidden flag"
    assert item.fields == {"cover": "cover.png"}, "expected unknown keys in fields"
    assert item.body == "Lead paragraph.\n", f"unexpected body {item.body!r}"
    assert item.source == path, "expected source path"


def test_hierarchical_categories_are_flattened(tmp_path: Path) -> None:
    """Nested category lists contribute every name and record parents."""
    path = _post(
        tmp_path,
        "nested.md",
        """
        ---
        date: 2025-01-01
        categories:
          - [Explorations, Rust]
          - Notes
        ---
        """,
    )
    item = load_content_file(path)
    assert item.categories == (
        Category(name="Explorations", slug="explorations"),
        Category(name="Rust", slug="rust", parent="Explorations"),
        Category(name="Notes", slug="notes"),
    ), f"unexpected categories {item.categories!r}"
    assert item.in_category("Rust"), "expected nested category to match"


def test_defaults_when_front_matter_is_sparse(tmp_path: Path) -> None:
    """Title falls back to the stem, date to mtime, sticky to 0."""
    path = _post(tmp_path, "Plain Post.md", "No front matter here.\n")
    stamp = dt.datetime(2024, 6, 1, tzinfo=dt.UTC).timestamp()
    os.utime(path, (stamp, stamp))
    item = load_content_file(path)
    assert item.title == "Plain Post", f"unexpected title {item.title!r}"
    assert item.slug == "plain-post", f"unexpected slug {item.slug!r}"
    assert item.date == dt.datetime(2024, 6, 1, tzinfo=dt.UTC), "expected mtime date"
    assert item.sticky == 0, "expected default sticky 0"
    assert item.hidden is False, "expected visible by default"
    assert item.categories == (), "expected no categories"


def test_boolean_sticky_counts_as_priority_one(tmp_path: Path) -> None:
    """``sticky: true`` pins an item with priority 1."""
    path = _post(tmp_path, "pin.md", "---\ndate: 2025-01-01\nsticky: true\n---\n")
    assert load_content_file(path).sticky == 1, "expected sticky true to become 1"


@pytest.mark.parametrize(
    "front_matter",
    [
        "date: not-a-date",
        "sticky: high",
        "hidden: maybe",
        "categories: 5",
    ],
)
def test_invalid_values_raise_content_error(tmp_path: Path, front_matter: str) -> None:
    """Invalid metadata fails with an error naming the file."""
    path = _post(tmp_path, "bad.md", f"---\n{front_matter}\n---\n")
    with pytest.raises(ContentError, match="bad.md"):
        load_content_file(path)


def test_malformed_front_matter_raises(tmp_path: Path) -> None:
    """Unparseable YAML is reported as a content error."""
    path = _post(tmp_path, "broken.md", "---\ntitle: [unclosed\n---\n")
    with pytest.raises(ContentError, match="Malformed front matter"):
        load_content_file(path)


def test_load_content_walks_directory_in_sorted_order(tmp_path: Path) -> None:
    """Markdown files are loaded recursively in path order; others are ignored."""
    _post(tmp_path, "b.md", "---\ndate: 2025-01-02\n---\n")
    _post(tmp_path, "a.md", "---\ndate: 2025-01-01\n---\n")
    _post(tmp_path, "sub/c.md", "---\ndate: 2025-01-03\n---\n")
    _post(tmp_path, "notes.txt", "ignored")
    items = load_content(tmp_path)
    assert items is not None, "expected a collection for an existing directory"
    assert [item.slug for item in items] == ["a", "b", "c"], (
        f"unexpected order {[item.slug for item in items]!r}"
    )


def test_missing_directory_is_an_absent_collection(tmp_path: Path) -> None:
    """A missing content directory yields None rather than raising."""
    assert load_content(tmp_path / "missing") is None, "expected None"


def test_field_lookup(tmp_path: Path) -> None:
    """``field`` resolves attributes first, then front-matter fields."""
    path = _post(tmp_path, "f.md", "---\ndate: 2025-01-01\nweight: 4\n---\n")
    item = load_content_file(path)
    assert item.field("weight") == 4, "expected front-matter field"
    assert item.field("slug") == "f", "expected attribute lookup"
    with pytest.raises(KeyError):
        item.field("missing")


def test_flat_category_list_is_one_hierarchy(tmp_path: Path) -> None:
    """A flat list nests each name under the previous one."""
    path = _post(
        tmp_path,
        "flat.md",
        "---\ndate: 2025-01-01\ncategories: [Explorations, Rust]\n---\n",
    )
    item = load_content_file(path)
    assert item.categories == (
        Category(name="Explorations", slug="explorations"),
        Category(name="Rust", slug="rust", parent="Explorations"),
    ), f"unexpected categories {item.categories!r}"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2024-01-01", dt.datetime(2024, 1, 1, tzinfo=dt.UTC)),
        ("2024-01-02 10:00:00", dt.datetime(2024, 1, 2, 10, tzinfo=dt.UTC)),
        ("2024-01-03T10:00:00+02:00", dt.datetime(2024, 1, 3, 8, tzinfo=dt.UTC)),
    ],
)
def test_updated_is_parsed_as_utc(
    tmp_path: Path, raw: str, expected: dt.datetime
) -> None:
    """``updated`` accepts dates, naive and aware datetimes and normalizes to UTC."""
    path = _post(tmp_path, "u.md", f"---\ndate: 2024-01-01\nupdated: {raw}\n---\n")
    item = load_content_file(path)
    assert item.updated == expected, f"unexpected updated {item.updated!r}"
    assert "updated" not in item.fields, "expected updated to be a declared attribute"


def test_updated_falls_back_to_mtime(tmp_path: Path) -> None:
    """A post without ``updated`` takes the file modification time."""
    path = _post(tmp_path, "m.md", "---\ndate: 2024-01-01\n---\n")
    stamp = dt.datetime(2024, 5, 6, tzinfo=dt.UTC).timestamp()
    os.utime(path, (stamp, stamp))
    assert load_content_file(path).updated == dt.datetime(2024, 5, 6, tzinfo=dt.UTC), (
        "expected mtime fallback for updated"
    )


def test_date_valued_fields_are_normalized() -> None:
    """Date-like front-matter values become aware UTC datetimes; others pass through."""
    aware = dt.datetime(2024, 2, 3, 12, tzinfo=dt.timezone(dt.timedelta(hours=2)))
    assert _normalize_field(dt.date(2024, 2, 3)) == dt.datetime(2024, 2, 3, tzinfo=dt.UTC), (
        "expected date promoted to UTC midnight"
    )
    assert _normalize_field(dt.datetime(2024, 2, 3, 9)) == dt.datetime(
        2024, 2, 3, 9, tzinfo=dt.UTC
    ), "expected naive datetime read as UTC"
    assert _normalize_field(aware) == dt.datetime(2024, 2, 3, 10, tzinfo=dt.UTC), (
        "expected aware datetime converted to UTC"
    )
    assert _normalize_field("keep") == "keep", "expected plain values unchanged"


def test_non_utf8_file_raises_content_error(tmp_path: Path) -> None:
    """Undecodable bytes are reported as a content error naming the file."""
    path = tmp_path / "latin.md"
    path.write_bytes(b"---\ntitle: caf\xe9\n---\n")
    with pytest.raises(ContentError, match="latin.md"):
        load_content_file(path)
