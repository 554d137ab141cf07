"""Render listing excerpts from Markdown with highlighted code blocks."""

from __future__ import annotations

import re
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from df12_listings._constants import EXCERPT_SEPARATOR

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)```", re.DOTALL)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def extract_excerpt(body: str) -> str:
    """Return the Markdown shown for an item in a listing.

    The text before ``<!-- more -->`` wins when the marker is present;
    otherwise the first paragraph (a fenced code block counts as part of it)
    is used.

    Examples
    --------
    >>> extract_excerpt("Lead.\\n<!-- more -->\\nRest.")
    'Lead.'
    >>> extract_excerpt("First.\\n\\nSecond.")
    'First.'
    """
    if EXCERPT_SEPARATOR in body:
        return body.split(EXCERPT_SEPARATOR, 1)[0].strip()
    stripped = body.strip()
    if not stripped:
        return ""
    if stripped.startswith("```"):
        match = CODE_BLOCK_PATTERN.match(stripped)
        if match:
            return match.group(0)
    return PARAGRAPH_BREAK.split(stripped, maxsplit=1)[0].strip()


class HtmlContentRenderer:
    """Render Markdown excerpts with consistent code styling."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a renderer with the Pygments style used for code blocks."""
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        if not text.strip():
            return ""
        md = Markdown(
            extensions=["fenced_code", "codehilite", "tables", "sane_lists"],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        html = md.convert(text)
        return self._annotate_codehilite(html, text)

    def excerpt(self, body: str) -> str:
        """Render the listing excerpt of an item's Markdown ``body``."""
        return self.markdown(extract_excerpt(body))

    def _annotate_codehilite(self, html: str, source_markdown: str) -> str:
        """Attach language metadata to each highlighted block in converted markdown."""
        languages = [
            match.group(1) or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return (
                f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))


__all__ = ["CODE_BLOCK_PATTERN", "HtmlContentRenderer", "extract_excerpt"]
