"""Rendering helpers for quote text shown in Qt rich-text labels.

Architecture note:
    Quotes are plain text and must appear exactly as written, so MarkdownIt
    runs with the ``zero`` preset: no emphasis, lists or headings, only
    escaping plus the ``newline`` rule so line breaks in dialogue survive as
    line breaks. The resulting fragment is within the HTML subset QLabel
    understands, so no web engine is needed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class QuoteRenderer:
    """Converts quote text into a small HTML fragment."""

    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("zero", {"html": False, "breaks": True})
            .enable("newline")
        )

    def render_fragment(self, quote_text: str) -> str:
        """Render quote text into an escaped HTML fragment."""

        sanitized = quote_text.strip()
        if not sanitized:
            return "<p><em>No quote provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_quote(self, quote_text: str, font_size: int = 14) -> str:
        """Render a quote wrapped in quotation marks at the given point size."""

        body = self.render_fragment(f"“{quote_text.strip()}”")
        return f'<div style="font-size: {font_size}pt; font-style: italic;">{body}</div>'


renderer = QuoteRenderer()
# Shared instance to avoid rebuilding MarkdownIt; only used from the Qt thread.
