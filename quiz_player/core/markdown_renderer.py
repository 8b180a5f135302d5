"""Markdown rendering helpers shared by the Qt player and the results exporter.

Architecture note:
    Both the desktop view and the downloadable report render question text and
    explanations through the same MarkdownIt instance so that what the
    participant saw and what the report shows cannot drift apart. Raw HTML in
    the source is escaped rather than passed through, and the produced
    documents reference no external scripts or fonts, so an exported report
    opens offline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str | None) -> str:
        """Render a markdown string into a block-level HTML fragment."""

        sanitized = (markdown_text or "").strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str | None) -> str:
        """Render a short markdown string (an option label) without a paragraph."""

        return self._markdown.renderInline((markdown_text or "").strip())

    def wrap_document(
        self,
        body_html: str,
        title: str,
        stylesheet: str = "",
        script: str = "",
        body_class: str = "",
    ) -> str:
        """Wrap a fragment inside a minimal standalone HTML document."""

        script_block = f"<script>{script}</script>" if script else ""
        return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{escape(title)}</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>{stylesheet}</style>
  </head>
  <body class="{escape(body_class)}">
{body_html}
    {script_block}
  </body>
</html>"""


renderer = MarkdownRenderer()
# Shared instance to avoid rebuilding MarkdownIt. MarkdownIt is safe for
# read-only renders, so the Qt thread and export calls can reuse it.
