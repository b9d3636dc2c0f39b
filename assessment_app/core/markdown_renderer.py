"""Markdown rendering for definitions and legends shown beside the questions.

Qt labels accept a subset of HTML, so definitions and legends are written in
Markdown in the CSV files and rendered to HTML fragments here. Raw HTML in the
source is escaped rather than passed through.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt

from assessment_app.constants.assessment_constants import OPTIONS_DELIMITER


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown text into HTML fragments for rich-text labels."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str | None) -> str:
        sanitized = (markdown_text or "").strip()
        if not sanitized:
            return ""
        return self._markdown.render(sanitized)

    def render_legend(self, legend: str | None) -> str:
        """Render ``"1-Poor,5-Excellent"`` as a bullet list of levels.

        Legends that already contain line breaks are treated as markdown.
        """
        text = (legend or "").strip()
        if not text:
            return ""
        if "\n" in text:
            return self.render_fragment(text)
        entries = [entry.strip() for entry in text.split(OPTIONS_DELIMITER) if entry.strip()]
        return self.render_fragment("\n".join(f"- {entry}" for entry in entries))


renderer = MarkdownRenderer()
# Shared instance; rendering only happens on the Qt thread.
