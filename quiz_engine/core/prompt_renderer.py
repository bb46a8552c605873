"""Markdown rendering for question prompts.

Prompts are authored as Markdown and rendered to HTML fragments that Qt rich
text labels can display directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class PromptRenderer:
    """Converts markdown prompts into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html}).enable("strikethrough")

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No prompt provided.</em></p>"
        return self._markdown.render(sanitized)


# Shared instance; every widget runs on the GUI thread.
renderer = PromptRenderer()
