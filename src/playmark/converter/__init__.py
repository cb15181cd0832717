"""Markdown ↔ playground conversion.

Public API:

- :class:`MarkdownToPlaygroundConverter` — Markdown lines → playground text.
- :class:`PlaygroundToMarkdownRenderer` — playground lines → Markdown text.
- :func:`markdown_to_playground` / :func:`playground_to_markdown` —
  one-shot functional forms.
"""

from playmark.converter.md_to_playground import (
    MarkdownToPlaygroundConverter,
    markdown_to_playground,
    translate_markdown_line,
)
from playmark.converter.playground_to_md import (
    PlaygroundToMarkdownRenderer,
    playground_to_markdown,
    translate_playground_line,
)

__all__ = [
    "MarkdownToPlaygroundConverter",
    "PlaygroundToMarkdownRenderer",
    "markdown_to_playground",
    "playground_to_markdown",
    "translate_markdown_line",
    "translate_playground_line",
]
