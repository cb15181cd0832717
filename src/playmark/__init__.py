"""playmark — convert Markdown to interactive playground markup and back.

Public re-exports
-----------------

* **Converters:** :class:`MarkdownToPlaygroundConverter`,
  :class:`PlaygroundToMarkdownRenderer` and their one-shot functions
* **Pipeline:** :func:`run_pipeline`, :func:`load_markdown`,
  :func:`split_lines`
* **Configuration:** :class:`PlaymarkConfig`
* **Errors:** Every :class:`PlaymarkError` subclass and :class:`ErrorCode`
* **Models:** Result dataclasses, :class:`Mode`, and the marker literals

Usage::

    from playmark import run_pipeline

    result = run_pipeline("# Title\\n``` swift\\nlet x = 1\\n```\\ndone")
    print(result.playground)
    print(result.markdown)
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from playmark.config import PlaymarkConfig

# ── Converters ──────────────────────────────────────────────────────────
from playmark.converter import (
    MarkdownToPlaygroundConverter,
    PlaygroundToMarkdownRenderer,
    markdown_to_playground,
    playground_to_markdown,
)

# ── Errors ──────────────────────────────────────────────────────────────
from playmark.errors import (
    ErrorCode,
    PlaymarkConversionError,
    PlaymarkError,
    PlaymarkMarkerError,
    PlaymarkResourceError,
)

# ── Models ──────────────────────────────────────────────────────────────
from playmark.models import (
    CODE_FENCE,
    FENCE,
    PROSE_CLOSE,
    PROSE_LINE,
    PROSE_OPEN,
    ConversionWarning,
    Mode,
    RoundTripResult,
)

# ── Pipeline ────────────────────────────────────────────────────────────
from playmark.pipeline import load_markdown, run_pipeline
from playmark.utils.lines import split_lines

__all__ = [
    # Converters
    "MarkdownToPlaygroundConverter",
    "PlaygroundToMarkdownRenderer",
    "markdown_to_playground",
    "playground_to_markdown",
    # Pipeline
    "run_pipeline",
    "load_markdown",
    "split_lines",
    # Configuration
    "PlaymarkConfig",
    # Errors
    "PlaymarkError",
    "ErrorCode",
    "PlaymarkConversionError",
    "PlaymarkMarkerError",
    "PlaymarkResourceError",
    # Models
    "ConversionWarning",
    "RoundTripResult",
    "Mode",
    "CODE_FENCE",
    "FENCE",
    "PROSE_OPEN",
    "PROSE_CLOSE",
    "PROSE_LINE",
]
