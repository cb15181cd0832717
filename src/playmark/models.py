"""Public data models and the marker vocabulary for playmark.

The marker strings below are the only wire format the converters know
about.  They are matched as exact line prefixes, including the single
space in :data:`CODE_FENCE`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# ---------------------------------------------------------------------------
# Marker vocabulary
# ---------------------------------------------------------------------------

CODE_FENCE = "``` swift"
"""Markdown fence that opens an executable code region."""

FENCE = "```"
"""Generic Markdown fence; closes a code region."""

PROSE_OPEN = "/*:"
"""Playground rich-comment opener."""

PROSE_CLOSE = "*/"
"""Playground rich-comment closer."""

PROSE_LINE = "//:"
"""Playground single-line rich comment."""


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Mode(str, Enum):
    """Which kind of region a converter is currently inside."""

    PROSE = "prose"
    """Rich-comment text (Markdown prose)."""

    CODE = "code"
    """Directly executable source lines."""


# ---------------------------------------------------------------------------
# Conversion warnings
# ---------------------------------------------------------------------------

@dataclass
class ConversionWarning:
    """A non-fatal issue encountered while converting a document.

    Attributes
    ----------
    code:
        A machine-readable warning code (e.g. ``"UNBALANCED_MARKER"``).
    message:
        A human-readable description of the issue.
    context:
        Structured diagnostics such as ``line_number`` and ``mode``.
    """

    code: str
    message: str
    context: dict = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Pipeline result
# ---------------------------------------------------------------------------

@dataclass
class RoundTripResult:
    """Outcome of a Markdown -> playground -> Markdown pipeline run.

    Attributes
    ----------
    playground:
        The generated playground markup.
    markdown:
        Markdown recovered from *playground*.
    warnings:
        Warnings from both conversion passes, in the order they occurred.
    """

    playground: str
    markdown: str
    warnings: list[ConversionWarning] = field(default_factory=list)
