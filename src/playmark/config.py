"""Configuration for playmark.

:class:`PlaymarkConfig` is a plain dataclass that captures every tuneable
knob of the converters.  A single instance is shared by both directions so
that a round trip is governed by one set of policies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

_CODE_LINE_POLICIES = ("keep", "drop")
_MARKER_POLICIES = ("ignore", "warn", "raise")
_MARKER_ORDERS = ("fence_first", "original")


@dataclass
class PlaymarkConfig:
    """Complete configuration for the playmark converters.

    Every parameter has a default, so ``PlaymarkConfig()`` is always valid.

    Parameters
    ----------
    code_lines:
        What Markdown -> playground does with lines inside a
        ``"``` swift"`` region.

        * ``"keep"`` — copy them verbatim so the code stays runnable.
        * ``"drop"`` — omit them; only prose and markers are emitted.
    unbalanced_marker_policy:
        Behaviour when a marker arrives in the wrong mode (a code fence
        while already in code, a ``/*:`` while already in prose, ...) or
        when a Markdown document ends inside a code region.

        * ``"ignore"`` — convert silently.
        * ``"warn"`` — convert, and record a ``ConversionWarning``.
        * ``"raise"`` — raise :class:`~playmark.errors.PlaymarkMarkerError`.
    strip_marker_space:
        On playground -> Markdown, also strip one space following a
        ``/*:``, ``//:`` or ``*/`` prefix.  Off by default: only the exact
        prefix is removed.
    marker_order:
        Layout of a marker line on playground -> Markdown.

        * ``"fence_first"`` — emit the fence, then any non-empty remainder,
          and trim only the edge fences that enclose nothing.
        * ``"original"`` — emit the remainder (even when empty), then the
          fence, and drop the first and last output lines unconditionally.
    metrics:
        Optional :class:`~playmark.observability.MetricsHook` backend.
    debug_dump_lines:
        Write the scanned line list of each pipeline pass to *stderr*.
    """

    code_lines: Literal["keep", "drop"] = "keep"

    unbalanced_marker_policy: Literal["ignore", "warn", "raise"] = "warn"

    strip_marker_space: bool = False

    marker_order: Literal["fence_first", "original"] = "fence_first"

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_lines: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.code_lines not in _CODE_LINE_POLICIES:
            raise ValueError(
                f"code_lines must be one of {_CODE_LINE_POLICIES}, got {self.code_lines!r}"
            )
        if self.unbalanced_marker_policy not in _MARKER_POLICIES:
            raise ValueError(
                "unbalanced_marker_policy must be one of "
                f"{_MARKER_POLICIES}, got {self.unbalanced_marker_policy!r}"
            )
        if self.marker_order not in _MARKER_ORDERS:
            raise ValueError(
                f"marker_order must be one of {_MARKER_ORDERS}, got {self.marker_order!r}"
            )
