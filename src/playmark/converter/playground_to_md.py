"""Playground markup to Markdown rendering.

A playground is source code with rich-comment prose, so the fold starts in
:attr:`Mode.CODE <playmark.models.Mode.CODE>`.  Per line:

* ``/*:rest`` emits a bare triple-backtick fence and then ``rest``.
* ``//:rest`` emits ``rest`` alone.
* ``*/rest`` emits the opening fence ``"``` swift"`` and then ``rest``.
* empty lines are dropped, everything else is copied.

The first ``/*:`` of a generated playground and its final ``*/`` produce a
fence with nothing to enclose; those two edge fences are trimmed before the
lines are joined.

``marker_order="original"`` selects the older layout instead: remainder
first (kept even when empty), fence second, and the first and last output
lines always dropped.  That layout leaves a stray fence and blank lines in
the recovered Markdown, so it is not the default.
"""

from __future__ import annotations

import time
from collections.abc import Iterable, Iterator
from itertools import chain

from playmark.config import PlaymarkConfig
from playmark.converter.balance import report_marker_issue
from playmark.errors import ErrorCode
from playmark.models import (
    CODE_FENCE,
    FENCE,
    PROSE_CLOSE,
    PROSE_LINE,
    PROSE_OPEN,
    ConversionWarning,
    Mode,
)
from playmark.observability import NoopMetricsHook

_DIRECTION = {"direction": "playground_to_md"}


def strip_marker(line: str, prefix: str, *, strip_space: bool = False) -> str:
    """Return *line* without *prefix*.

    >>> strip_marker("//: # Title", "//:")
    ' # Title'
    >>> strip_marker("//: # Title", "//:", strip_space=True)
    '# Title'
    """
    rest = line[len(prefix):]
    if strip_space and rest.startswith(" "):
        rest = rest[1:]
    return rest


def translate_playground_line(
    line: str,
    mode: Mode,
    *,
    strip_space: bool = False,
    fence_first: bool = True,
) -> tuple[Mode, tuple[str, ...]]:
    """Translate one playground line.

    Returns the mode after *line* and the Markdown lines it produces.  With
    *fence_first* an empty remainder after a marker produces no line;
    otherwise the remainder is always emitted, ahead of the fence.

    >>> translate_playground_line("/*:", Mode.CODE, fence_first=False)
    (<Mode.PROSE: 'prose'>, ('', '```'))
    """
    if line.startswith(PROSE_OPEN):
        rest = strip_marker(line, PROSE_OPEN, strip_space=strip_space)
        return Mode.PROSE, _with_fence(FENCE, rest, fence_first)
    if line.startswith(PROSE_LINE):
        rest = strip_marker(line, PROSE_LINE, strip_space=strip_space)
        return mode, (rest,) if rest or not fence_first else ()
    if line.startswith(PROSE_CLOSE):
        rest = strip_marker(line, PROSE_CLOSE, strip_space=strip_space)
        return Mode.CODE, _with_fence(CODE_FENCE, rest, fence_first)
    if not line:
        return mode, ()
    return mode, (line,)


def _with_fence(fence: str, rest: str, fence_first: bool) -> tuple[str, ...]:
    if not fence_first:
        return (rest, fence)
    return (fence, rest) if rest else (fence,)


def trim_edge_fences(lines: list[str]) -> list[str]:
    """Drop a leading closing fence and a trailing opening fence.

    >>> trim_edge_fences(["```", "# Title", "``` swift"])
    ['# Title']
    """
    if lines and lines[0] == FENCE:
        lines = lines[1:]
    if lines and lines[-1] == CODE_FENCE:
        lines = lines[:-1]
    return lines


class PlaygroundToMarkdownRenderer:
    """Render playground lines back to Markdown.

    :attr:`warnings` holds the :class:`ConversionWarning` list of the most
    recent :meth:`render` call.

    Parameters
    ----------
    config:
        Controls ``strip_marker_space``, ``marker_order`` and
        ``unbalanced_marker_policy``.
    """

    def __init__(self, config: PlaymarkConfig) -> None:
        self._config = config
        self._metrics = config.metrics or NoopMetricsHook()
        self.warnings: list[ConversionWarning] = []

    def render(self, lines: Iterable[str]) -> str:
        """Render ordered playground *lines* as one Markdown string.

        Raises
        ------
        PlaymarkMarkerError
            Only with ``unbalanced_marker_policy="raise"``.
        """
        self.warnings = []
        start = time.monotonic()

        markdown = list(chain.from_iterable(self._translate(lines)))
        if self._config.marker_order == "original":
            markdown = markdown[1:-1]
        else:
            markdown = trim_edge_fences(markdown)
        result = "\n".join(markdown)

        self._metrics.timing(
            "playmark.conversion_duration_ms",
            (time.monotonic() - start) * 1000,
            tags=_DIRECTION,
        )
        return result

    def _translate(self, lines: Iterable[str]) -> Iterator[tuple[str, ...]]:
        strip_space = self._config.strip_marker_space
        fence_first = self._config.marker_order == "fence_first"
        mode = Mode.CODE
        markers = 0

        for line_number, line in enumerate(lines, start=1):
            next_mode, emitted = translate_playground_line(
                line, mode, strip_space=strip_space, fence_first=fence_first
            )
            if line.startswith((PROSE_OPEN, PROSE_CLOSE)):
                markers += 1
                if next_mode is mode:
                    self._unbalanced(line_number, line, mode)
            mode = next_mode
            yield emitted

        self._metrics.increment(
            "playmark.markers_emitted_total", markers, tags=_DIRECTION
        )

    def _unbalanced(self, line_number: int, line: str, mode: Mode) -> None:
        if mode is Mode.PROSE:
            message = "prose comment opened inside a prose comment"
        else:
            message = "prose comment closed outside a prose comment"
        report_marker_issue(
            self._config,
            self.warnings,
            self._metrics,
            code=ErrorCode.UNBALANCED_MARKER.value,
            message=message,
            context={"line_number": line_number, "line": line, "mode": mode.value},
        )


def playground_to_markdown(
    lines: Iterable[str],
    config: PlaymarkConfig | None = None,
) -> str:
    """Render playground *lines* as Markdown, discarding warnings."""
    return PlaygroundToMarkdownRenderer(config or PlaymarkConfig()).render(lines)
