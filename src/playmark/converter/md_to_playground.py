"""Markdown to playground markup conversion.

The conversion is a fold over the input lines with an explicit
:class:`~playmark.models.Mode`.  Each line contributes zero or more output
lines through :func:`translate_markdown_line`; the contributions are then
flattened between a leading ``/*:`` and a trailing ``*/``:

* ``"``` swift"`` closes the prose comment (``*/``) and enters code.
* any other triple-backtick fence reopens a prose comment (``/*:``).
* empty lines are dropped.
* everything else is copied, subject to ``code_lines`` inside code.

Usage::

    from playmark.config import PlaymarkConfig
    from playmark.converter.md_to_playground import MarkdownToPlaygroundConverter

    converter = MarkdownToPlaygroundConverter(PlaymarkConfig())
    playground = converter.convert(["# Title", "``` swift", "let x = 1", "```"])
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
    PROSE_OPEN,
    ConversionWarning,
    Mode,
)
from playmark.observability import NoopMetricsHook

_DIRECTION = {"direction": "md_to_playground"}


def translate_markdown_line(
    line: str,
    mode: Mode,
    *,
    keep_code: bool = True,
) -> tuple[Mode, tuple[str, ...]]:
    """Translate one Markdown line.

    Returns the mode after *line* and the playground lines it produces.

    >>> translate_markdown_line("``` swift", Mode.PROSE)
    (<Mode.CODE: 'code'>, ('*/',))
    >>> translate_markdown_line("", Mode.PROSE)
    (<Mode.PROSE: 'prose'>, ())
    """
    if line.startswith(CODE_FENCE):
        return Mode.CODE, (PROSE_CLOSE,)
    if line.startswith(FENCE):
        return Mode.PROSE, (PROSE_OPEN,)
    if not line:
        return mode, ()
    if mode is Mode.CODE and not keep_code:
        return mode, ()
    return mode, (line,)


class MarkdownToPlaygroundConverter:
    """Convert Markdown lines to playground markup.

    :attr:`warnings` holds the :class:`ConversionWarning` list of the most
    recent :meth:`convert` call.

    Parameters
    ----------
    config:
        Controls the ``code_lines`` and ``unbalanced_marker_policy``
        behaviour.
    """

    def __init__(self, config: PlaymarkConfig) -> None:
        self._config = config
        self._metrics = config.metrics or NoopMetricsHook()
        self.warnings: list[ConversionWarning] = []

    def convert(self, lines: Iterable[str]) -> str:
        """Convert ordered Markdown *lines* into one playground string.

        The result always starts with ``/*:`` and ends with ``*/``; an empty
        document becomes ``"/*:\\n*/"``.

        Raises
        ------
        PlaymarkMarkerError
            Only with ``unbalanced_marker_policy="raise"``.
        """
        self.warnings = []
        start = time.monotonic()

        segments = chain(
            (PROSE_OPEN,),
            chain.from_iterable(self._translate(lines)),
            (PROSE_CLOSE,),
        )
        result = "\n".join(segments)

        self._metrics.timing(
            "playmark.conversion_duration_ms",
            (time.monotonic() - start) * 1000,
            tags=_DIRECTION,
        )
        return result

    def _translate(self, lines: Iterable[str]) -> Iterator[tuple[str, ...]]:
        keep_code = self._config.code_lines == "keep"
        mode = Mode.PROSE
        markers = 2  # the synthetic opener and closer

        for line_number, line in enumerate(lines, start=1):
            next_mode, emitted = translate_markdown_line(line, mode, keep_code=keep_code)
            if line.startswith(FENCE):
                markers += 1
                # A fence is a transition; one that keeps the mode is unbalanced.
                if next_mode is mode:
                    self._unbalanced(line_number, line, mode)
            mode = next_mode
            yield emitted

        if mode is Mode.CODE:
            report_marker_issue(
                self._config,
                self.warnings,
                self._metrics,
                code=ErrorCode.UNTERMINATED_CODE.value,
                message="document ends inside a code region",
                context={"mode": mode.value},
            )
        self._metrics.increment(
            "playmark.markers_emitted_total", markers, tags=_DIRECTION
        )

    def _unbalanced(self, line_number: int, line: str, mode: Mode) -> None:
        if mode is Mode.CODE:
            message = "code fence inside a code region"
        else:
            message = "closing fence outside a code region"
        report_marker_issue(
            self._config,
            self.warnings,
            self._metrics,
            code=ErrorCode.UNBALANCED_MARKER.value,
            message=message,
            context={"line_number": line_number, "line": line, "mode": mode.value},
        )


def markdown_to_playground(
    lines: Iterable[str],
    config: PlaymarkConfig | None = None,
) -> str:
    """Convert Markdown *lines* to playground markup, discarding warnings."""
    return MarkdownToPlaygroundConverter(config or PlaymarkConfig()).convert(lines)
