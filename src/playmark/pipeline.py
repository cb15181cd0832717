"""Round-trip pipeline and source loading.

:func:`run_pipeline` is the whole demonstration in one call: split the
Markdown, convert it to playground markup, split that, and render it back
to Markdown.  :func:`load_markdown` reads the input, defaulting to the
``Markdown.md`` resource bundled with the package.
"""

from __future__ import annotations

import json
import os
import sys
from importlib import resources
from pathlib import Path

from playmark.config import PlaymarkConfig
from playmark.converter.md_to_playground import MarkdownToPlaygroundConverter
from playmark.converter.playground_to_md import PlaygroundToMarkdownRenderer
from playmark.errors import PlaymarkResourceError
from playmark.models import RoundTripResult
from playmark.observability import get_logger
from playmark.utils.lines import split_lines

BUNDLED_RESOURCE = "Markdown.md"

log = get_logger("playmark.pipeline")


def load_markdown(path: str | os.PathLike[str] | None = None) -> str:
    """Read a UTF-8 Markdown document.

    Parameters
    ----------
    path:
        File to read.  ``None`` reads the bundled ``Markdown.md`` resource.

    Raises
    ------
    PlaymarkResourceError
        If the file is missing, unreadable, or not valid UTF-8.
    """
    source = str(path) if path is not None else f"playmark/resources/{BUNDLED_RESOURCE}"
    try:
        if path is None:
            resource = resources.files("playmark").joinpath("resources").joinpath(BUNDLED_RESOURCE)
            return resource.read_text(encoding="utf-8")
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PlaymarkResourceError(
            f"cannot load Markdown from {source}",
            context={"path": source},
            cause=exc,
        ) from exc


def run_pipeline(text: str, config: PlaymarkConfig | None = None) -> RoundTripResult:
    """Convert *text* to playground markup and back again.

    Warnings from both passes are collected on the result in order.
    """
    config = config or PlaymarkConfig()
    converter = MarkdownToPlaygroundConverter(config)
    renderer = PlaygroundToMarkdownRenderer(config)

    lines = split_lines(text, metrics=config.metrics)
    _dump("markdown lines", lines, config)
    playground = converter.convert(lines)

    playground_lines = split_lines(playground, metrics=config.metrics)
    _dump("playground lines", playground_lines, config)
    markdown = renderer.render(playground_lines)

    warnings = [*converter.warnings, *renderer.warnings]
    log.info(
        "round trip complete",
        extra={"extra_fields": {
            "lines": len(lines),
            "playground_lines": len(playground_lines),
            "warnings": len(warnings),
        }},
    )
    return RoundTripResult(playground=playground, markdown=markdown, warnings=warnings)


def _dump(label: str, lines: list[str], config: PlaymarkConfig) -> None:
    if config.debug_dump_lines:
        print(
            f"[playmark] {label}:",
            json.dumps(lines, indent=2, ensure_ascii=False),
            file=sys.stderr,
        )
