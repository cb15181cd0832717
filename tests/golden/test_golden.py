"""Golden fixture tests.

``loops.md`` / ``loops.playground`` pin the exact output of both directions
for a well-formed document.  ``idiomatic.playground`` is a hand-written
playground with leading code and ``//:`` comments; its expected Markdown
is pinned with and without ``strip_marker_space``.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from playmark.config import PlaymarkConfig
from playmark.converter.md_to_playground import MarkdownToPlaygroundConverter
from playmark.converter.playground_to_md import PlaygroundToMarkdownRenderer
from playmark.pipeline import load_markdown, run_pipeline
from playmark.utils.lines import split_lines

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8").rstrip("\n")


def _render(text: str, **kwargs) -> tuple[str, list]:
    renderer = PlaygroundToMarkdownRenderer(PlaymarkConfig(**kwargs))
    return renderer.render(split_lines(text)), renderer.warnings


class TestLoopsFixture:
    def test_markdown_to_playground(self):
        converter = MarkdownToPlaygroundConverter(PlaymarkConfig())
        assert converter.convert(split_lines(_fixture("loops.md"))) == _fixture("loops.playground")
        assert converter.warnings == []

    def test_playground_to_markdown(self):
        expected = "\n".join(line for line in split_lines(_fixture("loops.md")) if line)
        assert _render(_fixture("loops.playground"))[0] == expected

    def test_pipeline_from_file(self):
        result = run_pipeline(load_markdown(FIXTURES_DIR / "loops.md"))
        assert result.playground == _fixture("loops.playground")


class TestIdiomaticFixture:
    @pytest.mark.parametrize(
        ("strip", "expected"),
        [(False, "idiomatic.md"), (True, "idiomatic_stripped.md")],
    )
    def test_render(self, strip, expected):
        output, warnings = _render(_fixture("idiomatic.playground"), strip_marker_space=strip)
        assert output == _fixture(expected)
        assert warnings == []

    def test_leading_code_is_not_trimmed(self):
        output, _ = _render(_fixture("idiomatic.playground"))
        assert output.startswith("import Foundation\n```\n")

    def test_verbatim_prose_keeps_its_indent(self):
        # Only marker remainders are affected by strip_marker_space.
        output, _ = _render(_fixture("idiomatic.playground"), strip_marker_space=True)
        assert output.split("\n")[2].startswith(" # Transforming Code")
