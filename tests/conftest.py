"""Shared test fixtures for the playmark test suite."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from playmark.config import PlaymarkConfig
from playmark.converter.md_to_playground import MarkdownToPlaygroundConverter
from playmark.converter.playground_to_md import PlaygroundToMarkdownRenderer
from playmark.observability import logger as logger_module


class RecordingMetricsHook:
    """A metrics backend that records all calls for assertion."""

    def __init__(self) -> None:
        self.increments: list[dict[str, Any]] = []
        self.timings: list[dict[str, Any]] = []
        self.gauges: list[dict[str, Any]] = []

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.increments.append({"name": name, "value": value, "tags": tags})

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.timings.append({"name": name, "ms": ms, "tags": tags})

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.gauges.append({"name": name, "value": value, "tags": tags})

    def names(self) -> list[str]:
        return [call["name"] for call in self.increments]


@pytest.fixture
def config() -> PlaymarkConfig:
    """Default configuration."""
    return PlaymarkConfig()


@pytest.fixture
def converter(config: PlaymarkConfig) -> MarkdownToPlaygroundConverter:
    """Markdown-to-playground converter using the default config."""
    return MarkdownToPlaygroundConverter(config)


@pytest.fixture
def renderer(config: PlaymarkConfig) -> PlaygroundToMarkdownRenderer:
    """Playground-to-Markdown renderer using the default config."""
    return PlaygroundToMarkdownRenderer(config)


@pytest.fixture
def metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()


@pytest.fixture
def restore_levels():
    """Undo ``set_level`` calls: every configured logger and the default level."""
    saved = {
        name: logging.getLogger(name).level
        for name in logger_module._configured_loggers
    }
    default = logger_module._default_level
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
    logger_module._default_level = default
