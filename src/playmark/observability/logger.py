"""Structured JSON logger for playmark.

playmark logs through three module-level loggers, ``playmark.lines`` (scan
failures), ``playmark.converter`` (marker warnings) and
``playmark.pipeline`` (one summary per round trip).  Each record is a
single-line JSON object::

    {"ts": "2026-10-17T12:00:00.123456+00:00", "level": "WARNING",
     "logger": "playmark.converter", "message": "code fence inside a code region",
     "code": "UNBALANCED_MARKER", "line_number": 7}

The loggers start at ``DEBUG``.  :func:`set_level` lowers or raises all of
them at once; ``python -m playmark`` uses it to hide the ``INFO`` summary::

    import logging

    from playmark.observability import set_level

    set_level(logging.WARNING)
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Guaranteed keys are ``ts``, ``level``, ``logger`` and ``message``.
    Fields passed via ``extra={"extra_fields": {...}}`` are merged into the
    top-level object; ``exc_info`` and ``stack_info`` are serialised when
    present.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(
            record, "extra_fields", None
        )
        if extra_fields is not None:
            log_entry.update(extra_fields)

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_entry, default=str)


# One handler per logger name, so repeated get_logger calls never stack
# duplicate handlers.
_configured_loggers: set[str] = set()

# Level given to loggers configured without an explicit one; see set_level.
_default_level: int = logging.DEBUG


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return logging.getLevelName(level.upper())
    return level


def get_logger(
    name: str = "playmark",
    *,
    level: int | str | None = None,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name.  Defaults to ``"playmark"``.
    level:
        Minimum log level, as an ``int`` or a case-insensitive name.  When
        omitted the level last passed to :func:`set_level` is used
        (``DEBUG`` until then).
    stream:
        Output stream for the handler.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        A logger with a :class:`StructuredFormatter` handler.  Only the
        first call for a given *name* configures it.
    """
    logger = logging.getLogger(name)

    if name not in _configured_loggers:
        logger.setLevel(_default_level if level is None else _resolve_level(level))

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False

        _configured_loggers.add(name)

    return logger


def set_level(level: int | str, prefix: str = "playmark") -> list[str]:
    """Set *level* on every configured logger under *prefix*.

    Module-level loggers (``playmark.lines``, ``playmark.converter``,
    ``playmark.pipeline``) are created at import time, so a caller that
    wants quieter output adjusts them here rather than per logger.  Loggers
    configured later without an explicit level pick up *level* as well.

    Returns the names of the loggers that were changed, sorted.

    >>> set_level("warning", prefix="playmark.nothing-configured")
    []
    """
    global _default_level

    resolved = _resolve_level(level)
    if prefix == "playmark":
        _default_level = resolved

    changed = sorted(
        name
        for name in _configured_loggers
        if name == prefix or name.startswith(prefix + ".")
    )
    for name in changed:
        logging.getLogger(name).setLevel(resolved)
    return changed
