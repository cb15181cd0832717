"""Marker-balance reporting shared by both converters."""

from __future__ import annotations

from typing import Any

from playmark.config import PlaymarkConfig
from playmark.errors import PlaymarkMarkerError
from playmark.models import ConversionWarning
from playmark.observability import get_logger

log = get_logger("playmark.converter")


def report_marker_issue(
    config: PlaymarkConfig,
    warnings: list[ConversionWarning],
    metrics: Any,
    *,
    code: str,
    message: str,
    context: dict[str, Any],
) -> None:
    """Apply ``config.unbalanced_marker_policy`` to one marker problem.

    Under ``"warn"`` a :class:`ConversionWarning` is appended to *warnings*,
    counted, and logged.  Under ``"raise"`` a
    :class:`~playmark.errors.PlaymarkMarkerError` is raised instead.
    """
    policy = config.unbalanced_marker_policy
    if policy == "ignore":
        return
    if policy == "raise":
        raise PlaymarkMarkerError(message, context={**context, "warning": code})

    warnings.append(ConversionWarning(code=code, message=message, context=context))
    metrics.increment("playmark.conversion_warnings_total", tags={"code": code})
    log.warning(message, extra={"extra_fields": {"code": code, **context}})
