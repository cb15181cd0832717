"""Metrics hook protocol and no-op default implementation.

The converters report counters and timings through a :class:`MetricsHook`.
By default a :class:`NoopMetricsHook` is used.  Supply any object with the
same three methods via ``PlaymarkConfig(metrics=...)`` to route the data to
a real backend.

Emitted metric names:

* ``playmark.lines_scanned_total``       -- counter
* ``playmark.scan_failures_total``       -- counter
* ``playmark.markers_emitted_total``     -- counter (tag ``direction``)
* ``playmark.conversion_warnings_total`` -- counter (tag ``code``)
* ``playmark.conversion_duration_ms``    -- timing (tag ``direction``)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy."""

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment the counter *name* by *value*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration of *ms* milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set the gauge *name* to *value*."""
        ...


class NoopMetricsHook:
    """Metrics implementation that discards every data point."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
