"""Error hierarchy for playmark.

Every public error class inherits from :class:`PlaymarkError`.  Each carries
a machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable codes for errors and diagnostics."""

    CONVERSION_ERROR = "CONVERSION_ERROR"
    UNBALANCED_MARKER = "UNBALANCED_MARKER"
    UNTERMINATED_CODE = "UNTERMINATED_CODE"
    RESOURCE_ERROR = "RESOURCE_ERROR"
    SCAN_ERROR = "SCAN_ERROR"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class PlaymarkError(Exception):
    """Base exception for all playmark errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Conversion errors
# ---------------------------------------------------------------------------

class PlaymarkConversionError(PlaymarkError):
    """A document could not be converted.

    Context keys depend on the subclass.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
        code: str = ErrorCode.CONVERSION_ERROR,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            context=context,
            cause=cause,
        )


class PlaymarkMarkerError(PlaymarkConversionError):
    """A marker arrived in a mode where it makes no sense.

    Only raised when ``unbalanced_marker_policy="raise"``; otherwise the
    same condition is recorded as a :class:`~playmark.models.ConversionWarning`.

    Context keys: ``line_number``, ``line``, ``mode``, ``warning``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            message=message,
            context=context,
            cause=cause,
            code=ErrorCode.UNBALANCED_MARKER,
        )


# ---------------------------------------------------------------------------
# Resource errors
# ---------------------------------------------------------------------------

class PlaymarkResourceError(PlaymarkError):
    """The source document could not be read or decoded.

    Context keys: ``path``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.RESOURCE_ERROR,
            message=message,
            context=context,
            cause=cause,
        )
