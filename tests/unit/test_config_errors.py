"""Tests for PlaymarkConfig validation and the error hierarchy."""
import pytest

from playmark.config import PlaymarkConfig
from playmark.errors import (
    ErrorCode,
    PlaymarkConversionError,
    PlaymarkError,
    PlaymarkMarkerError,
    PlaymarkResourceError,
)

# ── Config ─────────────────────────────────────────────────────────────


class TestPlaymarkConfig:
    def test_defaults(self):
        config = PlaymarkConfig()
        assert config.code_lines == "keep"
        assert config.unbalanced_marker_policy == "warn"
        assert config.strip_marker_space is False
        assert config.marker_order == "fence_first"
        assert config.metrics is None
        assert config.debug_dump_lines is False

    @pytest.mark.parametrize("value", ["keep", "drop"])
    def test_code_lines_accepted(self, value):
        assert PlaymarkConfig(code_lines=value).code_lines == value

    def test_code_lines_rejected(self):
        with pytest.raises(ValueError, match="code_lines"):
            PlaymarkConfig(code_lines="omit")

    @pytest.mark.parametrize("value", ["ignore", "warn", "raise"])
    def test_marker_policy_accepted(self, value):
        assert PlaymarkConfig(unbalanced_marker_policy=value).unbalanced_marker_policy == value

    def test_marker_policy_rejected(self):
        with pytest.raises(ValueError, match="unbalanced_marker_policy"):
            PlaymarkConfig(unbalanced_marker_policy="fix")

    @pytest.mark.parametrize("value", ["fence_first", "original"])
    def test_marker_order_accepted(self, value):
        assert PlaymarkConfig(marker_order=value).marker_order == value

    def test_marker_order_rejected(self):
        with pytest.raises(ValueError, match="marker_order"):
            PlaymarkConfig(marker_order="remainder_first")


# ── Errors ─────────────────────────────────────────────────────────────


class TestErrors:
    def test_error_codes_are_strings(self):
        assert ErrorCode.UNBALANCED_MARKER == "UNBALANCED_MARKER"

    def test_base_error_fields(self):
        cause = ValueError("inner")
        err = PlaymarkError("X", "outer", context={"k": 1}, cause=cause)
        assert str(err) == "outer"
        assert err.code == "X"
        assert err.context == {"k": 1}
        assert err.__cause__ is cause

    def test_context_defaults_to_empty_dict(self):
        assert PlaymarkError("X", "m").context == {}

    def test_repr_includes_context(self):
        err = PlaymarkResourceError("missing", context={"path": "a.md"})
        assert repr(err) == (
            "PlaymarkResourceError(code=<ErrorCode.RESOURCE_ERROR: 'RESOURCE_ERROR'>, "
            "message='missing', context={'path': 'a.md'})"
        )

    def test_repr_without_context(self):
        assert "context" not in repr(PlaymarkConversionError("bad"))

    def test_conversion_error_code(self):
        assert PlaymarkConversionError("bad").code == ErrorCode.CONVERSION_ERROR

    def test_marker_error_is_conversion_error(self):
        err = PlaymarkMarkerError("unbalanced", context={"line_number": 2})
        assert isinstance(err, PlaymarkConversionError)
        assert isinstance(err, PlaymarkError)
        assert err.code == ErrorCode.UNBALANCED_MARKER

    def test_resource_error_code(self):
        assert PlaymarkResourceError("gone").code == ErrorCode.RESOURCE_ERROR
