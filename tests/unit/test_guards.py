"""Tests for guarded calls."""

import pytest

from regcheck.guards import GuardResult, capture, maybe, raises


def _boom():
    raise ValueError("boom")


class TestCapture:
    """Tests for capture."""

    def test_returns_value_when_no_error(self):
        result = capture(lambda: 42)

        assert result == GuardResult(occurred=False, value=42)
        assert result.error is None

    def test_captures_exception(self):
        result = capture(_boom)

        assert result.occurred
        assert isinstance(result.error, ValueError)

    def test_reraise_preserves_original(self):
        result = capture(_boom)

        with pytest.raises(ValueError, match="boom") as exc_info:
            result.reraise()
        assert exc_info.value is result.error

    def test_reraise_without_error_is_noop(self):
        capture(lambda: None).reraise()

    def test_keyboard_interrupt_not_captured(self):
        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            capture(interrupt)


class TestRaises:
    """Tests for raises."""

    def test_true_on_exception(self):
        assert raises(_boom) is True

    def test_false_without_exception(self):
        assert raises(lambda: None) is False

    def test_independent_between_calls(self):
        assert raises(_boom)
        assert not raises(lambda: None)


class TestMaybe:
    """Tests for maybe."""

    def test_no_error_returns_false(self):
        seen = []
        assert maybe(lambda: None, on_error=seen.append) is False
        assert seen == []

    def test_without_reraise_returns_true(self):
        seen = []

        assert maybe(_boom, reraise=False, on_error=seen.append) is True
        assert len(seen) == 1
        assert isinstance(seen[0], ValueError)

    def test_reraise_runs_callback_first(self):
        seen = []

        with pytest.raises(ValueError, match="boom"):
            maybe(_boom, reraise=True, on_error=seen.append)
        assert len(seen) == 1

    def test_reraise_is_default(self):
        with pytest.raises(ValueError):
            maybe(_boom)
