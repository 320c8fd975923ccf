"""Guarded calls for probing whether a subject fails loudly.

A subject "fails loudly" by raising any Exception. BaseException subclasses
that are not Exceptions (KeyboardInterrupt, SystemExit) are never captured.
Each guard is scoped to a single call and keeps no state between calls.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from loguru import logger


@dataclass(frozen=True)
class GuardResult:
    """Outcome of a guarded call."""

    occurred: bool
    error: Exception | None = None
    value: Any = None

    def reraise(self) -> None:
        """Re-raise the captured exception, if any."""
        if self.error is not None:
            raise self.error


def capture(func: Callable[[], Any]) -> GuardResult:
    """Call func and capture any exception it raises.

    Args:
        func: Zero-argument callable to invoke.

    Returns:
        GuardResult with occurred=True and the exception if func raised,
        otherwise occurred=False and func's return value.
    """
    try:
        value = func()
    except Exception as e:
        logger.debug(f"Guarded call raised {type(e).__name__}: {e}")
        return GuardResult(occurred=True, error=e)
    return GuardResult(occurred=False, value=value)


def raises(func: Callable[[], Any]) -> bool:
    """Return True if func raised an exception."""
    return capture(func).occurred


def maybe(
    func: Callable[[], Any],
    *,
    reraise: bool = True,
    on_error: Callable[[Exception], None] | None = None,
) -> bool:
    """Call func, record a failure, and optionally propagate it.

    Args:
        func: Zero-argument callable to invoke.
        reraise: If True, the original exception is re-raised after on_error
            has run, so the caller still sees the original failure context.
        on_error: Called with the exception before any re-raise.

    Returns:
        True if func raised and reraise is False, False if it did not raise.
    """
    result = capture(func)
    if not result.occurred:
        return False
    if on_error is not None:
        assert result.error is not None
        on_error(result.error)
    if reraise:
        result.reraise()
    return True


__all__ = ["GuardResult", "capture", "maybe", "raises"]
