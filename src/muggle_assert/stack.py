"""Call-stack capture for assertion failures.

A capture strategy turns the live call stack into text, dropping every frame
up to and including the one running a designated start function. That way a
failure points at the test code that called the assertion rather than at the
assertion helpers themselves.

The strategy is chosen once when this module is imported and may be swapped
with :func:`set_stack_capture` (or through :func:`muggle_assert.configure`).
"""

from __future__ import annotations

import inspect
import logging
import sys
import traceback
from types import CodeType, FrameType
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)


class StackCapture(Protocol):
    def capture(self, start_fn: Callable[..., Any]) -> str | None: ...


def resolve_code(start_fn: object) -> CodeType | None:
    """Return the code object whose frame marks the start of the trimmed stack."""
    if isinstance(start_fn, type):
        start_fn = start_fn.__init__
    if not callable(start_fn):
        return None
    target = start_fn
    if inspect.ismethod(target):
        target = target.__func__
    return getattr(target, "__code__", None)


class NullStackCapture:
    """Used where the interpreter offers no frame introspection."""

    def capture(self, start_fn: Callable[..., Any]) -> str | None:
        return None


class FrameStackCapture:
    def __init__(self, limit: int | None = None) -> None:
        self.limit = limit

    def capture(self, start_fn: Callable[..., Any]) -> str | None:
        code = resolve_code(start_fn)
        if code is None:
            return ""
        frame: FrameType | None = sys._getframe(1)
        while frame is not None and frame.f_code is not code:
            frame = frame.f_back
        if frame is None or frame.f_back is None:
            return ""
        summary = traceback.StackSummary.extract(
            traceback.walk_stack(frame.f_back),
            limit=self.limit,
        )
        summary.reverse()
        return "".join(summary.format())


def default_stack_capture(limit: int | None = None) -> StackCapture:
    if hasattr(sys, "_getframe"):
        return FrameStackCapture(limit=limit)
    logger.debug("Frame introspection unavailable; stack capture disabled")
    return NullStackCapture()


_active: StackCapture = default_stack_capture()


def get_stack_capture() -> StackCapture:
    return _active


def set_stack_capture(capture: StackCapture | None) -> StackCapture:
    """Install ``capture`` process-wide and return the previous strategy.

    Passing ``None`` restores the default strategy.
    """
    global _active
    previous = _active
    _active = capture if capture is not None else default_stack_capture()
    logger.debug("Stack capture strategy set to %s", type(_active).__name__)
    return previous
