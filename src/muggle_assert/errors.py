from __future__ import annotations

import builtins
from typing import Any, Callable

from .stack import get_stack_capture, resolve_code

ASSERTION_ERROR_NAME = "AssertionError"
DEFAULT_MESSAGE = "<Unnamed Assert>"


class AssertionError(builtins.AssertionError):
    """Failure raised by every assertion in this package.

    Subclasses the builtin ``AssertionError`` so test runners report it as an
    ordinary failed assertion. ``operator`` names the check that failed and
    ``expected``/``actual`` hold its diagnostic payload.

    ``stack`` is the captured call stack with every frame up to and including
    ``stack_start_fn`` removed. It defaults to this constructor, and wrappers
    pass their own entry point to hide their helper frames as well.
    """

    name = ASSERTION_ERROR_NAME

    def __init__(
        self,
        message: str | None = None,
        *,
        operator: str | None = None,
        expected: Any = None,
        actual: Any = None,
        stack_start_fn: Callable[..., Any] | None = None,
    ) -> None:
        if not message:
            message = DEFAULT_MESSAGE
        super().__init__(message)

        self.message = message
        self.operator = operator
        self.expected = expected
        self.actual = actual

        start: Any = stack_start_fn
        if start is None or resolve_code(start) is None:
            start = type(self).__init__
        self.stack = get_stack_capture().capture(start)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.name}(message={self.message!r}, operator={self.operator!r}, "
            f"expected={self.expected!r}, actual={self.actual!r})"
        )
