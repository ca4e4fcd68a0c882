from __future__ import annotations

from typing import Any

from muggle_assert.errors import DEFAULT_MESSAGE, AssertionError
from muggle_assert.util.deep_equal import deep_equal


def assert_(condition: Any, message: str = DEFAULT_MESSAGE) -> None:
    """Fail unless ``condition`` is truthy."""
    if not condition:
        raise AssertionError(
            message,
            operator="true",
            stack_start_fn=assert_,
        )


def equal(actual: Any, expected: Any, message: str = "should be equal") -> None:
    """Fail unless ``actual`` and ``expected`` are deep-equal.

    No type coercion happens: ``equal(1, True)`` and ``equal(2, "2")`` fail.
    """
    if not deep_equal(actual, expected):
        raise AssertionError(
            message,
            operator="deepEqual",
            actual=actual,
            expected=expected,
            stack_start_fn=equal,
        )
