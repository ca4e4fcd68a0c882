from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, overload

from muggle_assert.errors import AssertionError
from muggle_assert.util.deep_equal import deep_equal


@dataclass(frozen=True)
class Outcome:
    """Whether a call completed normally or raised, and what it raised."""

    raised: bool
    error: BaseException | None = None


def capture_call(func: Callable[[], object]) -> Outcome:
    try:
        func()
    except Exception as exc:
        return Outcome(raised=True, error=exc)
    return Outcome(raised=False)


async def capture_await(awaitable: Awaitable[object]) -> Outcome:
    if not inspect.isawaitable(awaitable):
        return Outcome(raised=False)
    try:
        await awaitable
    except Exception as exc:
        return Outcome(raised=True, error=exc)
    return Outcome(raised=False)


def _stackless(value: Any) -> Any:
    if isinstance(value, BaseException):
        fields = {key: item for key, item in vars(value).items() if key != "stack"}
        return (type(value), value.args, fields)
    return value


def errors_match(actual: Any, expected: Any) -> bool:
    """Deep-compare two errors, ignoring their captured stacks.

    Neither object is modified.
    """
    return deep_equal(_stackless(actual), _stackless(expected))


def _passes(outcome: Outcome, expected_error: Any) -> bool:
    if not outcome.raised:
        return False
    if expected_error is None:
        return True
    return errors_match(outcome.error, expected_error)


def _split_args(expected_error: Any, message: str) -> tuple[Any, str]:
    if isinstance(expected_error, str):
        return None, expected_error
    return expected_error, message


@overload
def throws(func: Callable[[], object], message: str, /) -> None: ...


@overload
def throws(
    func: Callable[[], object],
    expected_error: BaseException | None = None,
    message: str = "should throw error",
) -> None: ...


def throws(
    func: Callable[[], object],
    expected_error: Any = None,
    message: str = "should throw error",
) -> None:
    """Fail unless calling ``func`` raises.

    When ``expected_error`` is given the raised error must also be deep-equal
    to it, stacks aside. A string second argument is taken as the message.
    """
    expected_error, message = _split_args(expected_error, message)

    outcome = capture_call(func)
    if not _passes(outcome, expected_error):
        raise AssertionError(
            message,
            operator="throws",
            actual=outcome.error,
            expected=expected_error,
            stack_start_fn=throws,
        )


@overload
async def rejects(awaitable: Awaitable[object], message: str, /) -> None: ...


@overload
async def rejects(
    awaitable: Awaitable[object],
    expected_error: BaseException | None = None,
    message: str = "promise should reject",
) -> None: ...


async def rejects(
    awaitable: Awaitable[object],
    expected_error: Any = None,
    message: str = "promise should reject",
) -> None:
    """Await ``awaitable`` and fail unless it raises.

    Same matching rules as :func:`throws`. There is no timeout: an awaitable
    that never settles keeps this coroutine pending.
    """
    expected_error, message = _split_args(expected_error, message)

    outcome = await capture_await(awaitable)
    if not _passes(outcome, expected_error):
        raise AssertionError(
            message,
            operator="rejects",
            actual=outcome.error,
            expected=expected_error,
            stack_start_fn=rejects,
        )
