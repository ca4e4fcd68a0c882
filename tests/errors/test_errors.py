from __future__ import annotations

import builtins

import muggle_assert
from muggle_assert import ASSERTION_ERROR_NAME, AssertionError, assert_, equal


def test_properties_are_set() -> None:
    error = AssertionError(
        "penguins",
        operator="('v')",
        expected="food",
        actual="snow",
    )

    assert error.name == "AssertionError"
    assert error.message == "penguins"
    assert error.operator == "('v')"
    assert error.expected == "food"
    assert error.actual == "snow"
    assert error.args == ("penguins",)
    assert str(error) == "penguins"


def test_is_builtin_assertion_error_and_exception() -> None:
    error = AssertionError()

    assert isinstance(error, builtins.AssertionError)
    assert isinstance(error, Exception)
    assert isinstance(error, muggle_assert.AssertionError)
    assert ASSERTION_ERROR_NAME == "AssertionError"


def test_message_defaults_when_missing_or_empty() -> None:
    assert AssertionError().message == "<Unnamed Assert>"
    assert AssertionError("").message == "<Unnamed Assert>"


def test_catchable_as_builtin() -> None:
    try:
        equal(1, 2)
    except builtins.AssertionError as exc:
        assert getattr(exc, "name", None) == ASSERTION_ERROR_NAME
        assert exc.operator == "deepEqual"
    else:
        raise builtins.AssertionError("equal(1, 2) should fail")


def test_stack_start_fn_trims_nested_frames() -> None:
    errors: list[AssertionError] = []

    def base() -> None:
        def nested() -> None:
            errors.append(AssertionError(stack_start_fn=base))

            def nested2() -> None:
                errors.append(AssertionError(stack_start_fn=base))

            nested2()

        nested()

    base()

    first, second = errors
    assert first.stack == second.stack
    assert "in base\n" not in first.stack
    assert "in nested\n" not in first.stack
    assert "in test_stack_start_fn_trims_nested_frames\n" in first.stack


def test_default_stack_omits_constructor() -> None:
    error = AssertionError("boom")

    assert error.stack is not None
    assert "in __init__\n" not in error.stack
    assert "in test_default_stack_omits_constructor\n" in error.stack


def test_operations_hide_their_own_frame() -> None:
    try:
        assert_(False)
    except AssertionError as exc:
        assert exc.stack is not None
        assert "in assert_\n" not in exc.stack
        assert "in test_operations_hide_their_own_frame\n" in exc.stack
    else:
        raise builtins.AssertionError("assert_(False) should fail")


def test_non_callable_start_falls_back_to_constructor() -> None:
    error = AssertionError("boom", stack_start_fn="not a function")  # type: ignore[arg-type]

    assert error.stack is not None
    assert "in __init__\n" not in error.stack
    assert "in test_non_callable_start_falls_back_to_constructor\n" in error.stack


def test_start_fn_absent_from_stack_gives_empty_stack() -> None:
    def never_called() -> None:
        return None

    error = AssertionError("boom", stack_start_fn=never_called)
    assert error.stack == ""


def test_repr_includes_payload() -> None:
    error = AssertionError("m", operator="deepEqual", expected=[1], actual=[2])

    assert repr(error) == "AssertionError(message='m', operator='deepEqual', expected=[1], actual=[2])"
