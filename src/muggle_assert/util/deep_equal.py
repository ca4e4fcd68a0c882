from __future__ import annotations

import inspect
import math
from collections.abc import Mapping
from typing import Any


def _fields(value: object) -> dict[str, Any]:
    return dict(getattr(value, "__dict__", {}))


def _set_equal(a: Any, b: Any) -> bool:
    if len(a) != len(b):
        return False
    remaining = list(b)
    for item in a:
        for idx, candidate in enumerate(remaining):
            if deep_equal(item, candidate):
                del remaining[idx]
                break
        else:
            return False
    return True


def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality without cross-type coercion.

    Values of different concrete types are never equal, so ``1`` and ``True``
    or ``0`` and ``0.0`` differ. Mappings and sets ignore order, sequences do
    not. Exceptions compare by type, ``args`` and instance attributes;
    functions, classes and modules compare by identity.
    """
    if a is b:
        return True
    if type(a) is not type(b):
        return False

    if isinstance(a, float):
        return a == b or (math.isnan(a) and math.isnan(b))
    if isinstance(a, Mapping):
        if a.keys() != b.keys():
            return False
        return all(deep_equal(a[key], b[key]) for key in a)
    if isinstance(a, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, (set, frozenset)):
        return _set_equal(a, b)
    if isinstance(a, BaseException):
        return deep_equal(a.args, b.args) and deep_equal(_fields(a), _fields(b))
    if isinstance(a, (str, bytes, bytearray, int, complex)):
        return a == b
    if inspect.isroutine(a) or inspect.isclass(a) or inspect.ismodule(a):
        return bool(a == b)
    if hasattr(a, "__dict__") and hasattr(b, "__dict__"):
        return deep_equal(_fields(a), _fields(b))
    return bool(a == b)
