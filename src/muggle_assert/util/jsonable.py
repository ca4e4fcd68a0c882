from __future__ import annotations

import json
from typing import Any

_ELLIPSIS = "..."


def truncate(text: str, max_length: int | None) -> str:
    if max_length is None or len(text) <= max_length:
        return text
    return text[: max(max_length - len(_ELLIPSIS), 0)] + _ELLIPSIS


def to_jsonable(obj: Any, max_repr: int | None = None) -> Any:
    if obj is None or isinstance(obj, (bool, int, float)):
        return obj
    if isinstance(obj, str):
        return truncate(obj, max_repr)
    if isinstance(obj, dict) and all(isinstance(key, str) for key in obj):
        return {key: to_jsonable(obj[key], max_repr) for key in sorted(obj)}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(item, max_repr) for item in obj]
    return truncate(repr(obj), max_repr)


def canonical_dumps(obj: Any, max_repr: int | None = None) -> str:
    return json.dumps(
        to_jsonable(obj, max_repr),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
