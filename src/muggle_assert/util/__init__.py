from .deep_equal import deep_equal
from .jsonable import canonical_dumps, to_jsonable, truncate

__all__ = ["canonical_dumps", "deep_equal", "to_jsonable", "truncate"]
